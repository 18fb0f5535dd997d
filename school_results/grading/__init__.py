"""Pure result computations: aggregation, ranking, pass/fail and summaries.

Nothing in this package performs I/O. Callers fetch the roster and score
records, pass them in, and persist whatever they need from the returned
value objects.
"""

from school_results.grading.aggregation import aggregate
from school_results.grading.classification import PASS_MARK, classify
from school_results.grading.cohort import (
    compute_cohort_results,
    compute_period_results,
    filter_by_window,
)
from school_results.grading.metrics import compute_metrics, rank_of
from school_results.grading.summary import class_summary, letter_grade, results_frame

__all__ = [
    "PASS_MARK",
    "aggregate",
    "class_summary",
    "classify",
    "compute_cohort_results",
    "compute_metrics",
    "compute_period_results",
    "filter_by_window",
    "letter_grade",
    "rank_of",
    "results_frame",
]
