from school_results.models.assessment import StudentMetrics
from school_results.utils.academic import round_half_up


def average_of(subject_values, places=2):
    values = list((subject_values or {}).values())
    if not values:
        return 0
    return round_half_up(sum(values) / len(values), places)


def rank_of(value, cohort_values):
    """1-based position of ``value`` among the distinct cohort values, highest first.

    Equal values share a rank and the next lower value takes the next
    integer: [90, 90, 85] ranks as 1, 1, 2. ``value`` must be one of
    ``cohort_values``.
    """
    if not cohort_values:
        return 0

    distinct = sorted(set(cohort_values), reverse=True)
    return distinct.index(value) + 1


def compute_metrics(subject_values, cohort_averages, places=2):
    subject_values = subject_values or {}

    total = round_half_up(sum(subject_values.values()), places) if subject_values else 0
    average = average_of(subject_values, places)

    return StudentMetrics(
        total=total,
        average=average,
        rank=rank_of(average, cohort_averages),
    )
