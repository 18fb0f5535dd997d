import logging
from collections import defaultdict

from school_results.grading.aggregation import aggregate, usable_entries
from school_results.grading.classification import PASS_MARK, classify
from school_results.grading.metrics import compute_metrics, rank_of
from school_results.models.academic import RosterEntry
from school_results.models.assessment import StudentMetrics, StudentResult
from school_results.utils.academic import parse_iso_date, round_half_up, within_window

logger = logging.getLogger(__name__)


def roster_entries(roster):
    """Normalize a roster to RosterEntry objects, skipping records without an id."""
    entries = []
    seen = set()

    for raw in roster or ():
        student = raw if isinstance(raw, RosterEntry) else RosterEntry.from_dict(raw)
        if student is None or student.student_id in seen:
            continue
        seen.add(student.student_id)
        entries.append(student)

    return entries


def filter_by_window(score_entries, start=None, end=None):
    """Keep entries dated inside the inclusive ``start``..``end`` window.

    The window only applies when both bounds are given. Entries whose date
    cannot be read are dropped while it applies.
    """
    entries = list(usable_entries(score_entries))

    if not start or not end:
        return entries

    start_day = parse_iso_date(start)
    end_day = parse_iso_date(end)
    if start_day is None or end_day is None:
        raise ValueError("Start and end dates must be ISO dates (YYYY-MM-DD)")
    if start_day > end_day:
        raise ValueError("Start date must be on or before end date")

    return [e for e in entries if within_window(e.date, start_day, end_day)]


def group_by_student(score_entries):
    grouped = defaultdict(list)

    for entry in usable_entries(score_entries):
        if entry.student_id is None:
            continue
        grouped[entry.student_id].append(entry)

    return grouped


def _period_scores(students, subjects, score_entries, places):
    grouped = group_by_student(score_entries)

    unknown = set(grouped) - {s.student_id for s in students}
    if unknown:
        logger.debug("Ignoring scores for %d students outside the roster", len(unknown))

    return {
        s.student_id: aggregate(grouped.get(s.student_id, ()), subjects, places)
        for s in students
    }, bool(set(grouped) - unknown)


def compute_period_results(roster, subjects, score_entries, places=2):
    """Aggregate and rank one period for every roster student.

    All cohort averages are computed before any rank is assigned.
    """
    students = roster_entries(roster)
    scores, _ = _period_scores(students, subjects, score_entries, places)

    partial = {sid: compute_metrics(values, [], places) for sid, values in scores.items()}
    cohort_averages = [m.average for m in partial.values()]

    return [
        StudentResult(
            student=s,
            scores=scores[s.student_id],
            metrics=compute_metrics(scores[s.student_id], cohort_averages, places),
        )
        for s in students
    ]


def compute_cohort_results(
    roster,
    subjects,
    period1_entries,
    period2_entries=None,
    start=None,
    end=None,
    pass_mark=PASS_MARK,
    places=2,
):
    """Results for a cohort over one or two periods.

    When the second period has data for at least one roster student, each
    result also carries second-period metrics ranked by the *sum* of both
    period averages, and a pass/fail decided on their *mean*.
    """
    period1_entries = filter_by_window(period1_entries, start, end)
    first = compute_period_results(roster, subjects, period1_entries, places)

    if period2_entries is None:
        return first

    period2_entries = filter_by_window(period2_entries, start, end)
    students = [r.student for r in first]
    second_scores, has_second = _period_scores(students, subjects, period2_entries, places)

    if not has_second:
        logger.debug("No second-period data for cohort; pass/fail left unset")
        return first

    second = {
        sid: compute_metrics(values, [], places) for sid, values in second_scores.items()
    }
    combined = {
        r.student.student_id: round_half_up(
            r.metrics.average + second[r.student.student_id].average, places
        )
        for r in first
    }
    combined_values = list(combined.values())

    results = []
    for r in first:
        sid = r.student.student_id
        pass_fail = classify(r.metrics.average, second[sid].average, pass_mark)

        results.append(
            StudentResult(
                student=r.student,
                scores=r.scores,
                metrics=StudentMetrics(
                    total=r.metrics.total,
                    average=r.metrics.average,
                    rank=r.metrics.rank,
                    pass_fail=pass_fail,
                ),
                second_scores=second_scores[sid],
                second_metrics=StudentMetrics(
                    total=second[sid].total,
                    average=second[sid].average,
                    rank=rank_of(combined[sid], combined_values),
                    pass_fail=pass_fail,
                ),
                combined=combined[sid],
            )
        )

    return results
