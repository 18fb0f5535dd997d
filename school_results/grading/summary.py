import pandas as pd

from school_results.models.assessment import ClassSummary
from school_results.utils.academic import round_half_up

GRADE_BOUNDARIES = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)


def letter_grade(average):
    for floor, grade in GRADE_BOUNDARIES:
        if average >= floor:
            return grade
    return "F"


def class_summary(results, places=2):
    """Average score, pass rate and head count over a list of StudentResult.

    A student passes here when their letter grade is anything but F.
    """
    results = list(results or ())
    if not results:
        return ClassSummary()

    averages = [r.metrics.average for r in results]
    passed = sum(1 for avg in averages if letter_grade(avg) != "F")

    return ClassSummary(
        average_score=round_half_up(sum(averages) / len(averages), places),
        pass_rate=round_half_up(passed / len(results) * 100, places),
        student_count=len(results),
    )


def results_frame(results, subjects):
    """Rank-ordered results table, one row per student."""
    columns = ["student_id", "full_name", "section", *subjects,
               "total", "average", "rank", "grade", "pass_fail"]

    rows = []
    for r in results or ():
        row = {
            "student_id": r.student.student_id,
            "full_name": r.student.full_name,
            "section": r.student.section,
            "total": r.metrics.total,
            "average": r.metrics.average,
            "rank": r.metrics.rank,
            "grade": letter_grade(r.metrics.average),
            "pass_fail": r.metrics.pass_fail,
        }
        for subject in subjects:
            row[subject] = r.scores.get(subject, 0)
        rows.append(row)

    df = pd.DataFrame(rows, columns=columns)
    if df.empty:
        return df

    return df.sort_values(["rank", "full_name"], kind="mergesort").reset_index(drop=True)
