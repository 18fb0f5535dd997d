import pytest

from school_results.grading.cohort import (
    compute_cohort_results,
    compute_period_results,
    filter_by_window,
)

SUBJECTS = ["Math", "Science"]


def _by_id(results):
    return {r.student.student_id: r for r in results}


def test_single_period_cohort(roster, period1_entries):
    results = _by_id(compute_cohort_results(roster, SUBJECTS, period1_entries))

    a, b, c = results["S001"], results["S002"], results["S003"]
    assert a.scores == {"Math": 95, "Science": 80}
    assert (a.metrics.total, a.metrics.average, a.metrics.rank) == (175, 87.5, 1)
    assert (b.metrics.total, b.metrics.average, b.metrics.rank) == (140, 70, 2)
    assert (c.metrics.total, c.metrics.average, c.metrics.rank) == (0, 0, 3)
    assert c.scores == {"Math": 0, "Science": 0}


def test_single_period_leaves_pass_fail_unset(roster, period1_entries):
    for result in compute_cohort_results(roster, SUBJECTS, period1_entries):
        assert result.pass_fail is None
        assert result.second_metrics is None
        assert result.combined is None


def test_results_keep_roster_order(roster, period1_entries):
    results = compute_period_results(list(reversed(roster)), SUBJECTS, period1_entries)
    assert [r.student.student_id for r in results] == ["S003", "S002", "S001"]


def test_tied_students_share_rank(roster):
    entries = [
        {"studentId": "S001", "subject": "Math", "score": 90},
        {"studentId": "S002", "subject": "Math", "score": 90},
        {"studentId": "S003", "subject": "Math", "score": 85},
    ]
    results = _by_id(compute_period_results(roster, ["Math"], entries))

    assert results["S001"].metrics.rank == 1
    assert results["S002"].metrics.rank == 1
    assert results["S003"].metrics.rank == 2


def test_second_period_ranks_by_sum_and_classifies_by_mean(roster, period1_entries):
    period2 = [
        {"studentId": "S001", "subject": "Math", "score": 60},
        {"studentId": "S001", "subject": "Science", "score": 60},
        {"studentId": "S002", "subject": "Math", "score": 90},
        {"studentId": "S002", "subject": "Science", "score": 90},
    ]
    results = _by_id(compute_cohort_results(roster, SUBJECTS, period1_entries, period2))

    a, b, c = results["S001"], results["S002"], results["S003"]

    assert a.combined == 147.5
    assert b.combined == 160
    assert c.combined == 0

    assert b.second_metrics.rank == 1
    assert a.second_metrics.rank == 2
    assert c.second_metrics.rank == 3

    # First-period ranks are untouched
    assert a.metrics.rank == 1
    assert b.metrics.rank == 2

    assert a.pass_fail == "Pass"
    assert b.pass_fail == "Pass"
    assert c.pass_fail == "Fail"
    assert a.second_metrics.pass_fail == "Pass"
    assert a.second_scores == {"Math": 60, "Science": 60}


def test_pass_fail_boundary_in_cohort(roster):
    period1 = [{"studentId": "S001", "subject": "Math", "score": 50}]
    period2 = [{"studentId": "S001", "subject": "Math", "score": 50}]

    results = _by_id(compute_cohort_results(roster, ["Math"], period1, period2))
    assert results["S001"].pass_fail == "Fail"


def test_empty_second_period_does_not_exist(roster, period1_entries):
    for period2 in ([], [{"studentId": "S999", "subject": "Math", "score": 99}]):
        results = compute_cohort_results(roster, SUBJECTS, period1_entries, period2)
        assert all(r.pass_fail is None for r in results)
        assert all(r.second_metrics is None for r in results)


def test_scores_for_unknown_or_missing_students_are_ignored(roster):
    entries = [
        {"studentId": "S001", "subject": "Math", "score": 80},
        {"studentId": "S999", "subject": "Math", "score": 100},
        {"subject": "Math", "score": 100},
    ]
    results = _by_id(compute_period_results(roster, ["Math"], entries))

    assert results["S001"].metrics.rank == 1
    assert "S999" not in results


def test_duplicate_roster_entries_are_collapsed(period1_entries):
    roster = [{"studentId": "S001"}, {"studentId": "S001"}, {"fullName": "No Id"}]
    results = compute_period_results(roster, SUBJECTS, period1_entries)
    assert [r.student.student_id for r in results] == ["S001"]


def test_empty_cohort():
    assert compute_cohort_results([], SUBJECTS, []) == []


def test_date_window_is_inclusive(period1_entries):
    kept = filter_by_window(period1_entries, "2025-08-02", "2025-08-02")
    assert [(e.student_id, e.score) for e in kept] == [("S001", 100)]


def test_date_window_needs_both_bounds(period1_entries):
    assert len(filter_by_window(period1_entries, "2025-08-02", None)) == 5
    assert len(filter_by_window(period1_entries, None, "2025-08-01")) == 5


def test_date_window_drops_undated_entries():
    entries = [
        {"studentId": "S001", "subject": "Math", "score": 80, "date": "2025-08-01"},
        {"studentId": "S001", "subject": "Math", "score": 40},
        {"studentId": "S001", "subject": "Math", "score": 40, "date": "yesterday"},
    ]
    kept = filter_by_window(entries, "2025-08-01", "2025-08-31")
    assert [e.score for e in kept] == [80]


def test_inverted_date_window_is_rejected(period1_entries):
    with pytest.raises(ValueError):
        filter_by_window(period1_entries, "2025-08-03", "2025-08-01")


def test_cohort_window_applies_to_aggregation(roster, period1_entries):
    results = _by_id(
        compute_cohort_results(
            roster, SUBJECTS, period1_entries, start="2025-08-01", end="2025-08-01"
        )
    )
    assert results["S001"].scores == {"Math": 90, "Science": 80}
    assert results["S001"].metrics.average == 85
