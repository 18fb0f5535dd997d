from school_results.models.academic import RosterEntry, ScoreEntry
from school_results.models.assessment import (
    FAIL,
    PASS,
    ClassSummary,
    StudentMetrics,
    StudentResult,
)
from school_results.models.attendance import AttendanceSummary

__all__ = [
    "AttendanceSummary",
    "ClassSummary",
    "FAIL",
    "PASS",
    "RosterEntry",
    "ScoreEntry",
    "StudentMetrics",
    "StudentResult",
]
