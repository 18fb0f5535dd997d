from dataclasses import dataclass, field
from typing import Dict, Optional

from school_results.models.academic import RosterEntry

PASS = "Pass"
FAIL = "Fail"


# ---------------- METRICS ---------------- #

@dataclass(frozen=True)
class StudentMetrics:
    total: float = 0.0
    average: float = 0.0
    rank: int = 0
    pass_fail: Optional[str] = None

    def to_dict(self):
        return {
            "total": self.total,
            "average": self.average,
            "rank": self.rank,
            "passFail": self.pass_fail,
        }


# ---------------- RESULTS ---------------- #

@dataclass(frozen=True)
class StudentResult:
    """One student's derived result for a cohort.

    ``scores``/``metrics`` describe the first period. The ``second_*`` fields
    and ``combined`` are only set when the cohort has second-period data;
    ``second_metrics.rank`` is the rank of ``combined`` (sum of both period
    averages) among the cohort.
    """

    student: RosterEntry
    scores: Dict[str, float] = field(default_factory=dict)
    metrics: StudentMetrics = field(default_factory=StudentMetrics)
    second_scores: Optional[Dict[str, float]] = None
    second_metrics: Optional[StudentMetrics] = None
    combined: Optional[float] = None

    @property
    def pass_fail(self):
        return self.metrics.pass_fail

    def to_dict(self):
        data = self.student.to_dict()
        data["scores"] = dict(self.scores)
        data.update(self.metrics.to_dict())

        if self.second_metrics is not None:
            data["secondPeriod"] = {
                "scores": dict(self.second_scores or {}),
                "total": self.second_metrics.total,
                "average": self.second_metrics.average,
                "combined": self.combined,
                "rank": self.second_metrics.rank,
            }
        else:
            data["secondPeriod"] = None

        return data


@dataclass(frozen=True)
class ClassSummary:
    average_score: float = 0.0
    pass_rate: float = 0.0
    student_count: int = 0

    def to_dict(self):
        return {
            "averageScore": self.average_score,
            "passRate": self.pass_rate,
            "studentCount": self.student_count,
        }
