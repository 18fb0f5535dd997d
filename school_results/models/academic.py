from dataclasses import dataclass
from typing import Optional

from school_results.utils.academic import to_number

# ---------------- STUDENTS ---------------- #

@dataclass(frozen=True)
class RosterEntry:
    student_id: str
    full_name: str = ""
    section: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build from a roster document; returns None when there is no id."""
        if not isinstance(data, dict):
            return None

        student_id = data.get("studentId", data.get("stuId"))
        if student_id in (None, ""):
            return None

        return cls(
            student_id=str(student_id),
            full_name=str(data.get("fullName") or ""),
            section=str(data.get("section") or ""),
        )

    def to_dict(self):
        return {
            "studentId": self.student_id,
            "fullName": self.full_name,
            "section": self.section,
        }


# ---------------- SCORES ---------------- #

@dataclass(frozen=True)
class ScoreEntry:
    student_id: Optional[str]
    subject: str
    score: float
    date: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        """Build from a score document.

        Missing subject or a score that is not a number make the record
        unusable and None is returned. The student id and date may be absent.
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            return None

        subject = data.get("subject")
        score = to_number(data.get("score"))
        if not subject or score is None:
            return None

        student_id = data.get("studentId", data.get("stuId"))
        date = data.get("date")

        return cls(
            student_id=str(student_id) if student_id not in (None, "") else None,
            subject=str(subject),
            score=score,
            date=str(date) if date else None,
        )
