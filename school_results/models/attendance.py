from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceSummary:
    present: int = 0
    absent: int = 0
    not_recorded: int = 0

    def to_dict(self):
        return {
            "present": self.present,
            "absent": self.absent,
            "notRecorded": self.not_recorded,
        }
