import logging

from school_results.grading.cohort import roster_entries
from school_results.models.attendance import AttendanceSummary
from school_results.utils.academic import parse_iso_date

logger = logging.getLogger(__name__)

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _status(value):
    # Anything other than an explicit true/false counts as not recorded
    if value is True or value is False:
        return value
    return None


def sorted_dates(sheet):
    """Sheet dates in calendar order; unparseable keys go last."""
    dates = list((sheet or {}).keys())
    return sorted(dates, key=lambda d: (parse_iso_date(d) is None, parse_iso_date(d) or d))


def _records_by_student(records):
    by_student = {}
    if not isinstance(records, (list, tuple)):
        return by_student

    for record in records:
        if not isinstance(record, dict):
            continue
        stu_id = record.get("stuId", record.get("studentId"))
        if stu_id in (None, ""):
            continue
        by_student[str(stu_id)] = _status(record.get("status"))
    return by_student


def build_attendance_history(roster, sheet):
    """Map each student id to ``{date: status}`` over every sheet date.

    ``sheet`` is ``{date: [{"stuId": ..., "status": True/False/None}]}``.
    A student without a record on a date gets None for it.
    """
    students = roster_entries(roster)
    dates = sorted_dates(sheet)
    per_date = {d: _records_by_student(sheet[d]) for d in dates}

    history = {}
    for student in students:
        history[student.student_id] = {
            d: per_date[d].get(student.student_id) for d in dates
        }

    logger.debug("Built attendance history for %d students over %d dates",
                 len(students), len(dates))
    return history


def filter_dates(dates, month=None, date=None, weekday=None):
    """Filter ISO dates by month (``YYYY-MM``), exact date and weekday name."""
    weekday = weekday.strip().lower() if weekday else None
    matched = []

    for d in dates or ():
        day = parse_iso_date(d)

        if month or weekday:
            if day is None:
                continue
            if month and day.strftime("%Y-%m") != month:
                continue
            if weekday and WEEKDAYS[day.weekday()] != weekday:
                continue

        if date and d != date:
            continue

        matched.append(d)

    return matched


def summarize_student(history, dates=None):
    """Count present, absent and not-recorded days for one student's history."""
    history = history or {}
    if dates is None:
        dates = list(history)

    statuses = [history.get(d) for d in dates if d in history]

    return AttendanceSummary(
        present=sum(1 for s in statuses if s is True),
        absent=sum(1 for s in statuses if s is False),
        not_recorded=sum(1 for s in statuses if s is None),
    )


def summarize_date(roster, sheet, date):
    """Counts across the whole roster for a single date."""
    students = roster_entries(roster)
    records = _records_by_student((sheet or {}).get(date))
    statuses = [records.get(s.student_id) for s in students]

    return AttendanceSummary(
        present=sum(1 for s in statuses if s is True),
        absent=sum(1 for s in statuses if s is False),
        not_recorded=sum(1 for s in statuses if s is None),
    )
