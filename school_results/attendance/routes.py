import logging

from flask import jsonify

from school_results.attendance.summary import (
    build_attendance_history,
    filter_dates,
    sorted_dates,
    summarize_date,
    summarize_student,
)
from school_results.grading.cohort import roster_entries
from school_results.utils.payloads import PayloadError, dict_field, json_body, list_field
from . import attendance_bp

logger = logging.getLogger(__name__)


def _optional_text(data, name):
    value = data.get(name)
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        raise PayloadError(f"'{name}' must be a string")
    return value


@attendance_bp.route("/summary", methods=["POST"])
def attendance_summary():
    data = json_body()
    roster = list_field(data, "students")
    sheet = dict_field(data, "dates")

    history = build_attendance_history(roster, sheet)
    dates = filter_dates(
        sorted_dates(sheet),
        month=_optional_text(data, "month"),
        date=_optional_text(data, "date"),
        weekday=_optional_text(data, "weekday"),
    )

    students = []
    for student in roster_entries(roster):
        student_history = history[student.student_id]
        row = student.to_dict()
        row["attendance"] = {d: student_history[d] for d in dates}
        row["summary"] = summarize_student(student_history, dates).to_dict()
        students.append(row)

    logger.info("Attendance summary for %d students over %d dates", len(students), len(dates))

    return jsonify({"dates": dates, "students": students})


@attendance_bp.route("/date-summary", methods=["POST"])
def attendance_date_summary():
    data = json_body()
    roster = list_field(data, "students")
    sheet = dict_field(data, "dates")
    date = _optional_text(data, "date")
    if date is None:
        raise PayloadError("'date' is required")

    summary = summarize_date(roster, sheet, date)
    return jsonify(dict(date=date, **summary.to_dict()))
