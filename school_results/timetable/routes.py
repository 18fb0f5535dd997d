from flask import current_app, jsonify

from school_results.timetable.slots import (
    DAYS,
    MAX_COURSES,
    align_schedule,
    generate_time_slots,
    schedule_summary,
)
from school_results.utils.payloads import (
    PayloadError,
    dict_field,
    int_field,
    json_body,
    list_field,
)
from . import timetable_bp


@timetable_bp.route("/slots", methods=["POST"])
def time_slots():
    data = json_body()
    cfg = current_app.config

    # Empty strings fall back to the configured school day, like the form did
    slots = generate_time_slots(
        start=data.get("startTime") or cfg["SCHOOL_DAY_START"],
        end=data.get("endTime") or cfg["SCHOOL_DAY_END"],
        break_time=data.get("breakTime") or cfg["BREAK_TIME"],
        lunch_time=data.get("lunchTime") or cfg["LUNCH_TIME"],
        courses_before=int_field(data, "coursesBeforeBreak", cfg["COURSES_BEFORE_BREAK"],
                                 minimum=0, maximum=MAX_COURSES),
        courses_after=int_field(data, "coursesAfterBreak", cfg["COURSES_AFTER_BREAK"],
                                minimum=0, maximum=MAX_COURSES),
    )

    days = list_field(data, "days", required=False) or list(DAYS)
    unknown = [d for d in days if d not in DAYS]
    if unknown:
        raise PayloadError(f"Unknown days: {', '.join(map(str, unknown))}")

    schedule = align_schedule(dict_field(data, "schedule", required=False), slots, days)

    return jsonify({
        "timeSlots": slots,
        "schedule": schedule,
        "summary": schedule_summary(schedule, slots, days),
    })
