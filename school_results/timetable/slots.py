DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

UNASSIGNED = "-"
BREAK = "Break"
LUNCH = "Lunch"

# Lessons requested on either side of the break
MAX_COURSES = 24


def parse_time(value):
    """Split ``HH:MM`` into an (hour, minute) tuple."""
    try:
        hour, minute = (int(part) for part in str(value).strip().split(":"))
    except ValueError:
        raise ValueError(f"Invalid time {value!r}, expected HH:MM") from None

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"Invalid time {value!r}, expected HH:MM")

    return hour, minute


def generate_time_slots(
    start="08:00",
    end="15:00",
    break_time="11:00",
    lunch_time="12:00",
    courses_before=2,
    courses_after=2,
):
    """One-hour lesson slots around a break and a lunch marker.

    Lessons start at ``start`` and keep its minute; each slot is exactly one
    hour, wrapping at midnight. Markers read ``HH:MM-Break`` and
    ``HH:MM-Lunch``. Passing None for ``break_time`` or ``lunch_time`` leaves
    that marker out. The returned list is sorted as text.
    """
    end_hour, end_minute = parse_time(end)
    break_at = parse_time(break_time) if break_time else None
    lunch_at = parse_time(lunch_time) if lunch_time else None
    hour, minute = parse_time(start)

    slots = []

    def add_lesson(h, m):
        next_hour = (h + 1) % 24
        slots.append(f"{h:02d}:{m:02d}-{next_hour:02d}:{m:02d}")
        return next_hour

    for _ in range(min(courses_before, MAX_COURSES)):
        if hour >= end_hour and minute >= end_minute:
            break
        if (hour, minute) in (break_at, lunch_at):
            break
        hour = add_lesson(hour, minute)

    if break_at and hour <= break_at[0] < end_hour:
        slots.append(f"{hour:02d}:{minute:02d}-{BREAK}")
        hour, minute = break_at

    if lunch_at:
        while hour < lunch_at[0] and hour < end_hour:
            hour = add_lesson(hour, minute)

        if hour <= lunch_at[0] < end_hour:
            slots.append(f"{lunch_at[0]:02d}:{lunch_at[1]:02d}-{LUNCH}")
            hour = lunch_at[0] + 1

    for _ in range(min(courses_after, MAX_COURSES)):
        if hour >= end_hour and minute >= end_minute:
            break
        hour = add_lesson(hour, minute)

    return sorted(slots)


def _marker_label(slot):
    if BREAK in slot or LUNCH in slot:
        return slot.split("-")[-1]
    return UNASSIGNED


def _day_cells(schedule, day):
    cells = (schedule or {}).get(day)
    return cells if isinstance(cells, dict) else {}


def align_schedule(schedule, slots, days=DAYS):
    """Re-key a weekly schedule onto ``slots``, keeping existing assignments."""
    schedule = schedule or {}
    aligned = {}

    for day in days:
        existing = _day_cells(schedule, day)
        aligned[day] = {slot: existing.get(slot) or _marker_label(slot) for slot in slots}

    return aligned


def schedule_summary(schedule, slots, days=DAYS):
    # Break and lunch cells are counted too
    total_hours = 0
    subjects = set()

    for day in days:
        day_schedule = _day_cells(schedule, day)
        for slot in slots:
            subject = day_schedule.get(slot)
            if subject and subject != UNASSIGNED:
                total_hours += 1
                subjects.add(subject)

    return {"totalHours": total_hours, "uniqueSubjects": len(subjects)}
