import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext


def get_current_semester():
    month = datetime.now().month

    if 2 <= month <= 7:
        return 2
    return 1


def get_current_session():
    year = datetime.now().year
    month = datetime.now().month

    if month >= 9:
        return f"{year}/{year+1}"
    else:
        return f"{year-1}/{year}"


def round_half_up(value, places=2):
    """Round ``value`` to ``places`` decimals, halves away from zero.

    Goes through ``str`` so 80.125 rounds to 80.13 instead of inheriting
    the binary float error of ``round()``. Raises ValueError for infinity
    and NaN.
    """
    number = Decimal(str(value))
    if not number.is_finite():
        raise ValueError(f"Cannot round non-finite value {value!r}")

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize needs a digit of precision for every integer digit
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return float(number.quantize(quantum, rounding=ROUND_HALF_UP))


def to_number(value):
    """Return ``value`` as a float, or None when it is not a usable number."""
    if value is None or isinstance(value, bool):
        return None

    try:
        number = float(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError):
        return None

    # "1e400" parses as a Decimal but overflows the float
    if not math.isfinite(number):
        return None

    return number


def parse_iso_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    try:
        return date.fromisoformat(str(value).strip()[:10])
    except (TypeError, ValueError):
        return None


def within_window(value, start, end):
    """Inclusive check of an ISO date against ``start``/``end`` dates."""
    day = parse_iso_date(value)

    if day is None:
        return False

    return start <= day <= end
