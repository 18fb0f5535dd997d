from decimal import Decimal

from school_results.models.assessment import FAIL, PASS

PASS_MARK = 50


def classify(period1_average, period2_average, pass_mark=PASS_MARK):
    """Pass/fail over two periods, or None while the second is not evaluated.

    The mean of both averages is compared exactly, without rounding, and must
    be strictly above ``pass_mark``: a combined 50 fails.
    """
    if period2_average is None:
        return None

    combined = (Decimal(str(period1_average)) + Decimal(str(period2_average))) / 2

    if combined > Decimal(str(pass_mark)):
        return PASS
    return FAIL
