import logging
from collections import defaultdict
from decimal import Decimal

from school_results.models.academic import ScoreEntry
from school_results.utils.academic import round_half_up

logger = logging.getLogger(__name__)


def usable_entries(score_entries):
    """Yield ScoreEntry objects, silently skipping records that cannot be used."""
    dropped = 0

    for raw in score_entries or ():
        entry = ScoreEntry.from_dict(raw)
        if entry is None:
            dropped += 1
            continue
        yield entry

    if dropped:
        logger.debug("Dropped %d unusable score entries", dropped)


def aggregate(score_entries, subjects, places=2):
    """Mean score per subject for one student within one period.

    Every name in ``subjects`` is present in the result, in order; a subject
    with no entries is 0. Entries for other subjects are ignored.
    """
    # Decimal sums cannot overflow to inf the way large float sums do
    sums = defaultdict(Decimal)
    counts = defaultdict(int)

    for entry in usable_entries(score_entries):
        sums[entry.subject] += Decimal(str(entry.score))
        counts[entry.subject] += 1

    values = {}
    for subject in subjects or ():
        count = counts.get(subject, 0)
        values[subject] = round_half_up(sums[subject] / count, places) if count else 0
    return values
