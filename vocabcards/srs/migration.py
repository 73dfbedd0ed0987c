"""
Legacy card migration.

Older exports stored cards in an SM-2 style shape: four statuses
(new/learning/review/relearning, or the even older to-learn/known), an
easeFactor and a reviewCount. This module rewrites such records into the
current three-status shape.

Storage-schema versioning only; the scheduler never sees legacy records.
Run once at import/load time by the storage layer.
"""

from __future__ import annotations
import logging

from vocabcards.srs.card_state import is_valid_step_index
from vocabcards.srs.constants import CardStatus
from vocabcards.srs.errors import InvalidCardStateError

logger = logging.getLogger(__name__)


# ---- Legacy status mapping ----

LEGACY_STATUS_MAP = {
    "new": CardStatus.NEW,
    "to-learn": CardStatus.NEW,
    "learning": CardStatus.LEARNING,
    "review": CardStatus.LEARNED,
    "relearning": CardStatus.LEARNED,
    "known": CardStatus.LEARNED,
    "learned": CardStatus.LEARNED,
}

LEGACY_ONLY_STATUSES = {"review", "relearning", "to-learn", "known"}

# Keys that exist only in legacy records and are dropped
LEGACY_ONLY_KEYS = ("easeFactor", "reviewCount")


def needs_migration(raw: dict) -> bool:
    """True if the record carries an ease factor or a legacy-only status."""
    return "easeFactor" in raw or raw.get("status") in LEGACY_ONLY_STATUSES


def migrate_record(raw: dict) -> tuple[dict, bool]:
    """
    Convert one record to the current shape.

    Rules:
    - status: learning -> learning; review/relearning/known/learned -> learned;
      new/to-learn -> new
    - reps: reps, else reviewCount, else 0
    - interval: kept (or 1 day) for learned cards, 0 for new/learning cards
    - stepIndex: kept when it points into the learning steps, else 0
    - counters reset to zero for new cards

    Args:
        raw: Record as read from storage or an export file

    Returns:
        (record, changed) - the input record itself when no migration applies

    Raises:
        InvalidCardStateError: legacy status is not recognised
    """
    if not needs_migration(raw):
        return raw, False

    old_status = raw.get("status")
    if old_status not in LEGACY_STATUS_MAP:
        raise InvalidCardStateError(
            f"Cannot migrate card {raw.get('id')!r}: unknown legacy status {old_status!r}"
        )
    status = LEGACY_STATUS_MAP[old_status]

    migrated = {k: v for k, v in raw.items() if k not in LEGACY_ONLY_KEYS}

    step_index = raw.get("stepIndex") or 0
    if not isinstance(step_index, int) or not is_valid_step_index(step_index):
        step_index = 0

    if status == CardStatus.LEARNED:
        interval = raw.get("interval") or 1.0
        reps = raw.get("reps") or raw.get("reviewCount") or 0
        lapses = raw.get("lapses") or 0
    elif status == CardStatus.LEARNING:
        interval = 0.0
        reps = raw.get("reps") or raw.get("reviewCount") or 0
        lapses = raw.get("lapses") or 0
    else:
        interval = 0.0
        reps = 0
        lapses = 0
        step_index = 0

    migrated.update({
        "status": status.value,
        "interval": float(interval),
        "stepIndex": step_index,
        "reps": reps,
        "lapses": lapses,
        "lastReview": raw.get("lastReview"),
    })
    return migrated, True


def migrate_records(raws: list[dict]) -> tuple[list[dict], bool]:
    """
    Migrate a whole collection.

    Returns:
        (records, changed_any) - records in input order
    """
    records: list[dict] = []
    changed_count = 0
    for raw in raws:
        record, changed = migrate_record(raw)
        records.append(record)
        if changed:
            changed_count += 1

    if changed_count:
        logger.info(f"Migrated {changed_count}/{len(raws)} legacy card record(s)")

    return records, changed_count > 0
