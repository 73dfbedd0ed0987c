"""
Card State - the unit of learning

Defines the immutable Card value consumed and produced by the scheduler,
plus conversion to and from the flat persisted record.

Key fields:
- status: New, Learning or Learned
- interval: spacing in days (0 until graduation)
- step_index: position in the learning-step table
- next_review: ms epoch timestamp when the card is due again
"""

from __future__ import annotations
import math
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from vocabcards.schemas import CardContent, CardRecord
from vocabcards.srs.constants import CardGrade, CardStatus, LEARNING_STEPS
from vocabcards.srs.errors import InvalidArgumentError, InvalidCardStateError


@dataclass(frozen=True)
class Card:
    """
    A single flashcard and its scheduling state.

    Frozen: every review produces a new Card via dataclasses.replace().
    """
    id: str
    english: str
    vietnamese: str
    created_at: int  # ms epoch
    next_review: int  # ms epoch

    # Scheduling state
    status: CardStatus = CardStatus.NEW
    interval: float = 0.0  # days
    step_index: int = 0
    lapses: int = 0
    reps: int = 0
    last_review: Optional[int] = None

    # Optional content
    example: Optional[str] = None
    phonetic: Optional[str] = None

    # Opaque record fields carried through untouched
    extra: dict[str, Any] = field(default_factory=dict)


# ---- Validation ----

def parse_status(value: Any) -> CardStatus:
    """
    Coerce a status value into CardStatus.

    Raises:
        InvalidCardStateError: if the value is not a known status
    """
    if isinstance(value, CardStatus):
        return value
    try:
        return CardStatus(value)
    except ValueError:
        raise InvalidCardStateError(f"Unknown card status: {value!r}") from None


def parse_grade(value: Any) -> CardGrade:
    """
    Coerce a grade value into CardGrade.

    Raises:
        InvalidArgumentError: if the value is not a known grade
    """
    if isinstance(value, CardGrade):
        return value
    try:
        return CardGrade(value)
    except ValueError:
        raise InvalidArgumentError(f"Unknown grade: {value!r}") from None


def check_non_negative(name: str, value: Any) -> None:
    """
    Guard against non-numeric, non-finite or negative values.

    Raises:
        InvalidArgumentError: if value is not a finite int/float >= 0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidArgumentError(f"{name} must be finite and >= 0, got {value!r}")


def check_timestamp(name: str, value: Any) -> None:
    """
    Like check_non_negative, but also require whole milliseconds.

    Raises:
        InvalidArgumentError: if value is not a non-negative integral number
    """
    check_non_negative(name, value)
    if isinstance(value, float) and not value.is_integer():
        raise InvalidArgumentError(f"{name} must be whole milliseconds, got {value!r}")



def validate_card(card: Card) -> CardStatus:
    """
    Check a card's scheduling fields before it enters the engine.

    Returns:
        The card's status as a CardStatus
    """
    status = parse_status(card.status)
    check_non_negative("interval", card.interval)
    check_timestamp("next_review", card.next_review)
    if not isinstance(card.step_index, int) or card.step_index < 0:
        raise InvalidArgumentError(f"step_index must be a non-negative int, got {card.step_index!r}")
    return status


# ---- Construction ----

def new_card(
    content: Union[CardContent, dict],
    now: int,
    card_id: Optional[str] = None
) -> Card:
    """
    Create a brand new card, due immediately.

    Args:
        content: Card content (validated through CardContent)
        now: Creation timestamp in ms
        card_id: Explicit id (defaults to a fresh uuid4)

    Returns:
        Card with status NEW and all counters at zero
    """
    check_timestamp("now", now)
    if not isinstance(content, CardContent):
        content = CardContent.model_validate(content)

    return Card(
        id=card_id or str(uuid.uuid4()),
        english=content.english,
        vietnamese=content.vietnamese,
        example=content.example,
        phonetic=content.phonetic,
        created_at=now,
        next_review=now,
        status=CardStatus.NEW,
        interval=0.0,
        step_index=0,
        lapses=0,
        reps=0,
        last_review=None,
    )


# ---- Record conversion ----

def card_from_record(raw: dict) -> Card:
    """
    Build a Card from a flat camelCase record.

    Raises:
        pydantic.ValidationError: on missing or mistyped fields
        InvalidCardStateError: on an unknown status
    """
    record = CardRecord.model_validate(raw)
    return Card(
        id=record.id,
        english=record.english,
        vietnamese=record.vietnamese,
        example=record.example,
        phonetic=record.phonetic,
        created_at=record.created_at,
        next_review=record.next_review,
        status=parse_status(record.status),
        interval=record.interval,
        step_index=record.step_index,
        lapses=record.lapses,
        reps=record.reps,
        last_review=record.last_review,
        extra=dict(record.model_extra or {}),
    )


def card_to_record(card: Card) -> dict:
    """Flatten a Card into the persisted camelCase record."""
    record = dict(card.extra)
    record.update({
        "id": card.id,
        "english": card.english,
        "vietnamese": card.vietnamese,
        "example": card.example,
        "phonetic": card.phonetic,
        "createdAt": card.created_at,
        "status": parse_status(card.status).value,
        "interval": card.interval,
        "stepIndex": card.step_index,
        "nextReview": card.next_review,
        "lapses": card.lapses,
        "reps": card.reps,
        "lastReview": card.last_review,
    })
    return record


def is_valid_step_index(step_index: int) -> bool:
    """True if step_index points into the learning-step table."""
    return 0 <= step_index < len(LEARNING_STEPS)
