"""
Scheduler - Spaced Repetition Algorithm Logic

Pure scheduling and state updates (no database calls, no clock reads).

Main workflow:
1. Load card (caller's responsibility)
2. Validate card and grade
3. Stamp last_review on a working copy
4. Apply learning-phase or learned-phase rules
5. Return the updated card (caller persists it)

This module handles ONLY the algorithm logic.
Database I/O is handled by the database module.
"""

from __future__ import annotations
from dataclasses import replace

from vocabcards.srs.card_state import (
    Card,
    check_timestamp,
    parse_grade,
    validate_card,
)
from vocabcards.srs.constants import (
    CardGrade,
    CardStatus,
    CORRECT_MULTIPLIER,
    GRADUATING_INTERVAL,
    INCORRECT_MULTIPLIER,
    LEARNING_STEPS,
    MAXIMUM_INTERVAL,
    MINIMUM_INTERVAL,
)
from vocabcards.srs.errors import InvalidCardStateError
from vocabcards.srs.time_units import days_to_ms, minutes_to_ms


def schedule(card: Card, grade: CardGrade, now: int) -> Card:
    """
    Grade a card and return its next state.

    This is the core scheduling algorithm. No database calls.
    Caller is responsible for:
    1. Loading the card
    2. Saving the returned card
    3. Excluding the card from the rest of the session

    Transitions:
    - NEW/LEARNING + INCORRECT: back to the first learning step
    - NEW/LEARNING + CORRECT: next learning step, or graduate to LEARNED
    - LEARNED + INCORRECT: shrink interval, or relapse to LEARNING
    - LEARNED + CORRECT: grow interval (capped at one year)

    Args:
        card: Card to grade (never modified)
        grade: INCORRECT or CORRECT
        now: Review timestamp in ms

    Returns:
        A new Card with updated status, interval, step_index and next_review

    Raises:
        InvalidCardStateError: card.status is not a known status
        InvalidArgumentError: bad grade, negative/non-finite interval, or now not whole ms
    """
    status = validate_card(card)
    grade = parse_grade(grade)
    check_timestamp("now", now)

    updated = replace(card, status=status, last_review=now)

    if status in (CardStatus.NEW, CardStatus.LEARNING):
        return _schedule_learning(updated, grade, now)
    if status == CardStatus.LEARNED:
        return _schedule_learned(updated, grade, now)

    raise InvalidCardStateError(f"Unhandled card status: {status!r}")


def _schedule_learning(card: Card, grade: CardGrade, now: int) -> Card:
    """
    Apply learning-step rules to a NEW or LEARNING card.
    """
    if grade == CardGrade.INCORRECT:
        # Reset to first step
        return replace(
            card,
            status=CardStatus.LEARNING,
            step_index=0,
            next_review=now + minutes_to_ms(LEARNING_STEPS[0]),
        )

    next_step = card.step_index + 1

    if next_step < len(LEARNING_STEPS):
        return replace(
            card,
            status=CardStatus.LEARNING,
            step_index=next_step,
            next_review=now + minutes_to_ms(LEARNING_STEPS[next_step]),
        )

    # Steps exhausted: graduate
    return replace(
        card,
        status=CardStatus.LEARNED,
        interval=GRADUATING_INTERVAL,
        step_index=0,
        next_review=now + days_to_ms(GRADUATING_INTERVAL),
        reps=card.reps + 1,
    )


def _schedule_learned(card: Card, grade: CardGrade, now: int) -> Card:
    """
    Apply interval rules to a LEARNED card.
    """
    if grade == CardGrade.INCORRECT:
        candidate = max(MINIMUM_INTERVAL, card.interval * INCORRECT_MULTIPLIER)

        if candidate <= MINIMUM_INTERVAL:
            # Lapse: back into learning
            return replace(
                card,
                status=CardStatus.LEARNING,
                step_index=0,
                interval=0.0,
                next_review=now + minutes_to_ms(LEARNING_STEPS[0]),
                lapses=card.lapses + 1,
            )

        return replace(
            card,
            interval=candidate,
            next_review=now + days_to_ms(candidate),
            lapses=card.lapses + 1,
        )

    new_interval = min(MAXIMUM_INTERVAL, card.interval * CORRECT_MULTIPLIER)
    return replace(
        card,
        interval=new_interval,
        next_review=now + days_to_ms(new_interval),
        reps=card.reps + 1,
    )
