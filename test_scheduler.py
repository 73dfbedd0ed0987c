"""
Tests for the scheduling engine.

Verifies:
1. Learning-step transitions (incorrect reset, step advance, graduation)
2. Learned-phase interval growth, shrink and relapse
3. Purity and determinism
4. Interval floor/cap properties
5. Precondition errors
"""

import math
from dataclasses import replace

import pytest

from vocabcards.srs.constants import (
    CardGrade,
    CardStatus,
    GRADUATING_INTERVAL,
    LEARNING_STEPS,
    MAXIMUM_INTERVAL,
    MINIMUM_INTERVAL,
)
from vocabcards.srs.errors import InvalidArgumentError, InvalidCardStateError
from vocabcards.srs.scheduler import schedule
from vocabcards.srs.time_units import MS_PER_DAY, MS_PER_MINUTE


T0 = 1_700_000_000_000
MINUTE = MS_PER_MINUTE
DAY = MS_PER_DAY


# ---- Learning phase ----

def test_new_card_incorrect_goes_to_first_learning_step(make_card):
    card = make_card()

    result = schedule(card, CardGrade.INCORRECT, T0)

    assert result.status == CardStatus.LEARNING
    assert result.step_index == 0
    assert result.next_review == T0 + 60_000
    assert result.last_review == T0
    assert result.interval == 0
    assert result.reps == 0
    assert result.lapses == 0


def test_learning_correct_advances_one_step(make_card):
    t1 = T0 + 2 * MINUTE
    card = make_card(status=CardStatus.LEARNING, step_index=0, next_review=T0 + MINUTE)

    result = schedule(card, CardGrade.CORRECT, t1)

    assert result.status == CardStatus.LEARNING
    assert result.step_index == 1
    assert result.next_review == t1 + 600_000
    assert result.reps == 0


def test_learning_last_step_correct_graduates(make_card):
    t2 = T0 + 15 * MINUTE
    card = make_card(status=CardStatus.LEARNING, step_index=1)

    result = schedule(card, CardGrade.CORRECT, t2)

    assert result.status == CardStatus.LEARNED
    assert result.interval == 1
    assert result.step_index == 0
    assert result.next_review == t2 + 86_400_000
    assert result.reps == 1


def test_learning_incorrect_resets_to_first_step(make_card):
    card = make_card(status=CardStatus.LEARNING, step_index=1, reps=2, lapses=1)

    result = schedule(card, CardGrade.INCORRECT, T0)

    assert result.status == CardStatus.LEARNING
    assert result.step_index == 0
    assert result.next_review == T0 + LEARNING_STEPS[0] * MINUTE
    assert (result.reps, result.lapses, result.interval) == (2, 1, 0)


def test_new_card_correct_moves_to_second_step(make_card):
    result = schedule(make_card(), CardGrade.CORRECT, T0)

    assert result.status == CardStatus.LEARNING
    assert result.step_index == 1
    assert result.next_review == T0 + LEARNING_STEPS[1] * MINUTE


def test_graduation_after_consecutive_correct_answers(make_card):
    card = make_card()
    now = T0
    graded = 0

    while card.status != CardStatus.LEARNED:
        card = schedule(card, CardGrade.CORRECT, now)
        now = card.next_review + 1
        graded += 1
        assert graded <= len(LEARNING_STEPS)

    assert card.interval == GRADUATING_INTERVAL
    assert card.reps == 1

    card = schedule(card, CardGrade.CORRECT, now)
    assert card.reps == 2


# ---- Learned phase ----

def test_learned_correct_multiplies_interval(make_card):
    t3 = T0 + 3 * DAY
    card = make_card(status=CardStatus.LEARNED, interval=1.0, reps=1)

    result = schedule(card, CardGrade.CORRECT, t3)

    assert result.status == CardStatus.LEARNED
    assert result.interval == 2.5
    assert result.next_review == t3 + int(2.5 * 86_400_000)
    assert result.reps == 2


def test_learned_incorrect_at_minimum_relapses(make_card):
    t4 = T0 + 4 * DAY
    card = make_card(status=CardStatus.LEARNED, interval=1.0, reps=1)

    result = schedule(card, CardGrade.INCORRECT, t4)

    assert result.status == CardStatus.LEARNING
    assert result.step_index == 0
    assert result.interval == 0
    assert result.next_review == t4 + 60_000
    assert result.lapses == 1
    assert result.reps == 1


def test_learned_incorrect_with_long_interval_shrinks(make_card):
    card = make_card(status=CardStatus.LEARNED, interval=20.0, lapses=2)

    result = schedule(card, CardGrade.INCORRECT, T0)

    assert result.status == CardStatus.LEARNED
    assert result.interval == 5.0
    assert result.next_review == T0 + 5 * DAY
    assert result.lapses == 3


def test_learned_incorrect_just_above_floor_relapses(make_card):
    # 4 * 0.25 == 1.0, which is not above the minimum
    card = make_card(status=CardStatus.LEARNED, interval=4.0)

    result = schedule(card, CardGrade.INCORRECT, T0)

    assert result.status == CardStatus.LEARNING
    assert result.lapses == 1


def test_interval_never_exceeds_cap(make_card):
    card = make_card(status=CardStatus.LEARNED, interval=1.0)
    now = T0
    for _ in range(20):
        card = schedule(card, CardGrade.CORRECT, now)
        now = card.next_review
        assert card.interval <= MAXIMUM_INTERVAL

    assert card.interval == MAXIMUM_INTERVAL
    assert card.reps == 20


def test_repeated_incorrect_never_goes_negative(make_card):
    card = make_card(status=CardStatus.LEARNED, interval=300.0)
    now = T0
    for _ in range(10):
        card = schedule(card, CardGrade.INCORRECT, now)
        now = card.next_review
        assert card.interval >= 0
        if card.status == CardStatus.LEARNED:
            assert card.interval > MINIMUM_INTERVAL

    assert card.status == CardStatus.LEARNING


# ---- Purity ----

def test_schedule_is_deterministic_and_pure(make_card):
    card = make_card(status=CardStatus.LEARNED, interval=6.25, reps=3)
    snapshot = replace(card)

    first = schedule(card, CardGrade.CORRECT, T0)
    second = schedule(card, CardGrade.CORRECT, T0)

    assert first == second
    assert card == snapshot
    assert first is not card


def test_opaque_fields_pass_through(make_card):
    card = make_card(example="An apple a day.", phonetic="/ˈæp.əl/", extra={"deck": "fruit"})

    result = schedule(card, CardGrade.CORRECT, T0)

    assert result.english == "apple"
    assert result.example == "An apple a day."
    assert result.phonetic == "/ˈæp.əl/"
    assert result.extra == {"deck": "fruit"}
    assert result.created_at == card.created_at


def test_string_grade_and_status_are_accepted(make_card):
    card = make_card(status="learned", interval=2.0)

    result = schedule(card, "correct", T0)

    assert result.status is CardStatus.LEARNED
    assert result.interval == 5.0


# ---- Preconditions ----

def test_unknown_status_is_rejected(make_card):
    card = make_card(status="review")

    with pytest.raises(InvalidCardStateError):
        schedule(card, CardGrade.CORRECT, T0)


def test_unknown_grade_is_rejected(make_card):
    with pytest.raises(InvalidArgumentError):
        schedule(make_card(), "easy", T0)


@pytest.mark.parametrize("now", [-1, math.inf, math.nan, "1700000000000", None])
def test_bad_now_is_rejected(make_card, now):
    with pytest.raises(InvalidArgumentError):
        schedule(make_card(), CardGrade.CORRECT, now)


def test_fractional_now_is_rejected(make_card):
    with pytest.raises(InvalidArgumentError):
        schedule(make_card(), CardGrade.CORRECT, T0 + 0.5)


def test_whole_float_now_is_accepted(make_card):
    updated = schedule(make_card(), CardGrade.CORRECT, float(T0))

    assert updated.next_review == T0 + 10 * MINUTE


def test_fractional_next_review_is_rejected(make_card):
    with pytest.raises(InvalidArgumentError):
        schedule(make_card(next_review=T0 + 0.25), CardGrade.CORRECT, T0)


@pytest.mark.parametrize("interval", [-2.5, math.inf])
def test_bad_interval_is_rejected(make_card, interval):
    card = make_card(status=CardStatus.LEARNED, interval=interval)

    with pytest.raises(InvalidArgumentError):
        schedule(card, CardGrade.CORRECT, T0)


def test_negative_step_index_is_rejected(make_card):
    card = make_card(status=CardStatus.LEARNING, step_index=-1)

    with pytest.raises(InvalidArgumentError):
        schedule(card, CardGrade.CORRECT, T0)


def test_errors_are_value_errors(make_card):
    with pytest.raises(ValueError):
        schedule(make_card(status="bogus"), CardGrade.CORRECT, T0)
