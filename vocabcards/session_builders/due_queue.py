"""
Due queue - which cards to present next.

Selection: a card is due when it is not session-excluded and its next_review
is at or before `now`.

Ordering (stable):
1. Status priority: LEARNING, then NEW, then LEARNED
2. next_review ascending (most overdue first)

Pure functions over a snapshot of cards (no DB calls).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Container, Iterable, Optional

from vocabcards.srs.card_state import Card, check_timestamp, parse_status
from vocabcards.srs.constants import CardStatus, STATUS_PRIORITY


@dataclass(frozen=True)
class DueStats:
    """Aggregate counts for the home screen."""
    new_count: int
    learning_count: int
    learned_count: int
    due_count: int
    total: int


def status_priority(card: Card) -> int:
    """Queue rank of a card's status (lower is shown first)."""
    return STATUS_PRIORITY[parse_status(card.status)]


def is_due(card: Card, excluded: Container[str], now: int) -> bool:
    return card.id not in excluded and card.next_review <= now


def compute_due(
    cards: Iterable[Card],
    excluded: Container[str],
    now: int
) -> list[Card]:
    """
    Build the ordered due queue.

    Args:
        cards: Snapshot of the whole collection (not modified)
        excluded: Ids graded earlier in this sitting
        now: Current time in ms

    Returns:
        Due cards, learning first, then new, then learned; within a status
        the earliest next_review first. Empty when nothing is due.
    """
    check_timestamp("now", now)
    due = [c for c in cards if is_due(c, excluded, now)]
    due.sort(key=lambda c: (status_priority(c), c.next_review))
    return due


def compute_stats(
    cards: Iterable[Card],
    excluded: Container[str],
    now: int
) -> DueStats:
    """
    Count cards by status plus the current due count.

    Only due_count depends on `excluded` and `now`.
    """
    check_timestamp("now", now)
    counts = {status: 0 for status in CardStatus}
    due_count = 0
    total = 0

    for card in cards:
        counts[parse_status(card.status)] += 1
        total += 1
        if is_due(card, excluded, now):
            due_count += 1

    return DueStats(
        new_count=counts[CardStatus.NEW],
        learning_count=counts[CardStatus.LEARNING],
        learned_count=counts[CardStatus.LEARNED],
        due_count=due_count,
        total=total,
    )


def sort_for_browse(
    cards: Iterable[Card],
    excluded: Container[str],
    now: int,
    statuses: Optional[Iterable[CardStatus]] = None
) -> list[Card]:
    """
    Order a deck listing: due cards first, then by status priority, then
    next_review.

    Args:
        cards: Snapshot of the collection
        excluded: Ids graded earlier in this sitting
        now: Current time in ms
        statuses: If given, only keep cards with one of these statuses

    Returns:
        New list; the input is not modified
    """
    check_timestamp("now", now)
    wanted = {parse_status(s) for s in statuses} if statuses else None

    listing = [
        c for c in cards
        if wanted is None or parse_status(c.status) in wanted
    ]
    listing.sort(key=lambda c: (
        0 if is_due(c, excluded, now) else 1,
        status_priority(c),
        c.next_review,
    ))
    return listing
