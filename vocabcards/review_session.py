"""
Review session lifecycle helpers.

Glue between storage, the due queue and the scheduler for one sitting:
load cards -> compute due queue -> grade head card -> persist -> exclude ->
recompute.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Callable, Optional, Union

from vocabcards.schemas import CardContent
from vocabcards.session_builders.due_queue import DueStats, compute_due, compute_stats
from vocabcards.session_builders.exclusion_state import SessionExclusionSet
from vocabcards.srs.card_state import Card, new_card, parse_status
from vocabcards.srs.constants import CardGrade
from vocabcards.srs.scheduler import schedule

logger = logging.getLogger(__name__)


class ReviewSession:
    """
    One review sitting over a card collection.

    Storage is injected as callables so the session works against the
    database module or any in-memory stand-in.
    """

    def __init__(
        self,
        load_cards: Callable[[], list[Card]],
        save_card: Callable[[Card], None],
        delete_card: Optional[Callable[[str], bool]] = None
    ):
        self._load_cards = load_cards
        self._save_card = save_card
        self._delete_card = delete_card
        self.excluded = SessionExclusionSet()
        self.reviewed_count = 0
        self.correct_count = 0

    def start(self) -> None:
        """
        Start a new session: forget which cards were graded before.
        """
        self.excluded.clear()
        self.reviewed_count = 0
        self.correct_count = 0

    def due_cards(self, now: int) -> list[Card]:
        return compute_due(self._load_cards(), self.excluded, now)

    def next_card(self, now: int) -> Optional[Card]:
        """
        Head of the due queue, or None when nothing is left to review.
        """
        due = self.due_cards(now)
        return due[0] if due else None

    def review(self, card_id: str, grade: CardGrade, now: int) -> Card:
        """
        Grade a card, persist it and exclude it for the rest of the sitting.

        Returns:
            The updated card

        Raises:
            KeyError: no card with this id
        """
        card = next((c for c in self._load_cards() if c.id == card_id), None)
        if card is None:
            raise KeyError(card_id)

        updated = schedule(card, grade, now)
        self._save_card(updated)
        self.excluded.add(card_id)

        self.reviewed_count += 1
        if CardGrade(grade) == CardGrade.CORRECT:
            self.correct_count += 1

        logger.info(
            f"Reviewed {card_id}: {parse_status(card.status).value} -> {updated.status.value} "
            f"({CardGrade(grade).value})"
        )
        return updated

    def add_card(self, content: Union[CardContent, dict], now: int) -> Card:
        """Create a new card (due immediately) and persist it."""
        card = new_card(content, now)
        self._save_card(card)
        return card

    def edit_card(self, card_id: str, content: Union[CardContent, dict]) -> Card:
        """
        Replace a card's text fields, keeping its scheduling state.

        Raises:
            KeyError: no card with this id
            pydantic.ValidationError: content fails CardContent validation
        """
        if not isinstance(content, CardContent):
            content = CardContent.model_validate(content)

        card = next((c for c in self._load_cards() if c.id == card_id), None)
        if card is None:
            raise KeyError(card_id)

        edited = replace(
            card,
            english=content.english,
            vietnamese=content.vietnamese,
            example=content.example,
            phonetic=content.phonetic,
        )
        self._save_card(edited)
        logger.info(f"Edited {card_id}")
        return edited

    def remove_card(self, card_id: str) -> bool:
        """
        Delete a card and drop it from the exclusion set.
        """
        if self._delete_card is None:
            raise RuntimeError("This session was created without a delete_card callable")
        self.excluded.discard(card_id)
        return self._delete_card(card_id)

    def stats(self, now: int) -> DueStats:
        return compute_stats(self._load_cards(), self.excluded, now)
