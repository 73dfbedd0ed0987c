"""
Session exclusion state.

Exclusion is modeled as a sitting-scoped set of card ids, filled as cards are
graded and cleared only when a new review session starts. It is never
persisted.
"""

from __future__ import annotations
from typing import Iterable, Iterator, Optional


class SessionExclusionSet:
    """
    Card ids graded during the current sitting.

    Owned by the caller and passed into the due queue; the scheduler never
    touches it.
    """

    def __init__(self, card_ids: Optional[Iterable[str]] = None):
        self._ids: set[str] = set(card_ids or ())

    def add(self, card_id: str) -> None:
        """Exclude a just-graded card for the rest of the sitting."""
        self._ids.add(card_id)

    def discard(self, card_id: str) -> None:
        """Forget a card id (e.g. after the card is deleted)."""
        self._ids.discard(card_id)

    def clear(self) -> None:
        """Reset at the start of a new session."""
        self._ids.clear()

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._ids)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"<SessionExclusionSet({len(self._ids)} ids)>"
