"""Due-queue and session-exclusion helpers for review sessions."""

from vocabcards.session_builders.due_queue import (
    DueStats,
    compute_due,
    compute_stats,
    sort_for_browse,
)
from vocabcards.session_builders.exclusion_state import SessionExclusionSet

__all__ = [
    "DueStats",
    "compute_due",
    "compute_stats",
    "sort_for_browse",
    "SessionExclusionSet",
]
