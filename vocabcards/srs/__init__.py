"""
SRS - Spaced Repetition Scheduler

Main API for the vocabulary flashcard system.

This module implements a simple step-then-multiply scheduler with:
- Minute-scale learning steps before a card is trusted with day spacing
- Fixed multipliers for correct/incorrect reviews of learned cards
- Relapse back into learning when the interval collapses
- Explicit `now` everywhere (no hidden clock reads)

Quick start:
    from vocabcards import srs

    # Initialize database
    srs.init_db()

    # Grade a card (algorithm only, no DB calls)
    updated = srs.schedule(card, srs.CardGrade.CORRECT, now)
    srs.save_card(updated)
"""

# Core scheduler API (algorithm logic)
from vocabcards.srs.scheduler import schedule

# Database API
from vocabcards.srs.database import (
    init_db,
    reset_db,
    is_test_mode,
    dispose_engine,
    load_all_cards,
    get_card,
    save_card,
    save_all_cards,
    delete_card,
    import_records,
    export_records,
)

# Constants and parameters
from vocabcards.srs.constants import (
    CardGrade,
    CardStatus,
    LEARNING_STEPS,
    GRADUATING_INTERVAL,
    CORRECT_MULTIPLIER,
    INCORRECT_MULTIPLIER,
    MINIMUM_INTERVAL,
    MAXIMUM_INTERVAL,
    STATUS_PRIORITY,
)

# Card state
from vocabcards.srs.card_state import (
    Card,
    new_card,
    card_from_record,
    card_to_record,
)

# Errors
from vocabcards.srs.errors import (
    SchedulingError,
    InvalidCardStateError,
    InvalidArgumentError,
)

# Helpers
from vocabcards.srs.migration import migrate_record, migrate_records
from vocabcards.srs.time_units import format_time_until, now_ms


__all__ = [
    # Core algorithm
    "schedule",

    # Database operations
    "init_db",
    "reset_db",
    "is_test_mode",
    "dispose_engine",
    "load_all_cards",
    "get_card",
    "save_card",
    "save_all_cards",
    "delete_card",
    "import_records",
    "export_records",

    # Enums
    "CardGrade",
    "CardStatus",

    # Card state
    "Card",
    "new_card",
    "card_from_record",
    "card_to_record",

    # Errors
    "SchedulingError",
    "InvalidCardStateError",
    "InvalidArgumentError",

    # Helpers
    "migrate_record",
    "migrate_records",
    "format_time_until",
    "now_ms",

    # Parameters
    "LEARNING_STEPS",
    "GRADUATING_INTERVAL",
    "CORRECT_MULTIPLIER",
    "INCORRECT_MULTIPLIER",
    "MINIMUM_INTERVAL",
    "MAXIMUM_INTERVAL",
    "STATUS_PRIORITY",
]
