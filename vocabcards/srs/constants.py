"""
SRS Constants and Parameters

All configurable parameters for the scheduling engine in one place.
"""

from enum import Enum


# ---- Card Status ----

class CardStatus(str, Enum):
    """Learning phase of a card."""
    NEW = "new"            # Never graded
    LEARNING = "learning"  # Walking the minute-scale learning steps
    LEARNED = "learned"    # Graduated, spaced in days


# ---- Grades ----

class CardGrade(str, Enum):
    """User feedback on a review."""
    INCORRECT = "incorrect"  # Recall failed
    CORRECT = "correct"      # Recall succeeded


# ---- Learning Steps ----

LEARNING_STEPS = (1, 10)  # Minutes: 1 minute, then 10 minutes
GRADUATING_INTERVAL = 1.0  # Days after the last learning step


# ---- Review Multipliers ----

CORRECT_MULTIPLIER = 2.5     # Interval growth on a correct review
INCORRECT_MULTIPLIER = 0.25  # Interval shrink on an incorrect review
MINIMUM_INTERVAL = 1.0       # Days; at or below this a learned card relapses
MAXIMUM_INTERVAL = 365.0     # Days; one year cap


# ---- Due Queue Ordering ----
# Lower value = presented first

STATUS_PRIORITY = {
    CardStatus.LEARNING: 0,
    CardStatus.NEW: 1,
    CardStatus.LEARNED: 2,
}
