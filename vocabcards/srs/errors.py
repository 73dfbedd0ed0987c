"""
Exceptions raised by the scheduling engine and due queue.
"""


class SchedulingError(Exception):
    """Base class for caller misuse of the scheduling core."""


class InvalidCardStateError(SchedulingError, ValueError):
    """A card carries a status outside the known set."""


class InvalidArgumentError(SchedulingError, ValueError):
    """A timestamp, interval, step index or grade is out of range."""
