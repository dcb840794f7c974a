# grouper/exceptions.py
"""
Exception types raised by Grouper.
"""


class GrouperError(Exception):
    """Base class for all Grouper errors."""
    pass


class InvalidInputError(GrouperError, ValueError):
    """Raised when rating data is malformed, empty or cannot be decoded."""
    pass


class DegenerateDistanceError(GrouperError, ArithmeticError):
    """
    Raised when a correlation cannot be computed because one of the
    sequences has no variance.

    The distance metric handles this internally and returns its fallback
    distance, so callers of ``distance()`` never see it.
    """
    pass
