"""
Exception types raised by libepoch.
"""


class LibEpochError(Exception):
    """Base class for libepoch errors."""


class EpochFormatError(LibEpochError, ValueError):
    """
    Raised when a date/time string does not have the
    YYYY-MM-DDTHH:MM:SS[.sss]Z shape or a field is not a number.

    Subclasses ValueError so callers catching float() failures keep working.
    """
