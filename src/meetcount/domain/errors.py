"""Exception hierarchy for meetcount."""

from __future__ import annotations


class MeetCountError(Exception):
    """Base class for all meetcount errors."""


class InvalidInputError(MeetCountError, ValueError):
    """A date, range, or weekday violates a domain invariant.

    Raised by validated construction of the date values and by the
    counting functions when a precondition does not hold.
    """


class ConfigError(MeetCountError):
    """A config file is missing, unreadable, or not valid TOML."""
