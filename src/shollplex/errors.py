"""Exceptions raised by the Sholl analysis."""


class ShollError(Exception):
    """Base class for errors raised by shollplex."""


class InvalidConfigurationError(ShollError, ValueError):
    """The analysis parameters do not describe at least two radii."""


class EmptyProfileError(ShollError):
    """All intersection counts of a profile are zero."""
