class PCSError(Exception):
    """Base exception class."""


class InvalidDegreeError(PCSError, ValueError):
    """Raise when a setup is requested for a degree below 1."""


class LengthMismatchError(PCSError, ValueError):
    """Raise when coefficients do not line up with a public-parameter ladder."""


class FieldInversionError(PCSError, ZeroDivisionError):
    """Raise when the additive identity of FR is inverted."""
