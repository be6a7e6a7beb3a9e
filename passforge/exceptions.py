"""
Custom exceptions for Passforge.
"""


class PassforgeException(Exception):
    """Base exception for Passforge."""

    pass


class InvalidRangeError(PassforgeException, ValueError):
    """A sampler was asked for values from an empty or inverted range."""

    pass


class InsufficientRangeError(InvalidRangeError):
    """More unique values were requested than the range holds."""

    pass


class ConfigurationError(PassforgeException, ValueError):
    """Password configuration could not be built."""

    pass


class PasswordGenerationError(PassforgeException):
    """No password can be produced for the given configuration."""

    pass


class NoCharacterClassSelectedError(PasswordGenerationError):
    """Every character class is disabled."""

    pass


class LengthTooShortError(PasswordGenerationError):
    """Length cannot host one character from every enabled class."""

    pass


class ClipboardError(PassforgeException):
    """Writing to the clipboard failed."""

    pass
