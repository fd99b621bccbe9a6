"""Exceptions raised while parsing a diagram."""


class DiagramParseError(ValueError):
    """Raised when a diagram cannot be parsed into a drawable grid.

    The message describes the reason for logging. It is never shown to the
    user, who only sees the generic failure message of the error image.
    """
