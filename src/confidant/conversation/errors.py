"""Exceptions raised by the dialogue engine."""


class InvalidInputError(TypeError):
    """User input was not a string."""


class EngineInternalError(RuntimeError):
    """
    An internal invariant of the engine was violated.

    Raised for configuration inconsistencies such as a theme with no
    contextual response bank. These are programmer errors, never caused
    by user text.
    """
