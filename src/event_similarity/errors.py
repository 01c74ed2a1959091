"""Exceptions raised by the similarity engine."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes malformed input to the engine.

    This signals a programming error at the function boundary (a non-string
    title, a duplicated candidate id, a score outside ``[0, 1]``).  It is
    never raised for well-formed input.
    """
