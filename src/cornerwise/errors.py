"""Exceptions raised for malformed radius and mask values."""

from __future__ import annotations


class InvalidRadius(ValueError):
    """A radius value or shorthand list that cannot be used.

    Raised when a radius list has more than four (or no) entries, or
    when a literal is neither a number nor a deferred CSS expression.

    Attributes:
        value: The offending value, as passed by the caller.
    """

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        message = f"Invalid radius value: {value!r}"
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidMask(ValueError):
    """A corner mask that is not exactly four 0/1 flags.

    Attributes:
        value: The offending mask, as passed by the caller.
    """

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        message = f"Invalid corner mask: {value!r}"
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(message)
