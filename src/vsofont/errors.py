"""Errors raised while decoding vsofont text."""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for every decoding failure.

    ``lineno`` is the 1-based source line the failure was found on, or
    ``None`` when it is not tied to a line.
    """

    def __init__(self, message: str, lineno: int | None = None) -> None:
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class TokenCountError(DecodeError):
    def __init__(self, keyword: str, expected: int, actual: int, lineno: int | None = None) -> None:
        self.keyword = keyword
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{keyword} expects {expected} tokens, got {actual}",
            lineno,
        )


class NumberParseError(DecodeError):
    def __init__(self, token: str, field: str, lineno: int | None = None) -> None:
        self.token = token
        self.field = field
        super().__init__(f"failed to read {field} from {token!r}", lineno)


class InvalidGridError(DecodeError):
    def __init__(self, grid_width: int, lineno: int | None = None) -> None:
        self.grid_width = grid_width
        super().__init__(
            f"grid width must be a positive integer before glyph indices, got {grid_width}",
            lineno,
        )
