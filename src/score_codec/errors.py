"""Errors raised while encoding or decoding score strings.

Every codec failure derives from ``ScoreCodecError`` so callers embedding the
codec in a larger serializer can catch the whole family at once.
"""

from __future__ import annotations

from typing import Any


class ScoreCodecError(Exception):
    pass


class MalformedScoreError(ScoreCodecError, ValueError):
    """The text does not follow the canonical score grammar."""

    def __init__(
        self,
        message: str,
        *,
        text: str,
        token_index: int | None = None,
        token: str | None = None,
        expected: str | None = None,
    ) -> None:
        self.text = text
        self.token_index = token_index
        self.token = token
        self.expected = expected
        if token_index is not None:
            message = f"{message} at token {token_index} ({token!r})"
        if expected:
            message = f"{message}; expected {expected}"
        super().__init__(f"{message} in score text {text!r}")


class ShapeMismatchError(ScoreCodecError, ValueError):
    """The value or text has a different shape or dimensionality than declared."""

    def __init__(self, message: str, *, expected: Any, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"{message} (expected {expected}, got {actual})")


class UnsupportedShapeError(ScoreCodecError, LookupError):
    pass


class UnencodableValueError(ScoreCodecError, ValueError):
    """A level value cannot be written in canonical form."""

    def __init__(self, message: str, *, value: Any, index: int | None = None) -> None:
        self.value = value
        self.index = index
        where = "init score" if index is None else f"level {index}"
        super().__init__(f"{message}: {where} = {value!r}")
