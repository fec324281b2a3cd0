"""Tokenizer for the canonical score string.

Grammar::

    score      = [init-part] level-part *("/" level-part)
    init-part  = int "init/"
    level-part = number label
    number     = ["-"] 1*DIGIT ["." 1*DIGIT]
    label      = "hard" | "medium" | "soft" | ""

Labeled shapes (hard/soft, hard/medium/soft) require a label on every level;
positional shapes (simple, bendable) forbid one. The tokenizer knows nothing
about how many levels a shape needs, the shape codecs check that.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from decimal import Decimal

from attrs import define as _attrs_define

from .errors import MalformedScoreError
from .models.numeric_variant import INT_MAX, INT_MIN, NumericVariant

INIT_LABEL = "init"
LEVEL_SEPARATOR = "/"

_LEVEL_TOKEN_RE = re.compile(r"(?P<number>-?[0-9]+(?:\.[0-9]+)?)(?P<label>[A-Za-z]*)")
_INIT_TOKEN_RE = re.compile(r"(?P<number>-?[0-9]+)init")
_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

_NUMBER_PATTERN = "[-]digits[.digits]"
_INTEGER_PATTERN = "[-]digits"


@_attrs_define(frozen=True)
class LevelToken:
    """One level of a score string.

    Attributes:
        index (int): Position of the raw substring among the "/"-separated segments of the text
        position (int): Position among the levels, the init segment excluded
        raw (str): The segment as it appeared in the text
        value (int | Decimal): Parsed number
        label (str | None): Suffix for labeled shapes, None for positional shapes
    """

    index: int
    position: int
    raw: str
    value: int | Decimal
    label: str | None = None


@_attrs_define(frozen=True)
class ScoreTokens:
    text: str
    init_score: int
    levels: tuple[LevelToken, ...]

    @property
    def values(self) -> tuple[int | Decimal, ...]:
        return tuple(token.value for token in self.levels)


def tokenize(
    text: str,
    *,
    labels: Sequence[str] | None = None,
    numeric: NumericVariant = NumericVariant.INT,
    scale: int | None = None,
) -> ScoreTokens:
    """Split a score string into its init score and level tokens.

    ``labels`` lists the suffixes a labeled shape accepts; pass None for
    positional shapes. Raises MalformedScoreError naming the offending segment.
    """
    if not text:
        raise MalformedScoreError("Empty score text", text=text, expected="at least one level")
    if text != text.strip():
        raise MalformedScoreError(
            "Leading or trailing whitespace", text=text, expected="no surrounding whitespace"
        )

    segments = text.split(LEVEL_SEPARATOR)
    init_score = 0
    offset = 0
    if segments[0].endswith(INIT_LABEL):
        init_score = _parse_init(segments[0], text)
        if len(segments) == 1 or not text[len(segments[0]) + 1 :]:
            raise MalformedScoreError(
                "Unterminated init segment",
                text=text,
                token_index=0,
                token=segments[0],
                expected="<int>init/ followed by the levels",
            )
        offset = 1

    levels = tuple(
        _parse_level(segment, index, index - offset, text, labels, numeric, scale)
        for index, segment in enumerate(segments)
        if index >= offset
    )
    return ScoreTokens(text=text, init_score=init_score, levels=levels)


def _parse_init(segment: str, text: str) -> int:
    match = _INIT_TOKEN_RE.fullmatch(segment)
    if match is None:
        raise MalformedScoreError(
            "Init score is not an integer",
            text=text,
            token_index=0,
            token=segment,
            expected=f"{_INTEGER_PATTERN}init",
        )
    try:
        init_score = int(match.group("number"))
    except ValueError:
        init_score = None
    if init_score is None or not INT_MIN <= init_score <= INT_MAX:
        raise MalformedScoreError(
            "Init score out of 32-bit range",
            text=text,
            token_index=0,
            token=segment,
            expected=f"an integer between {INT_MIN} and {INT_MAX}",
        )
    return init_score


def _parse_level(
    segment: str,
    index: int,
    position: int,
    text: str,
    labels: Sequence[str] | None,
    numeric: NumericVariant,
    scale: int | None,
) -> LevelToken:
    def fail(message: str, expected: str) -> MalformedScoreError:
        return MalformedScoreError(
            message, text=text, token_index=index, token=segment, expected=expected
        )

    if not segment:
        raise fail("Empty level", f"{_NUMBER_PATTERN} between separators")

    match = _LEVEL_TOKEN_RE.fullmatch(segment)
    if match is None:
        raise fail("Level is not a number", _level_pattern(labels, numeric))

    label = match.group("label")
    if labels is None:
        if label:
            raise fail(f"Unexpected label {label!r} on a positional level", "an unlabeled number")
    elif not label:
        raise fail("Missing level label", "a number followed by one of " + ", ".join(labels))
    elif label not in labels:
        raise fail(f"Unknown label {label!r}", "one of " + ", ".join(labels))

    value = parse_number(match.group("number"), numeric, scale, fail)
    return LevelToken(
        index=index,
        position=position,
        raw=segment,
        value=value,
        label=label if labels is not None else None,
    )


def parse_number(
    number: str,
    numeric: NumericVariant,
    scale: int | None,
    fail: Callable[[str, str], MalformedScoreError],
) -> int | Decimal:
    """Convert the numeric part of a level without going through float."""
    if numeric.is_integral:
        if "." in number:
            raise fail(f"Decimal point in a {numeric} level", _INTEGER_PATTERN)
        low, high = numeric.bounds
        try:
            value = int(number)
        except ValueError:
            # more digits than int() accepts, far outside any bound
            value = None
        if value is None or not low <= value <= high:
            raise fail(f"Level out of {numeric} range", f"a number between {low} and {high}")
        return value

    value = Decimal(number)
    if scale is not None and fraction_digits(value) > scale:
        raise fail("Too many fraction digits", f"at most {scale} digits after the point")
    return value


def parse_level_value(
    text: str,
    numeric: NumericVariant = NumericVariant.INT,
    scale: int | None = None,
) -> int | Decimal:
    """Parse a bare level number such as ``-5`` or ``1.25``."""

    def fail(message: str, expected: str) -> MalformedScoreError:
        return MalformedScoreError(message, text=text, expected=expected)

    if _NUMBER_RE.fullmatch(text) is None:
        raise fail("Level is not a number", _level_pattern(None, numeric))
    return parse_number(text, numeric, scale, fail)


def fraction_digits(value: Decimal) -> int:
    exponent = value.as_tuple().exponent
    return -exponent if exponent < 0 else 0


def _level_pattern(labels: Sequence[str] | None, numeric: NumericVariant) -> str:
    number = _INTEGER_PATTERN if numeric.is_integral else _NUMBER_PATTERN
    if labels is None:
        return number
    return f"{number}{'|'.join(labels)}"
