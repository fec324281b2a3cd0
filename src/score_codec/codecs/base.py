from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar, Protocol, runtime_checkable

from ..errors import MalformedScoreError, ShapeMismatchError, UnencodableValueError
from ..grammar import INIT_LABEL, LEVEL_SEPARATOR, ScoreTokens, fraction_digits, tokenize
from ..models.numeric_variant import INT_MAX, INT_MIN
from ..models.score_descriptor import ScoreDescriptor
from ..models.score_shape import ScoreShape


@runtime_checkable
class ShapeCodec(Protocol):
    shape: ClassVar[ScoreShape]

    def encode(self, score: Any, descriptor: ScoreDescriptor) -> str: ...
    def decode(self, text: str, descriptor: ScoreDescriptor) -> Any: ...


def format_init(init_score: int) -> str:
    """Init prefix for a score, empty for an initialized one."""
    if isinstance(init_score, bool) or not isinstance(init_score, int):
        raise UnencodableValueError("Init score must be an int", value=init_score)
    if not INT_MIN <= init_score <= INT_MAX:
        raise UnencodableValueError("Init score out of 32-bit range", value=init_score)
    if init_score == 0:
        return ""
    return f"{init_score}{INIT_LABEL}{LEVEL_SEPARATOR}"


def format_level(value: Any, index: int, descriptor: ScoreDescriptor) -> str:
    numeric = descriptor.numeric
    if isinstance(value, bool):
        raise UnencodableValueError("Booleans are not score levels", value=value, index=index)

    if numeric.is_integral:
        if not isinstance(value, int):
            raise UnencodableValueError(
                f"A {numeric} level must be an int", value=value, index=index
            )
        low, high = numeric.bounds
        if not low <= value <= high:
            raise UnencodableValueError(f"Level out of {numeric} range", value=value, index=index)
        return str(value)

    if isinstance(value, int):
        value = Decimal(value)
    elif not isinstance(value, Decimal):
        raise UnencodableValueError(
            f"A {numeric} level must be an int or Decimal", value=value, index=index
        )
    if not value.is_finite():
        raise UnencodableValueError("Non-finite level", value=value, index=index)
    if descriptor.scale is not None and fraction_digits(value) > descriptor.scale:
        raise UnencodableValueError(
            f"Level needs more than {descriptor.scale} fraction digits", value=value, index=index
        )
    if value.is_zero():
        # Decimal keeps a signed zero; "-0.00" and "0.00" are the same level
        value = value.copy_abs()
    return format(value, "f")


def check_level_count(tokens: ScoreTokens, expected: int, shape: ScoreShape) -> None:
    actual = len(tokens.levels)
    if actual != expected:
        raise ShapeMismatchError(
            f"Score text {tokens.text!r} does not fit a {shape} score",
            expected=f"{expected} levels",
            actual=f"{actual} levels",
        )


class LabeledScoreCodec:
    """Shared codec for shapes whose levels carry a fixed sequence of labels."""

    shape: ClassVar[ScoreShape]
    labels: ClassVar[tuple[str, ...]]

    def encode(self, score: Any, descriptor: ScoreDescriptor) -> str:
        parts = [
            format_level(value, index, descriptor) + label
            for index, (value, label) in enumerate(zip(score.to_level_values(), self.labels))
        ]
        return format_init(score.init_score) + LEVEL_SEPARATOR.join(parts)

    def decode(self, text: str, descriptor: ScoreDescriptor) -> Any:
        tokens = tokenize(
            text, labels=self.labels, numeric=descriptor.numeric, scale=descriptor.scale
        )
        check_level_count(tokens, len(self.labels), self.shape)
        for token, label in zip(tokens.levels, self.labels):
            if token.label != label:
                raise MalformedScoreError(
                    f"Level label {token.label!r} out of order",
                    text=text,
                    token_index=token.index,
                    token=token.raw,
                    expected=f"the {label} level at position {token.position}",
                )
        return self.build(tokens.init_score, tokens.values)

    def build(self, init_score: int, values: tuple) -> Any:
        raise NotImplementedError
