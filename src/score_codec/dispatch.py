"""Shape dispatch: the two entry points document serializers call per field.

``encode_field`` and ``decode_field`` pick the shape codec from the field's
declared descriptor, never from the value or the text. The table is closed:
every ``ScoreShape`` has exactly one codec and anything else is a programming
error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

import attrs

from .codecs import (
    BendableScoreCodec,
    HardMediumSoftScoreCodec,
    HardSoftScoreCodec,
    ShapeCodec,
    SimpleScoreCodec,
)
from .errors import MalformedScoreError, ScoreCodecError, ShapeMismatchError, UnsupportedShapeError
from .models.bendable_score import BendableScore
from .models.score import SCORE_TYPES, Score
from .models.score_descriptor import ScoreDescriptor
from .models.score_shape import ScoreShape

logger = logging.getLogger(__name__)

_codecs: dict[ScoreShape, ShapeCodec] = {
    ScoreShape.SIMPLE: SimpleScoreCodec(),
    ScoreShape.HARD_SOFT: HardSoftScoreCodec(),
    ScoreShape.HARD_MEDIUM_SOFT: HardMediumSoftScoreCodec(),
    ScoreShape.BENDABLE: BendableScoreCodec(),
}


def get_shape_codec(shape: ScoreShape) -> ShapeCodec:
    try:
        return _codecs[shape]
    except (KeyError, TypeError):
        available = ", ".join(s.value for s in _codecs)
        raise UnsupportedShapeError(
            f"No codec for score shape {shape!r}. Available: {available}"
        ) from None


def encode_field(value: Score, descriptor: ScoreDescriptor) -> str:
    """Write a score in canonical form for a field declared with ``descriptor``."""
    codec = get_shape_codec(descriptor.shape)
    try:
        if getattr(value, "shape", None) is not descriptor.shape:
            raise ShapeMismatchError(
                "Score does not match the field's declared shape",
                expected=descriptor.shape.value,
                actual=type(value).__name__,
            )
        return codec.encode(value, descriptor)
    except ScoreCodecError as e:
        logger.debug("Failed to encode %s score %r: %s", descriptor.shape, value, e)
        raise


def decode_field(text: str, descriptor: ScoreDescriptor) -> Score:
    """Parse canonical score text for a field declared with ``descriptor``."""
    codec = get_shape_codec(descriptor.shape)
    try:
        if not isinstance(text, str):
            raise MalformedScoreError(
                f"Score must be a string, got {type(text).__name__}",
                text=repr(text),
                expected="canonical score text",
            )
        return codec.decode(text, descriptor)
    except ScoreCodecError as e:
        logger.debug("Failed to decode %s score %r: %s", descriptor.shape, text, e)
        raise


def score_from_levels(
    levels: Iterable[int | Decimal],
    descriptor: ScoreDescriptor,
    *,
    init_score: int = 0,
) -> Score:
    """Build a score of the descriptor's shape from its levels, hard first."""
    get_shape_codec(descriptor.shape)
    levels = tuple(levels)
    if len(levels) != descriptor.level_count:
        raise ShapeMismatchError(
            f"Wrong number of levels for a {descriptor.shape} score",
            expected=f"{descriptor.level_count} levels",
            actual=f"{len(levels)} levels",
        )
    if descriptor.shape is ScoreShape.BENDABLE:
        return BendableScore(
            init_score=init_score,
            hard_scores=levels[: descriptor.hard_levels_size],
            soft_scores=levels[descriptor.hard_levels_size :],
        )
    score_type = SCORE_TYPES[descriptor.shape]
    level_names = [f.name for f in attrs.fields(score_type) if f.name != "init_score"]
    return score_type(init_score=init_score, **dict(zip(level_names, levels)))
