"""Canonical string codec for constraint-solver scores"""

from .dispatch import decode_field, encode_field, get_shape_codec, score_from_levels
from .errors import (
    MalformedScoreError,
    ScoreCodecError,
    ShapeMismatchError,
    UnencodableValueError,
    UnsupportedShapeError,
)
from .fields import ScoreField
from .models import (
    BendableScore,
    HardMediumSoftScore,
    HardSoftScore,
    NumericVariant,
    Score,
    ScoreDescriptor,
    ScoreShape,
    SimpleScore,
)

__all__ = (
    "BendableScore",
    "HardMediumSoftScore",
    "HardSoftScore",
    "MalformedScoreError",
    "NumericVariant",
    "Score",
    "ScoreCodecError",
    "ScoreDescriptor",
    "ScoreField",
    "ScoreShape",
    "ShapeMismatchError",
    "SimpleScore",
    "UnencodableValueError",
    "UnsupportedShapeError",
    "decode_field",
    "encode_field",
    "get_shape_codec",
    "score_from_levels",
)
