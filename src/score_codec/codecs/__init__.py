"""One encode/decode algorithm per score shape"""

from .base import LabeledScoreCodec, ShapeCodec
from .bendable import BendableScoreCodec
from .hard_medium_soft import HardMediumSoftScoreCodec
from .hard_soft import HardSoftScoreCodec
from .simple import SimpleScoreCodec

__all__ = (
    "BendableScoreCodec",
    "HardMediumSoftScoreCodec",
    "HardSoftScoreCodec",
    "LabeledScoreCodec",
    "ShapeCodec",
    "SimpleScoreCodec",
)
