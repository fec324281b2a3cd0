"""Contains the score value types and shape metadata"""

from .bendable_score import BendableScore
from .hard_medium_soft_score import HardMediumSoftScore
from .hard_soft_score import HardSoftScore
from .numeric_variant import NumericVariant
from .score import SCORE_TYPES, Score
from .score_descriptor import ScoreDescriptor
from .score_shape import ScoreShape
from .simple_score import SimpleScore

__all__ = (
    "SCORE_TYPES",
    "BendableScore",
    "HardMediumSoftScore",
    "HardSoftScore",
    "NumericVariant",
    "Score",
    "ScoreDescriptor",
    "ScoreShape",
    "SimpleScore",
)
