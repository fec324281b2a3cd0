from .bendable_score import BendableScore
from .hard_medium_soft_score import HardMediumSoftScore
from .hard_soft_score import HardSoftScore
from .score_shape import ScoreShape
from .simple_score import SimpleScore

Score = SimpleScore | HardSoftScore | HardMediumSoftScore | BendableScore

SCORE_TYPES: dict[ScoreShape, type[Score]] = {
    ScoreShape.SIMPLE: SimpleScore,
    ScoreShape.HARD_SOFT: HardSoftScore,
    ScoreShape.HARD_MEDIUM_SOFT: HardMediumSoftScore,
    ScoreShape.BENDABLE: BendableScore,
}
