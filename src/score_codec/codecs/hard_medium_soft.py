from __future__ import annotations

from typing import ClassVar

from ..models.hard_medium_soft_score import HardMediumSoftScore
from ..models.score_shape import ScoreShape
from .base import LabeledScoreCodec


class HardMediumSoftScoreCodec(LabeledScoreCodec):
    """``-1hard/-20medium/-300soft``"""

    shape: ClassVar[ScoreShape] = ScoreShape.HARD_MEDIUM_SOFT
    labels: ClassVar[tuple[str, ...]] = ("hard", "medium", "soft")

    def build(self, init_score: int, values: tuple) -> HardMediumSoftScore:
        hard_score, medium_score, soft_score = values
        return HardMediumSoftScore(
            init_score=init_score,
            hard_score=hard_score,
            medium_score=medium_score,
            soft_score=soft_score,
        )
