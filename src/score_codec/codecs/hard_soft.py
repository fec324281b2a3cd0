from __future__ import annotations

from typing import ClassVar

from ..models.hard_soft_score import HardSoftScore
from ..models.score_shape import ScoreShape
from .base import LabeledScoreCodec


class HardSoftScoreCodec(LabeledScoreCodec):
    """``-999hard/-999soft``"""

    shape: ClassVar[ScoreShape] = ScoreShape.HARD_SOFT
    labels: ClassVar[tuple[str, ...]] = ("hard", "soft")

    def build(self, init_score: int, values: tuple) -> HardSoftScore:
        hard_score, soft_score = values
        return HardSoftScore(init_score=init_score, hard_score=hard_score, soft_score=soft_score)
