from __future__ import annotations

from typing import ClassVar

from ..grammar import tokenize
from ..models.score_descriptor import ScoreDescriptor
from ..models.score_shape import ScoreShape
from ..models.simple_score import SimpleScore
from .base import check_level_count, format_init, format_level


class SimpleScoreCodec:
    """Single unlabeled level, e.g. ``42`` or ``-1init/-7``."""

    shape: ClassVar[ScoreShape] = ScoreShape.SIMPLE

    def encode(self, score: SimpleScore, descriptor: ScoreDescriptor) -> str:
        return format_init(score.init_score) + format_level(score.score, 0, descriptor)

    def decode(self, text: str, descriptor: ScoreDescriptor) -> SimpleScore:
        tokens = tokenize(text, labels=None, numeric=descriptor.numeric, scale=descriptor.scale)
        check_level_count(tokens, 1, self.shape)
        return SimpleScore(init_score=tokens.init_score, score=tokens.levels[0].value)
