from __future__ import annotations

from typing import ClassVar

from ..errors import ShapeMismatchError
from ..grammar import LEVEL_SEPARATOR, tokenize
from ..models.bendable_score import BendableScore
from ..models.score_descriptor import ScoreDescriptor
from ..models.score_shape import ScoreShape
from .base import check_level_count, format_init, format_level


class BendableScoreCodec:
    """Positional levels, hard levels first: ``-1/-2/-3``.

    The string does not record where the hard levels end. The same text
    decodes to different scores under different descriptors, so callers must
    pass the descriptor the score was written with.
    """

    shape: ClassVar[ScoreShape] = ScoreShape.BENDABLE

    def encode(self, score: BendableScore, descriptor: ScoreDescriptor) -> str:
        if (score.hard_levels_size, score.soft_levels_size) != (
            descriptor.hard_levels_size,
            descriptor.soft_levels_size,
        ):
            raise ShapeMismatchError(
                "Bendable score dimensions differ from the field's",
                expected=_dimensions(descriptor.hard_levels_size, descriptor.soft_levels_size),
                actual=_dimensions(score.hard_levels_size, score.soft_levels_size),
            )
        parts = [
            format_level(value, index, descriptor)
            for index, value in enumerate(score.to_level_values())
        ]
        return format_init(score.init_score) + LEVEL_SEPARATOR.join(parts)

    def decode(self, text: str, descriptor: ScoreDescriptor) -> BendableScore:
        tokens = tokenize(text, labels=None, numeric=descriptor.numeric, scale=descriptor.scale)
        check_level_count(tokens, descriptor.level_count, self.shape)
        values = tokens.values
        return BendableScore(
            init_score=tokens.init_score,
            hard_scores=values[: descriptor.hard_levels_size],
            soft_scores=values[descriptor.hard_levels_size :],
        )


def _dimensions(hard_levels_size: int, soft_levels_size: int) -> str:
    return f"{hard_levels_size} hard + {soft_levels_size} soft levels"
