from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from attrs import define as _attrs_define

from .score_shape import ScoreShape


@_attrs_define(frozen=True, order=True, kw_only=True)
class SimpleScore:
    """Score with a single level.

    Attributes:
        init_score (int): Negated count of uninitialized planning variables, 0 when fully initialized
        score (int | Decimal): The only level
    """

    shape: ClassVar[ScoreShape] = ScoreShape.SIMPLE

    init_score: int = 0
    score: int | Decimal = 0

    @classmethod
    def of(cls, score: int | Decimal) -> SimpleScore:
        return cls(score=score)

    @classmethod
    def of_uninitialized(cls, init_score: int, score: int | Decimal) -> SimpleScore:
        return cls(init_score=init_score, score=score)

    @classmethod
    def zero(cls) -> SimpleScore:
        return cls()

    def with_init_score(self, init_score: int) -> SimpleScore:
        return SimpleScore(init_score=init_score, score=self.score)

    @property
    def is_solution_initialized(self) -> bool:
        return self.init_score >= 0

    @property
    def is_feasible(self) -> bool:
        return self.is_solution_initialized

    def to_level_values(self) -> tuple[int | Decimal, ...]:
        return (self.score,)

    def level_names(self) -> list[str]:
        return ["score"]
