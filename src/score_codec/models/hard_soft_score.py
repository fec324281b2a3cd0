from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from attrs import define as _attrs_define

from .score_shape import ScoreShape


@_attrs_define(frozen=True, order=True, kw_only=True)
class HardSoftScore:
    """Score with a hard level and a soft level.

    Ordered by init score, then hard, then soft.

    Attributes:
        init_score (int): Negated count of uninitialized planning variables, 0 when fully initialized
        hard_score (int | Decimal): Sum of broken hard constraint weights, negative when infeasible
        soft_score (int | Decimal): Sum of soft constraint weights
    """

    shape: ClassVar[ScoreShape] = ScoreShape.HARD_SOFT

    init_score: int = 0
    hard_score: int | Decimal = 0
    soft_score: int | Decimal = 0

    @classmethod
    def of(cls, hard_score: int | Decimal, soft_score: int | Decimal) -> HardSoftScore:
        return cls(hard_score=hard_score, soft_score=soft_score)

    @classmethod
    def of_uninitialized(
        cls, init_score: int, hard_score: int | Decimal, soft_score: int | Decimal
    ) -> HardSoftScore:
        return cls(init_score=init_score, hard_score=hard_score, soft_score=soft_score)

    @classmethod
    def of_hard(cls, hard_score: int | Decimal) -> HardSoftScore:
        return cls(hard_score=hard_score)

    @classmethod
    def of_soft(cls, soft_score: int | Decimal) -> HardSoftScore:
        return cls(soft_score=soft_score)

    @classmethod
    def zero(cls) -> HardSoftScore:
        return cls()

    def with_init_score(self, init_score: int) -> HardSoftScore:
        return HardSoftScore(
            init_score=init_score, hard_score=self.hard_score, soft_score=self.soft_score
        )

    @property
    def is_solution_initialized(self) -> bool:
        return self.init_score >= 0

    @property
    def is_feasible(self) -> bool:
        return self.is_solution_initialized and self.hard_score >= 0

    def to_level_values(self) -> tuple[int | Decimal, ...]:
        return (self.hard_score, self.soft_score)

    def level_names(self) -> list[str]:
        return ["hard", "soft"]
