from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from attrs import define as _attrs_define

from .score_shape import ScoreShape


@_attrs_define(frozen=True, order=True, kw_only=True)
class HardMediumSoftScore:
    """Score with hard, medium and soft levels.

    Attributes:
        init_score (int): Negated count of uninitialized planning variables, 0 when fully initialized
        hard_score (int | Decimal): Hard level, negative when infeasible
        medium_score (int | Decimal): Medium level
        soft_score (int | Decimal): Soft level
    """

    shape: ClassVar[ScoreShape] = ScoreShape.HARD_MEDIUM_SOFT

    init_score: int = 0
    hard_score: int | Decimal = 0
    medium_score: int | Decimal = 0
    soft_score: int | Decimal = 0

    @classmethod
    def of(
        cls,
        hard_score: int | Decimal,
        medium_score: int | Decimal,
        soft_score: int | Decimal,
    ) -> HardMediumSoftScore:
        return cls(hard_score=hard_score, medium_score=medium_score, soft_score=soft_score)

    @classmethod
    def of_uninitialized(
        cls,
        init_score: int,
        hard_score: int | Decimal,
        medium_score: int | Decimal,
        soft_score: int | Decimal,
    ) -> HardMediumSoftScore:
        return cls(
            init_score=init_score,
            hard_score=hard_score,
            medium_score=medium_score,
            soft_score=soft_score,
        )

    @classmethod
    def zero(cls) -> HardMediumSoftScore:
        return cls()

    def with_init_score(self, init_score: int) -> HardMediumSoftScore:
        return HardMediumSoftScore(
            init_score=init_score,
            hard_score=self.hard_score,
            medium_score=self.medium_score,
            soft_score=self.soft_score,
        )

    @property
    def is_solution_initialized(self) -> bool:
        return self.init_score >= 0

    @property
    def is_feasible(self) -> bool:
        return self.is_solution_initialized and self.hard_score >= 0

    def to_level_values(self) -> tuple[int | Decimal, ...]:
        return (self.hard_score, self.medium_score, self.soft_score)

    def level_names(self) -> list[str]:
        return ["hard", "medium", "soft"]
