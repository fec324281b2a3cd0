from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..errors import ShapeMismatchError
from .score_shape import ScoreShape


@_attrs_define(frozen=True, order=False, kw_only=True)
class BendableScore:
    """Score with a configurable number of hard and soft levels.

    The level counts are part of the value: two bendable scores with the same
    flattened levels but a different hard/soft split are not equal.
    Ordering is only defined between scores with the same level counts.

    Attributes:
        init_score (int): Negated count of uninitialized planning variables, 0 when fully initialized
        hard_scores (tuple[int | Decimal, ...]): Hard levels, most significant first
        soft_scores (tuple[int | Decimal, ...]): Soft levels, most significant first
    """

    shape: ClassVar[ScoreShape] = ScoreShape.BENDABLE

    init_score: int = 0
    hard_scores: tuple[int | Decimal, ...] = _attrs_field(default=(), converter=tuple)
    soft_scores: tuple[int | Decimal, ...] = _attrs_field(default=(), converter=tuple)

    @classmethod
    def of(
        cls, hard_scores: list[int | Decimal], soft_scores: list[int | Decimal]
    ) -> BendableScore:
        return cls(hard_scores=hard_scores, soft_scores=soft_scores)

    @classmethod
    def of_uninitialized(
        cls,
        init_score: int,
        hard_scores: list[int | Decimal],
        soft_scores: list[int | Decimal],
    ) -> BendableScore:
        return cls(init_score=init_score, hard_scores=hard_scores, soft_scores=soft_scores)

    @classmethod
    def zero(cls, hard_levels_size: int, soft_levels_size: int) -> BendableScore:
        return cls(hard_scores=[0] * hard_levels_size, soft_scores=[0] * soft_levels_size)

    def with_init_score(self, init_score: int) -> BendableScore:
        return BendableScore(
            init_score=init_score, hard_scores=self.hard_scores, soft_scores=self.soft_scores
        )

    @property
    def hard_levels_size(self) -> int:
        return len(self.hard_scores)

    @property
    def soft_levels_size(self) -> int:
        return len(self.soft_scores)

    @property
    def levels_size(self) -> int:
        return len(self.hard_scores) + len(self.soft_scores)

    def hard_or_soft_score(self, index: int) -> int | Decimal:
        if index < len(self.hard_scores):
            return self.hard_scores[index]
        return self.soft_scores[index - len(self.hard_scores)]

    @property
    def is_solution_initialized(self) -> bool:
        return self.init_score >= 0

    @property
    def is_feasible(self) -> bool:
        return self.is_solution_initialized and all(s >= 0 for s in self.hard_scores)

    def to_level_values(self) -> tuple[int | Decimal, ...]:
        return self.hard_scores + self.soft_scores

    def level_names(self) -> list[str]:
        return [f"hard {i}" for i in range(len(self.hard_scores))] + [
            f"soft {i}" for i in range(len(self.soft_scores))
        ]

    def _order_key(self, other: object) -> tuple:
        if not isinstance(other, BendableScore):
            return NotImplemented
        if (self.hard_levels_size, self.soft_levels_size) != (
            other.hard_levels_size,
            other.soft_levels_size,
        ):
            raise ShapeMismatchError(
                "Cannot compare bendable scores with different level counts",
                expected=f"{self.hard_levels_size} hard and {self.soft_levels_size} soft levels",
                actual=f"{other.hard_levels_size} hard and {other.soft_levels_size} soft levels",
            )
        return (self.init_score, self.hard_scores, self.soft_scores), (
            other.init_score,
            other.hard_scores,
            other.soft_scores,
        )

    def __lt__(self, other: object) -> bool:
        keys = self._order_key(other)
        if keys is NotImplemented:
            return NotImplemented
        return keys[0] < keys[1]

    def __le__(self, other: object) -> bool:
        keys = self._order_key(other)
        if keys is NotImplemented:
            return NotImplemented
        return keys[0] <= keys[1]

    def __gt__(self, other: object) -> bool:
        keys = self._order_key(other)
        if keys is NotImplemented:
            return NotImplemented
        return keys[0] > keys[1]

    def __ge__(self, other: object) -> bool:
        keys = self._order_key(other)
        if keys is NotImplemented:
            return NotImplemented
        return keys[0] >= keys[1]
