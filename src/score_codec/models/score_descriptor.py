from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..errors import UnsupportedShapeError
from .numeric_variant import NumericVariant
from .score_shape import ScoreShape

T = TypeVar("T", bound="ScoreDescriptor")


def _to_shape(value: ScoreShape | str) -> ScoreShape:
    try:
        return ScoreShape(value)
    except ValueError:
        raise UnsupportedShapeError(
            f"Unknown score shape: {value!r}. Available: " + ", ".join(s.value for s in ScoreShape)
        ) from None


def _to_numeric(value: NumericVariant | str) -> NumericVariant:
    try:
        return NumericVariant(value)
    except ValueError:
        raise UnsupportedShapeError(
            f"Unknown numeric variant: {value!r}. Available: "
            + ", ".join(n.value for n in NumericVariant)
        ) from None


_FIXED_LEVEL_COUNTS: dict[ScoreShape, int] = {
    ScoreShape.SIMPLE: 1,
    ScoreShape.HARD_SOFT: 2,
    ScoreShape.HARD_MEDIUM_SOFT: 3,
}


@_attrs_define(frozen=True)
class ScoreDescriptor:
    """Declared shape of a score field.

    Resolved once when a field is set up and reused for every encode/decode on
    that field. For bendable shapes the level counts come from the solver's
    configuration; they cannot be recovered from a score string.

    Attributes:
        shape (ScoreShape): Which score class the field holds
        numeric (NumericVariant): Numeric type of each level
        hard_levels_size (int | None): Number of hard levels, bendable only
        soft_levels_size (int | None): Number of soft levels, bendable only
        scale (int | None): Maximum fraction digits, big_decimal only
    """

    shape: ScoreShape = _attrs_field(converter=_to_shape)
    numeric: NumericVariant = _attrs_field(default=NumericVariant.INT, converter=_to_numeric)
    hard_levels_size: int | None = None
    soft_levels_size: int | None = None
    scale: int | None = None

    def __attrs_post_init__(self) -> None:
        if self.shape is ScoreShape.BENDABLE:
            for name in ("hard_levels_size", "soft_levels_size"):
                size = getattr(self, name)
                if not isinstance(size, int) or isinstance(size, bool) or size < 0:
                    raise ValueError(
                        f"Bendable descriptor requires a non-negative {name}, got {size!r}"
                    )
            if self.hard_levels_size + self.soft_levels_size == 0:
                raise ValueError("Bendable descriptor requires at least one level")
        elif self.hard_levels_size is not None or self.soft_levels_size is not None:
            raise ValueError(f"Level sizes are only configurable for bendable scores, not {self.shape}")
        if self.scale is not None:
            if self.numeric is not NumericVariant.BIG_DECIMAL:
                raise ValueError(f"scale is only allowed for big_decimal scores, not {self.numeric}")
            if not isinstance(self.scale, int) or isinstance(self.scale, bool) or self.scale < 0:
                raise ValueError(f"scale must be a non-negative integer, got {self.scale!r}")

    @classmethod
    def simple(
        cls, numeric: NumericVariant = NumericVariant.INT, scale: int | None = None
    ) -> ScoreDescriptor:
        return cls(ScoreShape.SIMPLE, numeric, scale=scale)

    @classmethod
    def hard_soft(
        cls, numeric: NumericVariant = NumericVariant.INT, scale: int | None = None
    ) -> ScoreDescriptor:
        return cls(ScoreShape.HARD_SOFT, numeric, scale=scale)

    @classmethod
    def hard_medium_soft(
        cls, numeric: NumericVariant = NumericVariant.INT, scale: int | None = None
    ) -> ScoreDescriptor:
        return cls(ScoreShape.HARD_MEDIUM_SOFT, numeric, scale=scale)

    @classmethod
    def bendable(
        cls,
        hard_levels_size: int,
        soft_levels_size: int,
        numeric: NumericVariant = NumericVariant.INT,
        scale: int | None = None,
    ) -> ScoreDescriptor:
        return cls(
            ScoreShape.BENDABLE,
            numeric,
            hard_levels_size=hard_levels_size,
            soft_levels_size=soft_levels_size,
            scale=scale,
        )

    @property
    def level_count(self) -> int:
        if self.shape is ScoreShape.BENDABLE:
            return self.hard_levels_size + self.soft_levels_size
        return _FIXED_LEVEL_COUNTS[self.shape]

    def matches(self, score: object) -> bool:
        if getattr(score, "shape", None) is not self.shape:
            return False
        if self.shape is ScoreShape.BENDABLE:
            return (
                score.hard_levels_size == self.hard_levels_size
                and score.soft_levels_size == self.soft_levels_size
            )
        return True

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {
            "shape": self.shape.value,
            "numeric": self.numeric.value,
        }
        if self.hard_levels_size is not None:
            field_dict["hard_levels_size"] = self.hard_levels_size
        if self.soft_levels_size is not None:
            field_dict["soft_levels_size"] = self.soft_levels_size
        if self.scale is not None:
            field_dict["scale"] = self.scale

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        shape = d.pop("shape")

        numeric = d.pop("numeric", NumericVariant.INT)

        hard_levels_size = d.pop("hard_levels_size", None)

        soft_levels_size = d.pop("soft_levels_size", None)

        scale = d.pop("scale", None)

        if d:
            raise ValueError(f"Unexpected score descriptor keys: {', '.join(sorted(d))}")

        return cls(
            shape,
            numeric,
            hard_levels_size=hard_levels_size,
            soft_levels_size=soft_levels_size,
            scale=scale,
        )
