from __future__ import annotations

from attrs import define as _attrs_define

from .dispatch import decode_field, encode_field
from .models.score import Score
from .models.score_descriptor import ScoreDescriptor
from .types import Unset


@_attrs_define(frozen=True)
class ScoreField:
    """Per-field serialize/deserialize hook bound to one score descriptor.

    Models call it from ``to_dict`` / ``from_dict``. ``None`` and ``UNSET``
    pass through so optional score fields keep their absent state.
    """

    descriptor: ScoreDescriptor

    def serialize(self, value: Score | None | Unset) -> str | None | Unset:
        if value is None or isinstance(value, Unset):
            return value
        return encode_field(value, self.descriptor)

    def deserialize(self, data: object) -> Score | None | Unset:
        if data is None or isinstance(data, Unset):
            return data
        return decode_field(data, self.descriptor)

