from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..fields import ScoreField
from ..models.score import Score
from ..models.score_descriptor import ScoreDescriptor
from ..types import UNSET, Unset
from .solver_status import SolverStatus

T = TypeVar("T", bound="SolverJobResult")


@_attrs_define
class SolverJobResult:
    """Outcome of one solver job as stored or returned by a planning service.

    The score is written as canonical text, e.g. ``"score": "-999hard/-999soft"``.
    Subclasses bind a different score shape by overriding ``score_field``.

    Attributes:
        problem_id (str): Identifier of the planning problem
        solver_status (SolverStatus): Whether the solver is still working on the problem
        score (Score | None | Unset): Best score found so far
        solved_at (datetime.datetime | None | Unset): Timestamp when solving ended
    """

    score_field: ClassVar[ScoreField] = ScoreField(ScoreDescriptor.hard_soft())

    problem_id: str
    solver_status: SolverStatus
    score: Score | None | Unset = UNSET
    solved_at: datetime.datetime | None | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        problem_id = self.problem_id

        solver_status = self.solver_status.value

        score = self.score_field.serialize(self.score)

        solved_at: None | str | Unset
        if isinstance(self.solved_at, Unset):
            solved_at = UNSET
        elif isinstance(self.solved_at, datetime.datetime):
            solved_at = self.solved_at.isoformat()
        else:
            solved_at = self.solved_at

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "problem_id": problem_id,
                "solver_status": solver_status,
            }
        )
        if score is not UNSET:
            field_dict["score"] = score
        if solved_at is not UNSET:
            field_dict["solved_at"] = solved_at

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        problem_id = d.pop("problem_id")

        solver_status = SolverStatus(d.pop("solver_status"))

        score = cls.score_field.deserialize(d.pop("score", UNSET))

        def _parse_solved_at(data: object) -> datetime.datetime | None | Unset:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            try:
                if not isinstance(data, str):
                    raise TypeError()
                solved_at_type_0 = isoparse(data)

                return solved_at_type_0
            except (TypeError, ValueError, AttributeError, KeyError):
                pass
            return cast(datetime.datetime | None | Unset, data)

        solved_at = _parse_solved_at(d.pop("solved_at", UNSET))

        solver_job_result = cls(
            problem_id=problem_id,
            solver_status=solver_status,
            score=score,
            solved_at=solved_at,
        )

        solver_job_result.additional_properties = d
        return solver_job_result

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.additional_properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
