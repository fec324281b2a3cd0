from __future__ import annotations

import datetime
from typing import ClassVar

import pytest

from score_codec.documents import SolverJobResult, SolverStatus
from score_codec.errors import MalformedScoreError, ShapeMismatchError
from score_codec.fields import ScoreField
from score_codec.models import BendableScore, HardSoftScore, ScoreDescriptor
from score_codec.types import UNSET


class BendableJobResult(SolverJobResult):
    score_field: ClassVar[ScoreField] = ScoreField(ScoreDescriptor.bendable(2, 1))


class TestScoreField:
    field = ScoreField(ScoreDescriptor.hard_soft())

    def test_serialize(self) -> None:
        assert self.field.serialize(HardSoftScore.of(-999, -999)) == "-999hard/-999soft"

    def test_deserialize(self) -> None:
        assert self.field.deserialize("-2init/0hard/-5soft") == HardSoftScore.of_uninitialized(-2, 0, -5)

    @pytest.mark.parametrize("value", [None, UNSET])
    def test_absent_values_pass_through(self, value: object) -> None:
        assert self.field.serialize(value) is value
        assert self.field.deserialize(value) is value


class TestSolverJobResult:
    def test_to_dict(self) -> None:
        result = SolverJobResult(
            problem_id="cloud-balancing-400",
            solver_status=SolverStatus.NOT_SOLVING,
            score=HardSoftScore.of(-999, -999),
            solved_at=datetime.datetime(2024, 5, 1, 12, 30, tzinfo=datetime.timezone.utc),
        )
        assert result.to_dict() == {
            "problem_id": "cloud-balancing-400",
            "solver_status": "NOT_SOLVING",
            "score": "-999hard/-999soft",
            "solved_at": "2024-05-01T12:30:00+00:00",
        }

    def test_unset_fields_are_omitted(self) -> None:
        result = SolverJobResult(problem_id="p", solver_status=SolverStatus.SOLVING_SCHEDULED)
        assert result.to_dict() == {"problem_id": "p", "solver_status": "SOLVING_SCHEDULED"}

    def test_null_score_is_kept(self) -> None:
        result = SolverJobResult(problem_id="p", solver_status=SolverStatus.SOLVING_ACTIVE, score=None)
        assert result.to_dict()["score"] is None

    def test_from_dict(self) -> None:
        result = SolverJobResult.from_dict(
            {
                "problem_id": "nurse-rostering",
                "solver_status": "SOLVING_ACTIVE",
                "score": "-1init/-3hard/-40soft",
                "solved_at": "2024-05-01T12:30:00Z",
                "solver_id": "node-7",
            }
        )
        assert result.score == HardSoftScore.of_uninitialized(-1, -3, -40)
        assert result.solver_status is SolverStatus.SOLVING_ACTIVE
        assert result.solved_at == datetime.datetime(2024, 5, 1, 12, 30, tzinfo=datetime.timezone.utc)
        assert result.additional_keys == ["solver_id"]
        assert result["solver_id"] == "node-7"

    def test_from_dict_without_score(self) -> None:
        result = SolverJobResult.from_dict({"problem_id": "p", "solver_status": "NOT_SOLVING"})
        assert result.score is UNSET

    def test_round_trip(self) -> None:
        data = {
            "problem_id": "p",
            "solver_status": "NOT_SOLVING",
            "score": "0hard/-12soft",
            "extra": [1, 2],
        }
        assert SolverJobResult.from_dict(data).to_dict() == data

    def test_malformed_score_propagates(self) -> None:
        with pytest.raises(MalformedScoreError):
            SolverJobResult.from_dict(
                {"problem_id": "p", "solver_status": "NOT_SOLVING", "score": "-5hard//3soft"}
            )

    def test_subclass_binds_bendable_descriptor(self) -> None:
        result = BendableJobResult.from_dict(
            {"problem_id": "p", "solver_status": "NOT_SOLVING", "score": "-1/-2/-3"}
        )
        assert result.score == BendableScore.of([-1, -2], [-3])
        assert result.to_dict()["score"] == "-1/-2/-3"

    def test_wrong_score_type_for_field(self) -> None:
        result = BendableJobResult(
            problem_id="p", solver_status=SolverStatus.NOT_SOLVING, score=HardSoftScore.of(0, 0)
        )
        with pytest.raises(ShapeMismatchError):
            result.to_dict()
