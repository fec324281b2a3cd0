"""Property-based tests for the score codec laws."""

from __future__ import annotations

import re
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from score_codec.dispatch import decode_field, encode_field, score_from_levels
from score_codec.errors import MalformedScoreError, ScoreCodecError
from score_codec.models import (
    HardSoftScore,
    NumericVariant,
    ScoreDescriptor,
    ScoreShape,
)
from score_codec.models.numeric_variant import INT_MAX, INT_MIN

CANONICAL_RE = re.compile(
    r"(-?[0-9]+init/)?-?[0-9]+(\.[0-9]+)?[a-z]*(/-?[0-9]+(\.[0-9]+)?[a-z]*)*"
)

init_scores = st.integers(min_value=INT_MIN, max_value=INT_MAX)


def level_values(descriptor: ScoreDescriptor) -> st.SearchStrategy:
    if descriptor.numeric.is_integral:
        low, high = descriptor.numeric.bounds
        return st.integers(min_value=low, max_value=high)
    return st.decimals(
        min_value=-(10**12),
        max_value=10**12,
        allow_nan=False,
        allow_infinity=False,
        places=descriptor.scale,
    )


@st.composite
def descriptors(draw: st.DrawFn) -> ScoreDescriptor:
    shape = draw(st.sampled_from(list(ScoreShape)))
    numeric = draw(st.sampled_from(list(NumericVariant)))
    scale = None
    if numeric is NumericVariant.BIG_DECIMAL:
        scale = draw(st.none() | st.integers(min_value=0, max_value=6))
    if shape is ScoreShape.BENDABLE:
        hard_levels_size = draw(st.integers(min_value=0, max_value=4))
        soft_levels_size = draw(st.integers(min_value=0 if hard_levels_size else 1, max_value=4))
        return ScoreDescriptor.bendable(hard_levels_size, soft_levels_size, numeric, scale)
    return ScoreDescriptor(shape, numeric, scale=scale)


@st.composite
def descriptors_and_scores(draw: st.DrawFn, init: st.SearchStrategy = init_scores):
    descriptor = draw(descriptors())
    levels = draw(
        st.lists(
            level_values(descriptor),
            min_size=descriptor.level_count,
            max_size=descriptor.level_count,
        )
    )
    return descriptor, score_from_levels(levels, descriptor, init_score=draw(init))


score_like_text = st.text(alphabet="0123456789-./hardmediumsoftinit ", max_size=40)


class TestRoundTripProperty:
    @given(pair=descriptors_and_scores())
    def test_decode_inverts_encode(self, pair):
        descriptor, score = pair
        assert decode_field(encode_field(score, descriptor), descriptor) == score

    @given(pair=descriptors_and_scores())
    def test_encoding_is_stable(self, pair):
        descriptor, score = pair
        text = encode_field(score, descriptor)
        assert encode_field(decode_field(text, descriptor), descriptor) == text

    @given(pair=descriptors_and_scores())
    def test_output_follows_grammar(self, pair):
        descriptor, score = pair
        assert CANONICAL_RE.fullmatch(encode_field(score, descriptor))

    @given(pair=descriptors_and_scores())
    def test_equal_scores_encode_identically(self, pair):
        descriptor, score = pair
        flipped = [
            value.copy_negate() if isinstance(value, Decimal) and value.is_zero() else value
            for value in score.to_level_values()
        ]
        twin = score_from_levels(flipped, descriptor, init_score=score.init_score)
        assert twin == score
        assert encode_field(twin, descriptor) == encode_field(score, descriptor)


class TestCanonicalMinimalityProperty:
    @given(pair=descriptors_and_scores(init=st.just(0)))
    def test_no_init_segment_when_initialized(self, pair):
        descriptor, score = pair
        assert "init" not in encode_field(score, descriptor)

    @given(pair=descriptors_and_scores(init=st.just(0)))
    def test_explicit_zero_init_still_decodes(self, pair):
        descriptor, score = pair
        text = "0init/" + encode_field(score, descriptor)
        assert decode_field(text, descriptor) == score

    @given(pair=descriptors_and_scores(init=init_scores.filter(lambda n: n != 0)))
    def test_init_segment_leads(self, pair):
        descriptor, score = pair
        assert encode_field(score, descriptor).startswith(f"{score.init_score}init/")


class TestRejectionProperty:
    @given(text=st.text(), descriptor=descriptors())
    def test_arbitrary_text_fails_only_with_codec_errors(self, text, descriptor):
        try:
            decode_field(text, descriptor)
        except ScoreCodecError:
            pass

    @given(text=score_like_text, descriptor=descriptors())
    def test_score_like_text_fails_only_with_codec_errors(self, text, descriptor):
        try:
            score = decode_field(text, descriptor)
        except ScoreCodecError:
            return
        assert descriptor.matches(score)

    @given(pair=descriptors_and_scores())
    def test_trailing_separator_is_rejected(self, pair):
        descriptor, score = pair
        with pytest.raises(MalformedScoreError):
            decode_field(encode_field(score, descriptor) + "/", descriptor)


class TestOrderingProperty:
    @given(
        a=st.tuples(init_scores, st.integers(), st.integers()),
        b=st.tuples(init_scores, st.integers(), st.integers()),
    )
    def test_lexicographic(self, a, b):
        left = HardSoftScore.of_uninitialized(*a)
        right = HardSoftScore.of_uninitialized(*b)
        assert (left < right) == (a < b)
        assert (left == right) == (a == b)
