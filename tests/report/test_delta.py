# topmark:header:start
#
#   project      : FtdcStat
#   file         : test_delta.py
#   file_relpath : tests/report/test_delta.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the delta engine and its counter-reset policy."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from ftdcstat.report.delta import DeltaEngine


def test_delta_sequence_with_reset() -> None:
    """First sight is zero, a decrease spikes to the new raw value."""
    engine = DeltaEngine()

    assert engine.compute_delta("k", 100) == 0
    assert engine.compute_delta("k", 150) == 50
    assert engine.compute_delta("k", 120) == 120
    assert engine.last_value("k") == 120
    assert engine.compute_delta("k", 130) == 10


def test_zero_sample_is_treated_as_reset() -> None:
    """A genuine zero reading is indistinguishable from a reset."""
    engine = DeltaEngine()
    engine.compute_delta("k", 5)

    assert engine.compute_delta("k", 0) == 0
    assert engine.last_value("k") == 0
    assert engine.compute_delta("k", 7) == 7


def test_keys_are_independent() -> None:
    engine = DeltaEngine()

    assert engine.compute_delta("a", 10) == 0
    assert engine.compute_delta("b", 1000) == 0
    assert engine.compute_delta("a", 15) == 5
    assert engine.compute_delta("b", 1001) == 1
    assert len(engine) == 2
    assert "a" in engine
    assert "c" not in engine


def test_engines_do_not_share_state() -> None:
    first = DeltaEngine()
    second = DeltaEngine()
    first.compute_delta("k", 10)

    assert second.last_value("k") is None
    assert second.compute_delta("k", 20) == 0


def test_reset_forgets_every_key() -> None:
    engine = DeltaEngine()
    engine.compute_delta("k", 10)
    engine.reset()

    assert len(engine) == 0
    assert engine.compute_delta("k", 20) == 0


@given(
    st.lists(st.integers(min_value=1, max_value=2**40), min_size=1, max_size=50).map(sorted)
)
def test_monotonic_counter_deltas_sum_to_total_increase(values: list[int]) -> None:
    """Without resets the deltas add up to last minus first."""
    engine = DeltaEngine()

    deltas = [engine.compute_delta("k", v) for v in values]

    assert deltas[0] == 0
    assert all(d >= 0 for d in deltas)
    assert sum(deltas) == values[-1] - values[0]


@given(st.lists(st.integers(min_value=0, max_value=2**64 - 1), min_size=1, max_size=50))
def test_deltas_are_never_negative(values: list[int]) -> None:
    engine = DeltaEngine()

    assert all(engine.compute_delta("k", v) >= 0 for v in values)
