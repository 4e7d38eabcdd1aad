# Area: Engine Tests
"""Tests for randomness sources."""

import hashlib

import pytest

from treasure_hunt._engine.randomness import (
    ChainStateRandomness,
    FixedSequenceRandomness,
)
from treasure_hunt._host.local_chain import BlockContext


def fixed_context(caller="0xAlice"):
    return lambda: BlockContext(number=7, timestamp=1_700_000_000, caller=caller)


class TestChainStateRandomness:
    """Tests for ChainStateRandomness."""

    def test_values_in_range(self):
        source = ChainStateRandomness(fixed_context())
        for n in (1, 2, 99, 100):
            for _ in range(50):
                assert 0 <= source.next_in_range(n) < n

    def test_same_inputs_same_sequence(self):
        first = ChainStateRandomness(fixed_context())
        second = ChainStateRandomness(fixed_context())
        assert [first.next_in_range(100) for _ in range(5)] == [
            second.next_in_range(100) for _ in range(5)
        ]

    def test_nonce_advances_per_draw(self):
        source = ChainStateRandomness(fixed_context())
        source.next_in_range(100)
        source.next_in_range(100)
        assert source.nonce == 2

    def test_caller_changes_sequence(self):
        alice = ChainStateRandomness(fixed_context("0xAlice"))
        bob = ChainStateRandomness(fixed_context("0xBob"))
        assert [alice.next_in_range(100) for _ in range(5)] != [
            bob.next_in_range(100) for _ in range(5)
        ]

    def test_outcome_is_predictable(self):
        """Anyone who sees the block metadata can compute the next draw."""
        source = ChainStateRandomness(fixed_context())
        digest = hashlib.sha256(b"1700000000:7:0xAlice:1").digest()
        expected = int.from_bytes(digest, "big") % 100

        assert source.next_in_range(100) == expected

    def test_rejects_empty_range(self):
        source = ChainStateRandomness(fixed_context())
        with pytest.raises(ValueError):
            source.next_in_range(0)


class TestFixedSequenceRandomness:
    """Tests for FixedSequenceRandomness."""

    def test_replays_values(self):
        source = FixedSequenceRandomness([3, 1, 4])
        assert [source.next_in_range(10) for _ in range(3)] == [3, 1, 4]
        assert source.remaining == 0

    def test_extend(self):
        source = FixedSequenceRandomness([1])
        source.extend([2])
        source.next_in_range(10)
        assert source.next_in_range(10) == 2

    def test_exhausted_raises(self):
        source = FixedSequenceRandomness([])
        with pytest.raises(ValueError):
            source.next_in_range(10)

    def test_out_of_range_value_raises(self):
        source = FixedSequenceRandomness([99])
        with pytest.raises(ValueError):
            source.next_in_range(99)
        assert source.remaining == 1
