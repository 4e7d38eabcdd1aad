# Area: Engine
"""
treasure_hunt._engine.randomness — Randomness sources
=====================================================

The engine draws every random cell through a RandomnessSource, so
tests and replays can substitute a deterministic source.

ChainStateRandomness mirrors how the game derives randomness on a
chain: it hashes block metadata, the caller and a nonce. Every input
is visible to the caller and the block metadata is chosen by whoever
produces the block, so outcomes are predictable and can be steered
by a motivated participant. It is NOT cryptographically secure and
must not be treated as such.
"""

from __future__ import annotations
import hashlib
import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List

from .._host.local_chain import BlockContext

logger = logging.getLogger("treasure_hunt.engine.randomness")


class RandomnessSource(ABC):
    """Supplies integers for treasure and starting-position draws."""

    @abstractmethod
    def next_in_range(self, n: int) -> int:
        """
        Return an integer in [0, n).

        Args:
            n: Exclusive upper bound, at least 1
        """
        pass


def _check_bound(n: int) -> None:
    if n < 1:
        raise ValueError(f"Range bound must be at least 1, got {n}")


class ChainStateRandomness(RandomnessSource):
    """
    Pseudo-randomness derived from caller-visible chain state.

    Each draw hashes (timestamp, block number, caller, nonce) with
    SHA-256 and reduces the digest modulo n. The nonce increments on
    every draw so two draws inside one call differ.
    """

    def __init__(self, context_provider: Callable[[], BlockContext]):
        self._context_provider = context_provider
        self.nonce = 0

    def next_in_range(self, n: int) -> int:
        _check_bound(n)
        self.nonce += 1
        ctx = self._context_provider()
        material = f"{ctx.timestamp}:{ctx.number}:{ctx.caller}:{self.nonce}"
        digest = hashlib.sha256(material.encode("utf-8")).digest()
        return int.from_bytes(digest, "big") % n


class FixedSequenceRandomness(RandomnessSource):
    """
    Replays a scripted list of draws.

    Each value must already lie in the requested range; a value that
    does not, or running out of values, raises ValueError.
    """

    def __init__(self, values: Iterable[int]):
        self._values: List[int] = list(values)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def extend(self, values: Iterable[int]) -> None:
        self._values.extend(values)

    def next_in_range(self, n: int) -> int:
        _check_bound(n)
        if self._index >= len(self._values):
            raise ValueError("Fixed randomness sequence exhausted")
        value = self._values[self._index]
        if not 0 <= value < n:
            raise ValueError(f"Scripted value {value} outside [0, {n})")
        self._index += 1
        return value
