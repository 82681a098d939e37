# src/arenagen/rng.py
# Park-Miller minimal standard generator with explicit state, so a layout
# replays bit-for-bit from its seed on any interpreter.

import secrets
from dataclasses import dataclass
from typing import Sequence, TypeVar

A = 16807
M = 0x7FFFFFFF  # 2^31-1

T = TypeVar("T")


def pm_next(state: int) -> int:
    return (state * A) % M


def state_from_seed(seed: int) -> int:
    # State must be in 1..M-1; 0 would lock the generator at 0.
    return (seed % (M - 1)) + 1


def entropy_seed() -> int:
    """Seed drawn from system entropy, used once per run when no seed is given."""
    return secrets.randbelow(M - 1)


@dataclass
class RandomSource:
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "RandomSource":
        return cls(state_from_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def next_int(self, low: int, high: int) -> int:
        """
        Integer in [low, high). An empty range (high == low) yields low
        without consuming a draw.
        """
        if high < low:
            raise ValueError(f"empty range [{low}, {high})")
        span = high - low
        if span == 0:
            return low
        # Scale instead of modulo: the low bits of the LCG are the weakest.
        return low + ((self.next32() - 1) * span) // (M - 1)

    def chance(self, percent: int) -> bool:
        return self.next_int(0, 100) < percent

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("choice from empty sequence")
        return seq[self.next_int(0, len(seq))]
