"""32-bit wrapping sequence numbers."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MASK64 = (1 << 64) - 1


@dataclass(frozen=True, order=True)
class Wrap32:
    """A 32-bit unsigned integer that starts at an arbitrary zero point and wraps at 2**32."""

    raw_value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    @staticmethod
    def wrap(n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return Wrap32(n + zero_point.raw_value)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        offset = (self.raw_value - zero_point.raw_value) & _MASK32
        base = checkpoint & (_MASK64 ^ _MASK32)
        first = base + offset
        candidates = [first, (first + _MOD32) & _MASK64]
        if first >= _MOD32:
            candidates.append(first - _MOD32)
        # min() keeps the earliest candidate on ties.
        return min(candidates, key=lambda value: abs(value - checkpoint))

    def __add__(self, n: object) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32(self.raw_value + (n & _MASK32))

    def __sub__(self, n: object) -> int:
        if not isinstance(n, int):
            return NotImplemented
        return (self.raw_value - n) & _MASK32

    def __str__(self) -> str:
        return f"Wrap32({self.raw_value})"