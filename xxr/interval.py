"""Lower-upper bound interval symbol for real-valued conditions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class IntervalSymbol:
    """An interval [l, u] matching one real-valued input."""

    l: float  # noqa: E741
    u: float

    @classmethod
    def from_value(cls, value: float) -> IntervalSymbol:
        """Return the degenerate interval [value, value]."""
        return cls(value, value)

    def lower(self) -> float:
        return self.l

    def upper(self) -> float:
        return self.u

    def __str__(self) -> str:
        return f"{self.l:.3g};{self.u:.3g} "