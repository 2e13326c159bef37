"""N-dimensional checkerboard classification problem."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from . import rng
from .environment import Environment

_EPSILON = sys.float_info.epsilon


class CheckerboardEnvironment(Environment):
    """Single-step problem: classify the colour of a point on a checkerboard."""

    def __init__(self, dim: int, division: int) -> None:
        super().__init__((False, True))
        self._dim = dim
        self._division = division
        self._situation = self._random_situation()
        self._is_end_of_problem = False

    def _random_situation(self) -> list[float]:
        return [rng.next_double() for _ in range(self._dim)]

    def situation(self) -> list[float]:
        return list(self._situation)

    def execute_action(self, action: bool) -> float:
        reward = 1000.0 if action == self.answer() else 0.0
        self._situation = self._random_situation()
        self._is_end_of_problem = True
        return reward

    def is_end_of_problem(self) -> bool:
        return self._is_end_of_problem

    def answer(self, situation: Sequence[float] | None = None) -> bool:
        """Return the colour of the given situation, or of the current one."""
        if situation is None:
            situation = self._situation
        if len(situation) != self._dim:
            raise ValueError(
                f"situation has {len(situation)} values, expected {self._dim}"
            )
        total = 0
        for value in situation:
            clamped = min(max(value, 0.0), 1.0 - _EPSILON)
            total += int(clamped * self._division)
        return total % 2 != 0