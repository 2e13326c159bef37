"""Environment that replays labelled examples from a dataset."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any

from . import rng
from .environment import Environment


class DatasetEnvironment(Environment):
    """Single-step problem where each situation comes with a correct action."""

    def __init__(
        self,
        situations: Sequence[Sequence[Any]],
        actions: Sequence[Hashable],
        available_actions: Iterable[Hashable],
        choose_random: bool = True,
    ) -> None:
        super().__init__(available_actions)
        if not situations or not actions:
            raise ValueError("the dataset must not be empty")
        if len(situations) != len(actions):
            raise ValueError("situations and actions must have the same length")
        self._situations = [list(s) for s in situations]
        self._actions = list(actions)
        self._choose_random = choose_random
        self._next_idx = 0
        self._is_end_of_problem = False
        self._situation: list = []
        self._answer: Any = None
        self._load_next()

    def _load_next(self) -> None:
        if self._choose_random:
            idx = rng.next_int(0, len(self._situations) - 1)
        else:
            idx = self._next_idx
            self._next_idx = (self._next_idx + 1) % len(self._situations)
        self._situation = self._situations[idx]
        self._answer = self._actions[idx]

    def situation(self) -> list:
        return list(self._situation)

    def execute_action(self, action: Hashable) -> float:
        reward = 1000.0 if action == self._answer else 0.0
        self._is_end_of_problem = True
        self._load_next()
        return reward

    def is_end_of_problem(self) -> bool:
        return self._is_end_of_problem

    def answer(self) -> Hashable:
        """Return the correct action for the current situation."""
        return self._answer