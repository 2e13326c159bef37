"""Fitness-weighted prediction arrays and action selection."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from . import rng

_EPSILON = sys.float_info.epsilon


class PredictionArray(ABC):
    """Fitness-weighted average prediction of each action in a match set."""

    def __init__(self, match_set: Iterable[Any]) -> None:
        payoffs: dict[Any, float] = {}
        fitness_sums: dict[Any, float] = {}
        for cl in match_set:
            payoffs[cl.action] = payoffs.get(cl.action, 0.0) + cl.prediction * cl.fitness
            fitness_sums[cl.action] = fitness_sums.get(cl.action, 0.0) + cl.fitness

        self._actions = list(payoffs)
        self._max = -_EPSILON
        self._max_actions: list[Any] = []
        for action, payoff in payoffs.items():
            if abs(fitness_sums[action]) > 0.0:
                payoff /= fitness_sums[action]
            payoffs[action] = payoff
            if abs(self._max - payoff) < _EPSILON:
                self._max_actions.append(action)
            elif self._max < payoff:
                self._max_actions = [action]
                self._max = payoff
        self._payoffs = payoffs

    def max(self) -> float:
        """Return the highest predicted payoff."""
        if not self._max_actions:
            raise ValueError("the prediction array has no best action")
        return self._max

    @abstractmethod
    def select_action(self) -> Any:
        """Return the action chosen from the array."""


class GreedyPredictionArray(PredictionArray):
    """Always picks a best action, ties broken at random."""

    def select_action(self) -> Any:
        return rng.choose_from(self._max_actions)


class EpsilonGreedyPredictionArray(PredictionArray):
    """Picks any present action with probability epsilon, else a best one."""

    def __init__(self, match_set: Iterable[Any], epsilon: float) -> None:
        super().__init__(match_set)
        self._epsilon = epsilon

    def select_action(self) -> Any:
        if rng.next_double() < self._epsilon:
            return rng.choose_from(self._actions)
        return rng.choose_from(self._max_actions)