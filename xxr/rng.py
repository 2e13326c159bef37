"""Shared random number source and selection helpers."""

from __future__ import annotations

import bisect
import itertools
import random
import sys
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_LOWEST = -sys.float_info.max

_engine = random.Random()


def seed(value: Any) -> None:
    """Reseed the shared generator."""
    _engine.seed(value)


def next_double(min_value: float = 0.0, max_value: float = 1.0) -> float:
    """Return a float drawn uniformly from [min_value, max_value)."""
    return min_value + (max_value - min_value) * _engine.random()


def next_int(min_value: int, max_value: int) -> int:
    """Return an integer drawn uniformly from [min_value, max_value]."""
    return _engine.randint(min_value, max_value)


def choose_from(container: Iterable[T]) -> T:
    """Return one element of the container chosen uniformly at random."""
    items = container if isinstance(container, Sequence) else list(container)
    if not items:
        raise ValueError("cannot choose from an empty container")
    return items[_engine.randrange(len(items))]


def roulette_wheel_selection(weights: Iterable[float]) -> int:
    """Return an index chosen with probability proportional to its weight."""
    wheel = list(itertools.accumulate(weights))
    total = wheel[-1] if wheel else 0.0
    if not total > 0:
        raise ValueError("the sum of the weights must be positive")
    return bisect.bisect_left(wheel, next_double(0.0, total))


def greedy_selection(values: Sequence[float]) -> int:
    """Return the index of a maximum value, ties broken at random."""
    best = max(values)
    return choose_from([idx for idx, value in enumerate(values) if value == best])


def epsilon_greedy_selection(values: Sequence[float], epsilon: float) -> int:
    """Return a random index with probability epsilon, else a greedy one."""
    if next_double() < epsilon:
        if not values:
            raise ValueError("cannot select from an empty sequence")
        return next_int(0, len(values) - 1)
    return greedy_selection(values)


def tournament_selection(values: Sequence[float], tau: float) -> int:
    """Return the best index among those entering the tournament with probability tau."""
    if not values:
        raise ValueError("cannot select from an empty sequence")
    selected = len(values) - 1
    best = _LOWEST
    for idx, value in enumerate(values):
        if next_double() < tau and best < value:
            best = value
            selected = idx
    if best == _LOWEST:
        return next_int(0, len(values) - 1)
    return selected


def tournament_selection_micro_classifier(
    pairs: Sequence[tuple[float, int]], tau: float
) -> int:
    """Tournament selection where each (fitness, numerosity) pair enters per micro-classifier."""
    if not pairs:
        raise ValueError("cannot select from an empty sequence")
    selected = len(pairs) - 1
    best = _LOWEST
    for idx, (fitness, numerosity) in enumerate(pairs):
        per_micro = fitness / numerosity
        if best < per_micro and any(next_double() < tau for _ in range(numerosity)):
            best = per_micro
            selected = idx
    if best == _LOWEST:
        return next_int(0, len(pairs) - 1)
    return selected