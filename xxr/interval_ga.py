"""Genetic algorithm for lower-upper bound interval conditions."""

from __future__ import annotations

from collections.abc import Sequence

from . import rng
from .classifier import Classifier
from .ga import GA, _check_same_length


def _swap_bound(cl1: Classifier, cl2: Classifier, bound_idx: int) -> None:
    a = cl1.condition[bound_idx // 2]
    b = cl2.condition[bound_idx // 2]
    if bound_idx % 2 == 0:
        a.l, b.l = b.l, a.l
    else:
        a.u, b.u = b.u, a.u


def _fix_order(cl: Classifier, indices: range) -> None:
    for i in indices:
        symbol = cl.condition[i]
        if symbol.l > symbol.u:
            symbol.l, symbol.u = symbol.u, symbol.l


class IntervalGA(GA):
    """GA whose alleles are the lower and upper bounds of each interval."""

    def uniform_crossover(self, cl1: Classifier, cl2: Classifier) -> bool:
        _check_same_length(cl1.condition, cl2.condition)
        changed = False
        for a, b in zip(cl1.condition, cl2.condition):
            if rng.next_double() < 0.5:
                a.l, b.l = b.l, a.l
                changed = True
            if rng.next_double() < 0.5:
                a.u, b.u = b.u, a.u
                changed = True
        everything = range(len(cl1.condition))
        _fix_order(cl1, everything)
        _fix_order(cl2, everything)
        return changed

    def one_point_crossover(self, cl1: Classifier, cl2: Classifier) -> bool:
        _check_same_length(cl1.condition, cl2.condition)
        bound_count = len(cl1.condition) * 2
        x = rng.next_int(0, bound_count)
        changed = False
        for i in range(x + 1, bound_count):
            _swap_bound(cl1, cl2, i)
            changed = True
        fixed = range((x + 1) // 2, len(cl1.condition))
        _fix_order(cl1, fixed)
        _fix_order(cl2, fixed)
        return changed

    def two_point_crossover(self, cl1: Classifier, cl2: Classifier) -> bool:
        _check_same_length(cl1.condition, cl2.condition)
        bound_count = len(cl1.condition) * 2
        x, y = sorted((rng.next_int(0, bound_count), rng.next_int(0, bound_count)))
        changed = False
        for i in range(x + 1, y):
            _swap_bound(cl1, cl2, i)
            changed = True
        fixed = range((x + 1) // 2, y // 2)
        _fix_order(cl1, fixed)
        _fix_order(cl2, fixed)
        return changed

    def mutate(self, cl: Classifier, situation: Sequence[float]) -> None:
        """Shift one bound of each selected interval by a bounded random amount."""
        _check_same_length(cl.condition, situation)
        c = self.constants
        for symbol in cl.condition:
            if rng.next_double() < c.mu:
                change = rng.next_double(-c.mutation_max_change, c.mutation_max_change)
                if rng.next_double() < 0.5:
                    symbol.l += change
                    if c.do_range_restriction:
                        symbol.l = min(max(c.min_value, symbol.l), c.max_value)
                else:
                    symbol.u += change
                    if c.do_range_restriction:
                        symbol.u = min(max(c.min_value, symbol.u), c.max_value)
            if symbol.l > symbol.u:
                symbol.l, symbol.u = symbol.u, symbol.l
        self._mutate_action(cl)