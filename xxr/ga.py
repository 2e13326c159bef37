"""Genetic algorithm that discovers new classifiers in an action set."""

from __future__ import annotations

import copy
from collections.abc import Hashable, Iterable, Sequence
from typing import Any

from . import rng
from .classifier import Classifier, StoredClassifier
from .constants import Constants, CrossoverMethod

_DONT_CARE = "#"

# Fitness of offspring is reduced by this factor.
_FITNESS_REDUCTION = 0.1


def _check_same_length(a: Sequence[Any], b: Sequence[Any]) -> None:
    if len(a) != len(b):
        raise ValueError(f"conditions differ in length: {len(a)} and {len(b)}")


def _toggle_symbol(symbol: Any, value: Any) -> Any:
    """Make a don't-care symbol specific to value, or a specific one don't-care."""
    is_dont_care = getattr(symbol, "is_dont_care", None)
    if callable(is_dont_care):
        if is_dont_care():
            return type(symbol)(value)
        symbol.set_dont_care()
        return symbol
    return value if symbol == _DONT_CARE else _DONT_CARE


def _make_child(parent: Classifier) -> Classifier:
    """Return a plain classifier copying the rule and parameters of parent."""
    return Classifier(
        condition=[copy.copy(symbol) for symbol in parent.condition],
        action=parent.action,
        prediction=parent.prediction,
        epsilon=parent.epsilon,
        fitness=parent.fitness,
        time_stamp=parent.time_stamp,
        experience=parent.experience,
        action_set_size=parent.action_set_size,
        numerosity=parent.numerosity,
    )


class GA:
    """Selection, crossover, mutation and insertion of offspring.

    The population passed to ``run`` must be iterable over its classifiers
    and provide ``insert_or_increment_numerosity(classifier)`` and
    ``delete_extra_classifiers()``, the latter returning True while it
    still removed something.
    """

    def __init__(
        self, constants: Constants, available_actions: Iterable[Hashable]
    ) -> None:
        self.constants = constants
        self.available_actions = frozenset(available_actions)

    def select_offspring(self, action_set: Iterable[Any]) -> Any:
        """Pick a parent by tournament (0 < tau <= 1) or roulette-wheel selection."""
        targets = list(action_set)
        tau = self.constants.tau
        if 0.0 < tau <= 1.0:
            pairs = [(cl.fitness, cl.numerosity) for cl in targets]
            idx = rng.tournament_selection_micro_classifier(pairs, tau)
        else:
            idx = rng.roulette_wheel_selection([cl.fitness for cl in targets])
        return targets[idx]

    def uniform_crossover(self, cl1: Classifier, cl2: Classifier) -> bool:
        """Swap each allele with probability 0.5; return True if any was swapped."""
        _check_same_length(cl1.condition, cl2.condition)
        changed = False
        for i in range(len(cl1.condition)):
            if rng.next_double() < 0.5:
                cl1.condition[i], cl2.condition[i] = cl2.condition[i], cl1.condition[i]
                changed = True
        return changed

    def one_point_crossover(self, cl1: Classifier, cl2: Classifier) -> bool:
        """Swap the alleles after a random point; return True if any was swapped."""
        _check_same_length(cl1.condition, cl2.condition)
        length = len(cl1.condition)
        x = rng.next_int(0, length)
        return self._swap_range(cl1, cl2, x + 1, length)

    def two_point_crossover(self, cl1: Classifier, cl2: Classifier) -> bool:
        """Swap the alleles between two random points; return True if any was swapped."""
        _check_same_length(cl1.condition, cl2.condition)
        length = len(cl1.condition)
        x, y = sorted((rng.next_int(0, length), rng.next_int(0, length)))
        return self._swap_range(cl1, cl2, x + 1, y)

    @staticmethod
    def _swap_range(cl1: Classifier, cl2: Classifier, start: int, stop: int) -> bool:
        if start >= stop:
            return False
        cl1.condition[start:stop], cl2.condition[start:stop] = (
            cl2.condition[start:stop],
            cl1.condition[start:stop],
        )
        return True

    def crossover(self, cl1: Classifier, cl2: Classifier) -> bool:
        """Apply the configured crossover operator."""
        operators = {
            CrossoverMethod.UNIFORM: self.uniform_crossover,
            CrossoverMethod.ONE_POINT: self.one_point_crossover,
            CrossoverMethod.TWO_POINT: self.two_point_crossover,
        }
        operator = operators.get(self.constants.crossover_method)
        if operator is None:
            return False
        return operator(cl1, cl2)

    def mutate(self, cl: Classifier, situation: Sequence[Any]) -> None:
        """Toggle alleles between don't-care and the situation value, then maybe the action."""
        _check_same_length(cl.condition, situation)
        for i, value in enumerate(situation):
            if rng.next_double() < self.constants.mu:
                cl.condition[i] = _toggle_symbol(cl.condition[i], value)
        self._mutate_action(cl)

    def _mutate_action(self, cl: Classifier) -> None:
        if (
            self.constants.do_action_mutation
            and rng.next_double() < self.constants.mu
            and len(self.available_actions) >= 2
        ):
            others = [a for a in self.available_actions if a != cl.action]
            cl.action = rng.choose_from(others)

    def run(self, action_set: Iterable[Any], situation: Sequence[Any], population: Any) -> None:
        """Breed two offspring from the action set and insert them into the population."""
        members = list(action_set)
        parent1 = self.select_offspring(members)
        parent2 = self.select_offspring(members)
        _check_same_length(parent1.condition, parent2.condition)

        child1 = _make_child(parent1)
        child2 = _make_child(parent2)
        child1.fitness = parent1.fitness / parent1.numerosity
        child2.fitness = parent2.fitness / parent2.numerosity
        child1.numerosity = child2.numerosity = 1
        child1.experience = child2.experience = 0

        if rng.next_double() < self.constants.chi:
            changed = self.crossover(child1, child2)
        else:
            changed = False

        self.mutate(child1, situation)
        self.mutate(child2, situation)

        if changed:
            prediction = (child1.prediction + child2.prediction) / 2
            epsilon = (child1.epsilon + child2.epsilon) / 2
            fitness = (child1.fitness + child2.fitness) / 2 * _FITNESS_REDUCTION
            for child in (child1, child2):
                child.prediction = prediction
                child.epsilon = epsilon
                child.fitness = fitness
        else:
            child1.fitness *= _FITNESS_REDUCTION
            child2.fitness *= _FITNESS_REDUCTION

        self._insert_discovered(child1, child2, parent1, parent2, population)

    def _store(self, child: Classifier, template: Any) -> StoredClassifier:
        stored_type = type(template)
        if not issubclass(stored_type, StoredClassifier):
            stored_type = StoredClassifier
        return stored_type.from_classifier(child, self.constants)

    def _insert_discovered(
        self,
        child1: Classifier,
        child2: Classifier,
        parent1: Any,
        parent2: Any,
        population: Any,
    ) -> None:
        for child in (child1, child2):
            if self.constants.do_ga_subsumption:
                self._subsume_by_parents(child, parent1, parent2, population)
            else:
                population.insert_or_increment_numerosity(self._store(child, parent1))

        while population.delete_extra_classifiers():
            pass

    def _subsume_by_parents(
        self, child: Classifier, parent1: Any, parent2: Any, population: Any
    ) -> None:
        if parent1.subsumes(child):
            parent1.numerosity += 1
        elif parent2.subsumes(child):
            parent2.numerosity += 1
        else:
            self._subsume_by_population(child, parent1, population)

    def _subsume_by_population(
        self, child: Classifier, template: Any, population: Any
    ) -> None:
        choices = [cl for cl in population if cl.subsumes(child)]
        if choices:
            rng.choose_from(choices).numerosity += 1
            return
        population.insert_or_increment_numerosity(self._store(child, template))