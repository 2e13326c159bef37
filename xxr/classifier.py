"""Condition-action rules and the classifiers built on them."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Sequence

from .constants import Constants


def _is_dont_care(symbol: Any) -> bool:
    check = getattr(symbol, "is_dont_care", None)
    if callable(check):
        return bool(check())
    return symbol == "#"


def _check_same_length(a: Sequence[Any], b: Sequence[Any]) -> None:
    if len(a) != len(b):
        raise ValueError(
            f"conditions differ in length: {len(a)} and {len(b)}"
        )


@dataclass(eq=False)
class ConditionActionPair:
    """A condition that selects situations and the action it proposes."""

    condition: list
    action: Any

    def __post_init__(self) -> None:
        self.condition = list(self.condition)

    def __copy__(self) -> ConditionActionPair:
        duplicate = object.__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        duplicate.condition = [copy.copy(symbol) for symbol in self.condition]
        return duplicate

    def is_more_general(self, other: ConditionActionPair) -> bool:
        """Return True if this condition strictly generalises the other's."""
        _check_same_length(self.condition, other.condition)
        more_general = False
        for mine, theirs in zip(self.condition, other.condition):
            if mine != theirs:
                if not _is_dont_care(mine):
                    return False
                more_general = True
        return more_general

    def __str__(self) -> str:
        return "".join(str(symbol) for symbol in self.condition) + f":{self.action}"


class IntervalConditionActionPair(ConditionActionPair):
    """Condition-action pair whose condition is a list of intervals."""

    def is_more_general(  # type: ignore[override]
        self, other: ConditionActionPair, tolerance: float
    ) -> bool:
        """Return True if every interval of self, widened by tolerance, covers the other's."""
        if other is self:
            # A classifier never subsumes itself, even with a tolerance.
            return False
        _check_same_length(self.condition, other.condition)
        equal_count = 0
        for mine, theirs in zip(self.condition, other.condition):
            low = mine.lower() - tolerance
            high = mine.upper() + tolerance
            if theirs.lower() < low or high < theirs.upper():
                return False
            if theirs.lower() == low and high == theirs.upper():
                equal_count += 1
        return equal_count != len(self.condition)


@dataclass(eq=False)
class Classifier(ConditionActionPair):
    """A rule together with its learned parameters."""

    # p: expected payoff when the rule matches and its action is taken
    prediction: float = 0.0
    # epsilon: estimated error of the prediction
    epsilon: float = 0.0
    # F: fitness
    fitness: float = 0.0
    # ts: time step of the last GA in an action set holding this rule
    time_stamp: int = 0
    # exp: number of times the rule was in an action set
    experience: int = 0
    # as: estimated average size of the action sets it belonged to
    action_set_size: float = 1.0
    # n: number of micro-classifiers this macro-classifier stands for
    numerosity: int = 1

    def accuracy(self, epsilon_zero: float, alpha: float, nu: float) -> float:
        """Return the accuracy derived from the prediction error."""
        if self.epsilon < epsilon_zero:
            return 1.0
        return alpha * (self.epsilon / epsilon_zero) ** -nu


class StoredClassifier(Classifier):
    """A classifier living in a population, bound to shared constants."""

    def __init__(
        self,
        condition: Sequence[Any],
        action: Any,
        time_stamp: int,
        constants: Constants,
    ) -> None:
        super().__init__(
            condition,
            action,
            constants.initial_prediction,
            constants.initial_epsilon,
            constants.initial_fitness,
            time_stamp,
        )
        self.constants = constants

    @classmethod
    def from_classifier(
        cls, classifier: Classifier, constants: Constants
    ) -> StoredClassifier:
        """Return a stored copy of the classifier with all its parameters."""
        source = copy.copy(classifier)
        stored = object.__new__(cls)
        stored.__dict__.update(source.__dict__)
        stored.constants = constants
        return stored

    def is_subsumer(self) -> bool:
        """Return True if the classifier is experienced and accurate enough to subsume."""
        return (
            self.experience > self.constants.theta_sub
            and self.epsilon < self.constants.epsilon_zero
        )

    def subsumes(self, other: Classifier) -> bool:
        """Return True if this classifier subsumes the other."""
        return (
            self.action == other.action
            and self.is_subsumer()
            and self.is_more_general(other)
        )

    def stored_accuracy(self) -> float:
        """Return the accuracy under the bound constants."""
        c = self.constants
        return self.accuracy(c.epsilon_zero, c.alpha, c.nu)


class IntervalStoredClassifier(StoredClassifier, IntervalConditionActionPair):
    """Stored classifier with interval conditions and tolerant subsumption."""

    def subsumes(self, other: Classifier) -> bool:
        return (
            self.action == other.action
            and self.is_subsumer()
            and self.is_more_general(other, self.constants.subsumption_tolerance)
        )