"""Abstract problem environment."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
from typing import Any


class Environment(ABC):
    """A problem that yields situations and rewards actions."""

    def __init__(self, available_actions: Iterable[Hashable]) -> None:
        self.available_actions: frozenset = frozenset(available_actions)

    @abstractmethod
    def situation(self) -> list:
        """Return the current situation."""

    @abstractmethod
    def execute_action(self, action: Any) -> float:
        """Perform the action, update the situation and return the reward."""

    @abstractmethod
    def is_end_of_problem(self) -> bool:
        """Return True if the previous action solved the problem."""