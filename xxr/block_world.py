"""Toroidal grid world where an animat searches for food."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from os import PathLike

from . import rng
from .environment import Environment

_OBSTACLES = frozenset("TOQ")
_FOODS = frozenset("FG")


class Direction(IntEnum):
    """Movement directions, clockwise from up."""

    UP = 0
    UP_RIGHT = 1
    RIGHT = 2
    DOWN_RIGHT = 3
    DOWN = 4
    DOWN_LEFT = 5
    LEFT = 6
    UP_LEFT = 7


_X_DIFFS = (0, +1, +1, +1, 0, -1, -1, -1)
_Y_DIFFS = (-1, -1, 0, +1, +1, +1, 0, -1)

_TWO_BIT = {
    "T": (False, True),
    "O": (False, True),
    "Q": (False, True),
    "F": (True, True),
    "G": (True, True),
}
_THREE_BIT = {
    "T": (False, True, False),
    "O": (False, True, False),
    "Q": (False, True, True),
    "F": (True, True, False),
    "G": (True, True, True),
}


class BlockWorldEnvironment(Environment):
    """Multi-step problem: reach food on a wrapped map of blocks."""

    def __init__(
        self,
        world_map: Iterable[str],
        max_step: int,
        three_bit_mode: bool = False,
        allow_diagonal_action: bool = True,
    ) -> None:
        if allow_diagonal_action:
            actions = tuple(Direction)
        else:
            actions = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
        super().__init__(int(d) for d in actions)

        rows = list(world_map)
        if not rows or not rows[0]:
            raise ValueError("the world map must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows of the world map must have the same width")

        self._world_map = rows
        self.world_width = width
        self.world_height = len(rows)
        self._max_step = max_step
        self._three_bit_mode = three_bit_mode
        self._empty_positions = [
            (x, y)
            for y in range(self.world_height)
            for x in range(self.world_width)
            if self.is_empty(x, y)
        ]
        if not self._empty_positions:
            raise ValueError("the world map has no empty position")

        self.current_step = 0
        self.last_step = 0
        self._is_end_of_problem = False
        self._set_random_empty_position()
        self.last_x = self.current_x
        self.last_y = self.current_y
        self.last_initial_x = self.initial_x
        self.last_initial_y = self.initial_y

    @classmethod
    def from_file(
        cls,
        path: str | PathLike,
        max_step: int,
        three_bit_mode: bool = False,
        allow_diagonal_action: bool = True,
    ) -> BlockWorldEnvironment:
        """Build the environment from a map file, one row per line."""
        with open(path, encoding="utf-8") as handle:
            rows = handle.read().splitlines()
        return cls(rows, max_step, three_bit_mode, allow_diagonal_action)

    def _set_random_empty_position(self) -> None:
        x, y = rng.choose_from(self._empty_positions)
        self.current_x = self.initial_x = x
        self.current_y = self.initial_y = y

    def block(self, x: int, y: int) -> str:
        """Return the block at (x, y), wrapping around the edges."""
        return self._world_map[y % self.world_height][x % self.world_width]

    def is_empty(self, x: int, y: int) -> bool:
        block = self.block(x, y)
        return block not in _OBSTACLES and block not in _FOODS

    def is_food(self, x: int, y: int) -> bool:
        return self.block(x, y) in _FOODS

    def is_obstacle(self, x: int, y: int) -> bool:
        return self.block(x, y) in _OBSTACLES

    def _block_bits(self, block: str) -> tuple[bool, ...]:
        if self._three_bit_mode:
            return _THREE_BIT.get(block, (False, False, False))
        return _TWO_BIT.get(block, (False, False))

    def situation_at(self, x: int, y: int) -> list[bool]:
        """Return the encoded surroundings of (x, y), clockwise from up."""
        return [
            bit
            for dx, dy in zip(_X_DIFFS, _Y_DIFFS)
            for bit in self._block_bits(self.block(x + dx, y + dy))
        ]

    def situation(self) -> list[bool]:
        return self.situation_at(self.current_x, self.current_y)

    def execute_action(self, action: int) -> float:
        if not 0 <= action < len(Direction):
            raise ValueError(f"invalid action: {action}")

        self.last_initial_x = self.initial_x
        self.last_initial_y = self.initial_y

        x = (self.current_x + _X_DIFFS[action]) % self.world_width
        y = (self.current_y + _Y_DIFFS[action]) % self.world_height

        reward = 0.0
        if self.is_food(x, y):
            self.last_x = x
            self.last_y = y
            self._set_random_empty_position()
            self._is_end_of_problem = True
            self.last_step = self.current_step + 1
            self.current_step = 0
            reward = 1000.0
        elif self.is_empty(x, y):
            self.current_x = self.last_x = x
            self.current_y = self.last_y = y
            self._is_end_of_problem = False
        else:
            self.last_x = self.current_x
            self.last_y = self.current_y
            self._is_end_of_problem = False

        if not self._is_end_of_problem:
            self.current_step += 1
            self.last_step = self.current_step
            if self.current_step >= self._max_step:
                self._set_random_empty_position()
                self._is_end_of_problem = True
                self.current_step = 0

        return reward

    def is_end_of_problem(self) -> bool:
        return self._is_end_of_problem

    def __str__(self) -> str:
        lines = []
        for y in range(self.world_height):
            row = "".join(
                "*" if (x, y) == (self.current_x, self.current_y) else self.block(x, y)
                for x in range(self.world_width)
            )
            lines.append(row + "\n")
        return "".join(lines)