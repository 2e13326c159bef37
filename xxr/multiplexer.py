"""Boolean and real-valued multiplexer problems."""

from __future__ import annotations

from . import rng
from .environment import Environment


def address_bit_length(length: int) -> int:
    """Return the number of address bits k for a multiplexer of total length k + 2**k."""
    if length <= 0:
        raise ValueError("multiplexer length must be positive")
    return length.bit_length() - 1


def _checked_address_length(length: int) -> int:
    address_length = address_bit_length(length)
    if length != address_length + (1 << address_length):
        raise ValueError(f"multiplexer length must be k + 2^k, got {length}")
    return address_length


class MultiplexerEnvironment(Environment):
    """Single-step Boolean multiplexer problem."""

    def __init__(self, length: int) -> None:
        super().__init__((False, True))
        self._total_length = length
        self._address_length = _checked_address_length(length)
        self._situation = self._random_situation()
        self._is_end_of_problem = False

    def _random_situation(self) -> list[bool]:
        return [rng.next_int(0, 1) == 1 for _ in range(self._total_length)]

    def situation(self) -> list[bool]:
        return list(self._situation)

    def execute_action(self, action: bool) -> float:
        reward = 1000.0 if action == self.answer() else 0.0
        self._situation = self._random_situation()
        self._is_end_of_problem = True
        return reward

    def is_end_of_problem(self) -> bool:
        return self._is_end_of_problem

    def answer(self) -> bool:
        """Return the data bit selected by the address bits."""
        address = 0
        for bit in self._situation[: self._address_length]:
            address = (address << 1) | int(bool(bit))
        return bool(self._situation[self._address_length + address])


class RealMultiplexerEnvironment(Environment):
    """Single-step real-valued multiplexer problem with a binarisation threshold."""

    def __init__(
        self, length: int, spreads_binary: bool, binary_threshold: float = 0.5
    ) -> None:
        super().__init__((False, True))
        self._total_length = length
        self._address_length = _checked_address_length(length)
        self._spreads_binary = spreads_binary
        self._binary_threshold = binary_threshold
        self._situation = self._random_situation()
        self._is_end_of_problem = False

    def _random_situation(self) -> list[float]:
        if self._spreads_binary:
            return [rng.next_double() for _ in range(self._total_length)]
        return [float(rng.next_int(0, 1)) for _ in range(self._total_length)]

    def situation(self) -> list[float]:
        return list(self._situation)

    def execute_action(self, action: bool) -> float:
        reward = 1000.0 if action == self.answer() else 0.0
        self._situation = self._random_situation()
        self._is_end_of_problem = True
        return reward

    def is_end_of_problem(self) -> bool:
        return self._is_end_of_problem

    def answer(self) -> bool:
        """Return whether the addressed value reaches the threshold."""
        threshold = self._binary_threshold
        address = 0
        for value in self._situation[: self._address_length]:
            address = (address << 1) | int(value >= threshold)
        return self._situation[self._address_length + address] >= threshold