import pytest

from xxr import rng
from xxr.multiplexer import (
    MultiplexerEnvironment,
    RealMultiplexerEnvironment,
    address_bit_length,
)


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_address_bit_length(k):
    assert address_bit_length(k + (1 << k)) == k


@pytest.mark.parametrize("length", [0, 4, 5, 7])
def test_invalid_length_raises(length):
    with pytest.raises(ValueError):
        MultiplexerEnvironment(length)
    with pytest.raises(ValueError):
        RealMultiplexerEnvironment(length, True)


def test_boolean_situation_shape():
    rng.seed(1)
    env = MultiplexerEnvironment(11)
    situation = env.situation()
    assert len(situation) == 11
    assert all(isinstance(bit, bool) for bit in situation)
    assert env.available_actions == frozenset({False, True})


def test_boolean_answer_pinned():
    env = MultiplexerEnvironment(6)
    env._situation = [True, False, False, False, True, False]
    assert env.answer() is True


def test_boolean_rewards():
    rng.seed(2)
    env = MultiplexerEnvironment(6)
    assert not env.is_end_of_problem()
    for _ in range(20):
        assert env.execute_action(env.answer()) == 1000.0
        assert env.execute_action(not env.answer()) == 0.0
    assert env.is_end_of_problem()


def test_real_situation_ranges():
    rng.seed(3)
    env = RealMultiplexerEnvironment(6, True)
    assert all(0.0 <= v < 1.0 for v in env.situation())
    binary = RealMultiplexerEnvironment(6, False)
    assert set(binary.situation()) <= {0.0, 1.0}


def test_real_answer_threshold():
    env = RealMultiplexerEnvironment(6, True)
    env._situation = [0.6, 0.2, 0.1, 0.1, 0.9, 0.1]
    assert env.answer() is True
    strict = RealMultiplexerEnvironment(6, True, 0.95)
    strict._situation = [0.6, 0.2, 0.1, 0.1, 0.9, 0.1]
    assert strict.answer() is False


def test_real_rewards():
    rng.seed(4)
    env = RealMultiplexerEnvironment(11, True)
    for _ in range(20):
        assert env.execute_action(env.answer()) == 1000.0
        assert env.execute_action(not env.answer()) == 0.0
    assert env.is_end_of_problem()


def test_situation_is_copy():
    rng.seed(5)
    env = MultiplexerEnvironment(6)
    situation = env.situation()
    situation.append(True)
    assert len(env.situation()) == 6