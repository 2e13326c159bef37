"""Hyperparameters of the classifier system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CrossoverMethod(Enum):
    """Crossover operator applied by the genetic algorithm."""

    UNIFORM = "uniform"
    ONE_POINT = "one-point"
    TWO_POINT = "two-point"


@dataclass
class Constants:
    """Learning parameters; names follow the usual XCS notation."""

    # N: maximum population size in micro-classifiers
    n: int = 400
    # beta: learning rate for p, epsilon, F and as
    beta: float = 0.2
    # alpha: fall-off rate in the fitness evaluation
    alpha: float = 0.1
    # epsilon_0: error below which accuracy is one
    epsilon_zero: float = 10.0
    # nu: exponent of the accuracy power function
    nu: float = 5.0
    # gamma: discount rate in multi-step problems
    gamma: float = 0.71
    # theta_GA: GA threshold in an action set
    theta_ga: int = 25
    # chi: crossover probability
    chi: float = 0.8
    crossover_method: CrossoverMethod = CrossoverMethod.TWO_POINT
    # mu: mutation probability per allele and for the action
    mu: float = 0.04
    # theta_del: experience over which fitness counts in deletion
    theta_del: int = 20
    # delta: fraction of mean fitness used in deletion votes
    delta: float = 0.1
    # theta_sub: experience required to subsume
    theta_sub: int = 20
    # tau: tournament size ratio (0 selects roulette-wheel)
    tau: float = 0.0
    # P_#: don't-care probability when covering
    dont_care_probability: float = 0.33
    initial_prediction: float = 0.01
    initial_epsilon: float = 0.01
    initial_fitness: float = 0.01
    # p_explr: probability of a random action while exploring
    explore_probability: float = 1.0
    # theta_mna: minimal actions in a match set (0 means all available)
    theta_mna: int = 0
    do_ga_subsumption: bool = True
    do_action_set_subsumption: bool = True
    do_action_mutation: bool = True
    # MAM: moyenne adaptive modifiee for p and epsilon updates
    use_mam: bool = True

    # Parameters of the real-valued interval representation
    min_value: float = 0.0
    max_value: float = 1.0
    covering_max_spread: float = 1.0
    mutation_max_change: float = 0.1
    subsumption_tolerance: float = 0.0
    do_range_restriction: bool = True
    do_covering_random_range_truncation: bool = False