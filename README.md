# xxr

Building blocks for accuracy-based learning classifier systems (XCS and its
real-valued variant XCSR with lower/upper interval conditions), together with
the classic benchmark environments used to exercise them.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `xxr.rng` – a shared random generator and selection helpers: `seed`,
  `next_double`, `next_int`, `choose_from`, `roulette_wheel_selection`,
  `greedy_selection`, `epsilon_greedy_selection`, `tournament_selection`,
  `tournament_selection_micro_classifier`. Empty inputs raise `ValueError`.
- `xxr.environment` – the abstract `Environment` base class with
  `available_actions`, `situation()`, `execute_action(action)` and
  `is_end_of_problem()`.
- Benchmark environments (reward 1000 for a correct action, 0 otherwise):
  - `xxr.multiplexer` – `MultiplexerEnvironment` (Boolean inputs) and
    `RealMultiplexerEnvironment` (real inputs compared against
    `binary_threshold`), plus `address_bit_length(length)`. The length must be
    `k + 2**k`, otherwise `ValueError` is raised.
  - `xxr.checkerboard` – `CheckerboardEnvironment(dim, division)`; its
    `answer(situation=None)` gives the colour of any point.
  - `xxr.dataset_environment` – `DatasetEnvironment`, serving labelled rows
    either at random or in order, wrapping around at the end.
  - `xxr.block_world` – `BlockWorldEnvironment`, a multi-step toroidal grid
    where an animat looks for food (`F`, `G`) among obstacles (`T`, `O`, `Q`).
    Build it from a list of rows or with `BlockWorldEnvironment.from_file`.
    A problem ends when food is reached or after `max_step` steps. Actions are
    the values of `Direction`.
- `xxr.constants` – the `Constants` dataclass (N, beta, alpha, epsilon_0, nu,
  gamma, theta_GA, chi, mu, theta_del, delta, theta_sub, tau, interval
  parameters, ...) and the `CrossoverMethod` enum.
- `xxr.interval` – `IntervalSymbol`, a lower/upper bound allele.
- `xxr.classifier` – `ConditionActionPair`, `IntervalConditionActionPair`,
  `Classifier` (with `accuracy`), `StoredClassifier` (bound to `Constants`,
  with `is_subsumer`, `subsumes`, `stored_accuracy`) and
  `IntervalStoredClassifier` (subsumption with `subsumption_tolerance`).
- `xxr.prediction_array` – `GreedyPredictionArray` and
  `EpsilonGreedyPredictionArray`, built from any iterable of classifiers.
- `xxr.ga` – `GA` with roulette-wheel or tournament parent selection, uniform,
  one-point and two-point crossover, mutation and GA subsumption.
- `xxr.interval_ga` – `IntervalGA`, the same operators acting on interval
  bounds.

## Examples

```python
from xxr import rng
from xxr.multiplexer import MultiplexerEnvironment

rng.seed(42)
env = MultiplexerEnvironment(6)
reward = env.execute_action(env.answer())
assert reward == 1000.0
assert env.is_end_of_problem()
```

```python
from xxr.checkerboard import CheckerboardEnvironment

env = CheckerboardEnvironment(2, 2)
env.answer([0.0, 0.51])   # True
env.answer([0.51, 0.51])  # False
```

```python
from xxr.classifier import IntervalStoredClassifier
from xxr.constants import Constants
from xxr.interval import IntervalSymbol

constants = Constants()
general = IntervalStoredClassifier([IntervalSymbol(0.0, 1.0)], True, 0, constants)
general.experience = 21
specific = IntervalStoredClassifier([IntervalSymbol(0.2, 0.4)], True, 0, constants)
general.subsumes(specific)  # True
```

## What this package does not do

There is no population, match set, action set or experiment driver here, and
no command-line program. `GA.run` expects the caller to supply a population
object that can be iterated over its classifiers and offers
`insert_or_increment_numerosity(classifier)` and `delete_extra_classifiers()`.
Reading or writing populations and datasets from CSV files is not provided
either; `DatasetEnvironment` takes situations and actions already in memory.