import pytest

from xxr import rng
from xxr.classifier import Classifier, StoredClassifier
from xxr.constants import Constants, CrossoverMethod
from xxr.ga import GA


class _Population:
    def __init__(self, classifiers=()):
        self.classifiers = list(classifiers)
        self.inserted = []
        self.deletion_checks = 0

    def __iter__(self):
        return iter(self.classifiers)

    def insert_or_increment_numerosity(self, cl):
        self.classifiers.append(cl)
        self.inserted.append(cl)

    def delete_extra_classifiers(self):
        self.deletion_checks += 1
        return False


class _Symbol:
    def __init__(self, value=None):
        self.value = value

    def is_dont_care(self):
        return self.value is None

    def set_dont_care(self):
        self.value = None


def _pair(length=6):
    return Classifier(["0"] * length, 0), Classifier(["1"] * length, 0)


def _swapped(cl):
    return [i for i, symbol in enumerate(cl.condition) if symbol == "1"]


@pytest.mark.parametrize("seed", range(30))
def test_uniform_crossover_swaps_whole_alleles(seed):
    rng.seed(seed)
    ga = GA(Constants(), [0, 1])
    cl1, cl2 = _pair()
    changed = ga.uniform_crossover(cl1, cl2)
    for a, b in zip(cl1.condition, cl2.condition):
        assert {a, b} == {"0", "1"}
    assert changed == bool(_swapped(cl1))


@pytest.mark.parametrize("seed", range(30))
def test_one_point_crossover_swaps_a_suffix(seed):
    rng.seed(seed)
    ga = GA(Constants(), [0, 1])
    cl1, cl2 = _pair()
    changed = ga.one_point_crossover(cl1, cl2)
    swapped = _swapped(cl1)
    assert changed == bool(swapped)
    if swapped:
        assert swapped == list(range(swapped[0], 6))
    assert 0 not in swapped
    assert _swapped(cl2) == [i for i in range(6) if i not in swapped]


@pytest.mark.parametrize("seed", range(30))
def test_two_point_crossover_swaps_a_contiguous_block(seed):
    rng.seed(seed)
    ga = GA(Constants(), [0, 1])
    cl1, cl2 = _pair()
    changed = ga.two_point_crossover(cl1, cl2)
    swapped = _swapped(cl1)
    assert changed == bool(swapped)
    if swapped:
        assert swapped == list(range(swapped[0], swapped[-1] + 1))
    assert 0 not in swapped


@pytest.mark.parametrize("seed", range(10))
def test_crossover_dispatches_to_one_point(seed):
    rng.seed(seed)
    ga = GA(Constants(crossover_method=CrossoverMethod.ONE_POINT), [0, 1])
    cl1, cl2 = _pair()
    ga.crossover(cl1, cl2)
    swapped = _swapped(cl1)
    assert swapped == [] or swapped == list(range(swapped[0], 6))


def test_crossover_rejects_different_lengths():
    ga = GA(Constants(), [0, 1])
    with pytest.raises(ValueError):
        ga.uniform_crossover(Classifier(["0"], 0), Classifier(["0", "1"], 0))
    with pytest.raises(ValueError):
        ga.two_point_crossover(Classifier(["0"], 0), Classifier(["0", "1"], 0))


def test_mutate_toggles_every_allele_with_full_probability():
    ga = GA(Constants(mu=1.0, do_action_mutation=False), [0, 1])
    cl = Classifier(["#", True, "#"], 0)
    ga.mutate(cl, [True, False, True])
    assert cl.condition == [True, "#", True]
    assert cl.action == 0


def test_mutate_with_symbol_objects():
    ga = GA(Constants(mu=1.0, do_action_mutation=False), [0, 1])
    cl = Classifier([_Symbol(), _Symbol(True)], 0)
    ga.mutate(cl, [False, True])
    assert cl.condition[0].value is False
    assert cl.condition[1].is_dont_care()


def test_mutate_changes_action_to_another_available_one():
    ga = GA(Constants(mu=1.0), [0, 1])
    cl = Classifier(["#"], 0)
    ga.mutate(cl, [True])
    assert cl.action == 1


def test_mutate_with_zero_probability_keeps_classifier():
    rng.seed(3)
    ga = GA(Constants(mu=0.0), [0, 1, 2])
    cl = Classifier(["#", "1"], 2)
    ga.mutate(cl, ["0", "1"])
    assert cl.condition == ["#", "1"]
    assert cl.action == 2


def test_mutate_rejects_situation_of_other_length():
    ga = GA(Constants(), [0, 1])
    with pytest.raises(ValueError):
        ga.mutate(Classifier(["#"], 0), [True, False])


@pytest.mark.parametrize("seed", range(20))
def test_roulette_selection_skips_zero_fitness(seed):
    rng.seed(seed)
    ga = GA(Constants(tau=0.0), [0, 1])
    members = [
        Classifier(["#"], 0, fitness=0.0),
        Classifier(["0"], 0, fitness=5.0),
        Classifier(["1"], 0, fitness=0.0),
    ]
    assert ga.select_offspring(members) is members[1]


def test_tournament_selection_with_full_tau_takes_best_per_micro_fitness():
    rng.seed(0)
    ga = GA(Constants(tau=1.0), [0, 1])
    members = [
        Classifier(["#"], 0, fitness=1.0, numerosity=1),
        Classifier(["0"], 0, fitness=6.0, numerosity=2),
        Classifier(["1"], 0, fitness=2.0, numerosity=1),
    ]
    assert ga.select_offspring(members) is members[1]


def _stored(condition, constants, **params):
    cl = StoredClassifier(condition, 0, 0, constants)
    for name, value in params.items():
        setattr(cl, name, value)
    return cl


def test_run_inserts_two_reduced_children_without_subsumption():
    rng.seed(1)
    constants = Constants(chi=0.0, mu=0.0, do_ga_subsumption=False)
    ga = GA(constants, [0, 1])
    parent = _stored(["0", "#"], constants, fitness=0.4, numerosity=2, experience=30)
    population = _Population([parent])
    ga.run([parent], ["0", "1"], population)

    assert len(population.inserted) == 2
    for child in population.inserted:
        assert isinstance(child, StoredClassifier)
        assert child is not parent
        assert child.constants is constants
        assert child.condition == ["0", "#"]
        assert child.numerosity == 1
        assert child.experience == 0
        assert child.fitness == pytest.approx(0.02)
    assert population.deletion_checks >= 1
    assert parent.numerosity == 2


def test_run_children_conditions_are_independent_of_parent():
    rng.seed(2)
    constants = Constants(chi=0.0, mu=1.0, do_ga_subsumption=False, do_action_mutation=False)
    ga = GA(constants, [0, 1])
    parent = _stored(["#", "#"], constants, fitness=1.0)
    population = _Population([parent])
    ga.run([parent], ["0", "1"], population)
    assert parent.condition == ["#", "#"]
    assert [child.condition for child in population.inserted] == [["0", "1"], ["0", "1"]]


def test_run_parent_subsumes_more_specific_children():
    rng.seed(4)
    constants = Constants(chi=0.0, mu=1.0, do_action_mutation=False)
    ga = GA(constants, [0, 1])
    parent = _stored(["#", "#"], constants, fitness=1.0, experience=50, epsilon=0.0)
    population = _Population([parent])
    ga.run([parent], ["0", "1"], population)
    assert population.inserted == []
    assert parent.numerosity == 3


def test_run_population_member_subsumes_children():
    rng.seed(5)
    constants = Constants(chi=0.0, mu=0.0)
    ga = GA(constants, [0, 1])
    general = _stored(["#", "#"], constants, fitness=1.0, experience=50, epsilon=0.0)
    parent = _stored(["0", "1"], constants, fitness=1.0)
    population = _Population([general, parent])
    ga.run([parent], ["0", "1"], population)
    assert population.inserted == []
    assert general.numerosity == 3
    assert parent.numerosity == 1


def test_run_with_empty_action_set_raises():
    ga = GA(Constants(), [0, 1])
    with pytest.raises(ValueError):
        ga.run([], ["0"], _Population())