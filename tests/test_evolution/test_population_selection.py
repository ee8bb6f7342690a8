import random

import pytest

from genstring.evolution.genotype import Genotype, score
from genstring.evolution.population import populate, reproduce, seed_population
from genstring.evolution.selection import rank_population, select_partner
from genstring.utils.validation import ValidationError


def test_populate_size_and_lengths():
    rng = random.Random(4)
    pop = populate(7, 7, rng)
    assert len(pop) == 7
    assert all(len(g) == 7 for g in pop)


def test_rank_population_ascending_with_best_last():
    target = b"abc"
    pop = [Genotype(b"abX"), Genotype(b"XXX"), Genotype(b"abc"), Genotype(b"aXX")]
    ranked, scores = rank_population(pop, target)
    assert ranked[-1] == b"abc"
    assert list(scores) == sorted(scores)
    assert [score(g, target) for g in ranked] == list(scores)
    assert sorted(g.genes for g in ranked) == sorted(g.genes for g in pop)


def test_rank_population_ties_pick_a_maximum():
    target = b"AB"
    ranked, scores = rank_population([Genotype(b"AA"), Genotype(b"BB")], target)
    # order among equal scores is unspecified; only the maximum matters
    assert scores[-1] == 0.5
    assert ranked[-1] in (Genotype(b"AA"), Genotype(b"BB"))


def test_select_partner_draws_from_population():
    rng = random.Random(8)
    pop = [Genotype(b"a"), Genotype(b"b"), Genotype(b"c")]
    picks = {select_partner(pop, rng).genes for _ in range(200)}
    assert picks == {b"a", b"b", b"c"}


@pytest.mark.parametrize("mutation_rate", [0.0, 0.01, 1.0])
def test_reproduce_preserves_size_and_length(mutation_rate):
    rng = random.Random(12)
    pop = populate(9, 9, rng)
    best = pop[0]
    for _ in range(5):
        children = reproduce(best, pop, 0.8, mutation_rate, rng)
        assert len(children) == len(pop)
        assert all(len(c) == 9 for c in children)
        pop = children
        best = children[-1]


def test_reproduce_without_mutation_uses_best_or_a_member_at_each_position():
    rng = random.Random(21)
    pop = populate(6, 6, rng)
    best = pop[2]
    children = reproduce(best, pop, 0.8, 0.0, rng)
    for child in children:
        for i in range(6):
            allowed = {best.genes[i]} | {m.genes[i] for m in pop}
            assert child.genes[i] in allowed


def test_seed_population_validation():
    target = b"AB"
    pop = seed_population(["AA", b"BB"], target)
    assert pop == [Genotype(b"AA"), Genotype(b"BB")]

    with pytest.raises(ValidationError) as exc:
        seed_population(["AA"], target)
    assert exc.value.error_type == "invalid_population"

    with pytest.raises(ValidationError):
        seed_population(["AA", "B"], target)

    with pytest.raises(ValidationError):
        seed_population(["AA", "B{"], target)

    with pytest.raises(ValidationError):
        seed_population(["AA", "Bé"], target)
