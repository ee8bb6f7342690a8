"""Population initialisation and reproduction."""

from __future__ import annotations

import random
from typing import Iterable, Sequence

from genstring.evolution.genotype import ALLELE_MAX, ALLELE_MIN, Genotype, random_genotype
from genstring.evolution.operators import breed
from genstring.evolution.selection import select_partner
from genstring.utils.validation import ValidationError


def populate(population_size: int, length: int, rng: random.Random) -> list[Genotype]:
    """Create ``population_size`` random genotypes of ``length`` bytes each."""
    return [random_genotype(length, rng) for _ in range(population_size)]


def seed_population(members: Iterable[Genotype | str | bytes], target: bytes) -> list[Genotype]:
    """Validate a caller-supplied starting population against ``target``."""
    try:
        population = [Genotype.from_value(m) for m in members]
    except UnicodeEncodeError as exc:
        raise ValidationError(
            "invalid_population",
            "Seed population members must be ASCII",
        ) from exc

    if len(population) != len(target):
        raise ValidationError(
            "invalid_population",
            f"Seed population must have {len(target)} members, got {len(population)}",
            expected=len(target),
            actual=len(population),
        )
    for idx, member in enumerate(population):
        if len(member) != len(target):
            raise ValidationError(
                "invalid_population",
                f"Seed member {idx} has length {len(member)}, expected {len(target)}",
                index=idx,
                length=len(member),
            )
        bad = [b for b in member.genes if not ALLELE_MIN <= b <= ALLELE_MAX]
        if bad:
            raise ValidationError(
                "invalid_population",
                f"Seed member {idx} contains bytes outside [{ALLELE_MIN}, {ALLELE_MAX}]",
                index=idx,
                bytes=tuple(sorted(set(bad))),
            )
    return population


def reproduce(best: Genotype, population: Sequence[Genotype], crossover_bias: float,
              mutation_rate: float, rng: random.Random) -> list[Genotype]:
    """Breed a full replacement population.

    Every child pairs ``best`` with a uniformly drawn member of the current
    population, so the offspring count always equals ``len(population)``.
    """
    children: list[Genotype] = []
    for _ in range(len(population)):
        partner = select_partner(population, rng)
        children.append(breed(best, partner, crossover_bias, mutation_rate, rng))
    return children


__all__ = ["populate", "seed_population", "reproduce"]
