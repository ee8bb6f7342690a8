"""Crossover and mutation operators.

Operators work position by position on the raw genes:
- crossover keeps the best parent's byte with probability ``crossover_bias``
  and otherwise takes the partner's byte at the same position
- mutation replaces each byte with a fresh allele with probability
  ``mutation_rate``
- breed applies both to one child, mutation after crossover, drawing the
  crossover and mutation decisions for a position before moving to the next
"""

from __future__ import annotations

import random

from genstring.evolution.genotype import Genotype, random_allele


def _inherit(best: Genotype, partner: Genotype, i: int, crossover_bias: float, rng: random.Random) -> int:
    return best.genes[i] if rng.random() < crossover_bias else partner.genes[i]


def _maybe_mutate(allele: int, mutation_rate: float, rng: random.Random) -> int:
    if rng.random() < mutation_rate:
        return random_allele(rng)
    return allele


def crossover(best: Genotype, partner: Genotype, crossover_bias: float, rng: random.Random) -> Genotype:
    """Combine two equal-length parents into one child."""
    return Genotype(bytes(_inherit(best, partner, i, crossover_bias, rng) for i in range(len(best))))


def mutate(genotype: Genotype, mutation_rate: float, rng: random.Random) -> Genotype:
    """Return a copy of ``genotype`` with each byte independently re-drawn."""
    return Genotype(bytes(_maybe_mutate(g, mutation_rate, rng) for g in genotype.genes))


def breed(best: Genotype, partner: Genotype, crossover_bias: float, mutation_rate: float,
          rng: random.Random) -> Genotype:
    """Produce one child: crossover then mutation at every position.

    Equivalent in distribution to ``mutate(crossover(...))``; the draws are
    interleaved per position so a seeded stream maps one position at a time.
    """
    return Genotype(bytes(
        # mutation may override either parent's contribution
        _maybe_mutate(_inherit(best, partner, i, crossover_bias, rng), mutation_rate, rng)
        for i in range(len(best))
    ))


__all__ = ["crossover", "mutate", "breed"]
