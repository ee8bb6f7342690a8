"""Ranking and parent selection."""

from __future__ import annotations

import random
from typing import Sequence

import numpy as np

from genstring.evolution.genotype import Genotype, score_population


def rank_population(population: Sequence[Genotype], target: bytes) -> tuple[list[Genotype], np.ndarray]:
    """Sort ``population`` ascending by score.

    Returns the ranked list and the matching score array; the best member is
    last. Order among equal scores is not part of the contract.
    """
    scores = score_population(population, target)
    order = np.argsort(scores, kind="stable")
    ranked = [population[int(i)] for i in order]
    return ranked, scores[order]


def select_partner(population: Sequence[Genotype], rng: random.Random) -> Genotype:
    """Pick the second parent uniformly from the whole population."""
    return population[rng.randrange(len(population))]


__all__ = ["rank_population", "select_partner"]
