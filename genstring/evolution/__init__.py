"""Genotypes and genetic operators for GenString."""

from .genotype import Genotype, matches, random_genotype, score, score_population
from .operators import breed, crossover, mutate
from .population import populate, reproduce, seed_population
from .selection import rank_population, select_partner

__all__ = [
    "Genotype",
    "matches",
    "random_genotype",
    "score",
    "score_population",
    "breed",
    "crossover",
    "mutate",
    "populate",
    "reproduce",
    "seed_population",
    "rank_population",
    "select_partner",
]
