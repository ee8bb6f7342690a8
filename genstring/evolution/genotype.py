"""Genotype representation, scoring and diffing."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

import numpy as np

# Printable ASCII from space through 'z'; '{', '|', '}' and '~' are never drawn.
ALLELE_MIN = 32
ALLELE_MAX = 122

MATCH_MARK = "|"
MISS_MARK = " "


@dataclass(frozen=True)
class Genotype:
    """One candidate solution: an immutable, fixed-length byte string.

    Attributes:
        genes: Raw bytes of the candidate, one allele per position
    """

    genes: bytes

    @classmethod
    def from_value(cls, value: Genotype | str | bytes) -> Genotype:
        if isinstance(value, Genotype):
            return value
        if isinstance(value, str):
            value = value.encode("ascii")
        return cls(bytes(value))

    def __len__(self) -> int:
        return len(self.genes)

    def __str__(self) -> str:
        return self.genes.decode("ascii", errors="replace")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Genotype):
            return self.genes == other.genes
        if isinstance(other, bytes):
            return self.genes == other
        if isinstance(other, str):
            try:
                return self.genes == other.encode("ascii")
            except UnicodeEncodeError:
                return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.genes)


def random_allele(rng: random.Random) -> int:
    return rng.randint(ALLELE_MIN, ALLELE_MAX)


def random_genotype(length: int, rng: random.Random) -> Genotype:
    """Build a genotype whose bytes are drawn uniformly from [32, 122]."""
    return Genotype(bytes(random_allele(rng) for _ in range(length)))


def score(genotype: Genotype, target: bytes) -> float:
    """Fraction of positions where ``genotype`` agrees with ``target``."""
    hits = sum(1 for g, t in zip(genotype.genes, target) if g == t)
    return hits / len(target)


def matches(genotype: Genotype, target: bytes) -> str:
    """Per-position diff: '|' where the bytes agree, ' ' where they differ."""
    return "".join(
        MATCH_MARK if g == t else MISS_MARK for g, t in zip(genotype.genes, target)
    )


def score_population(population: Sequence[Genotype], target: bytes) -> np.ndarray:
    """Score every member at once by comparing a (members x length) byte matrix."""
    if not population:
        return np.zeros(0, dtype=np.float64)
    length = len(target)
    genes = np.frombuffer(b"".join(g.genes for g in population), dtype=np.uint8)
    genes = genes.reshape(len(population), length)
    wanted = np.frombuffer(target, dtype=np.uint8)
    hits = np.count_nonzero(genes == wanted, axis=1)
    return hits / length


__all__ = [
    "ALLELE_MIN",
    "ALLELE_MAX",
    "Genotype",
    "random_allele",
    "random_genotype",
    "score",
    "matches",
    "score_population",
]
