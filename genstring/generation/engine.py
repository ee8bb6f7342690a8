"""Evolution engine driving the generational search.

Implements:
- GenerationHistory: per-generation metrics tracking
- SearchResult: final outcome of a run
- EvolutionEngine: rank -> report -> terminal check -> reproduce -> replace,
  one generation per ``step()``, until the best genotype equals the target
  or the optional generation cap is reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from genstring.config import RunParameters, positive_int
from genstring.evolution.genotype import Genotype, matches
from genstring.evolution.population import populate, reproduce, seed_population
from genstring.evolution.selection import rank_population
from genstring.generation.report import GenerationReport, Reporter
from genstring.utils.rng_manager import RNGManager


@dataclass
class GenerationHistory:
    """Tracks population statistics across generations."""

    metrics: list[dict[str, Any]] = field(default_factory=list)

    def add_metrics(self, metrics: dict[str, Any]) -> None:
        self.metrics.append(dict(metrics))

    @property
    def best_scores(self) -> list[float]:
        return [m['best_score'] for m in self.metrics]

    def __len__(self) -> int:
        return len(self.metrics)


@dataclass
class SearchResult:
    """Outcome of ``EvolutionEngine.run``."""

    found: bool
    generation: int
    best: Genotype
    score: float
    population: list[Genotype]
    history: GenerationHistory
    target: bytes
    seed: int | None = None


class EvolutionEngine:
    """Owns the generation counter and the population of one search."""

    def __init__(self, params: RunParameters, rng_manager: RNGManager | None = None,
                 reporter: Reporter | None = None,
                 population: Sequence[Genotype | str | bytes] | None = None) -> None:
        self.params = params
        self.rng_manager = rng_manager if rng_manager is not None else RNGManager(seed=params.seed)
        self.reporter = reporter
        self.max_generations = params.max_generations
        self.history = GenerationHistory()
        self.generation = 1
        self.best: Genotype | None = None
        self.best_score = 0.0
        self.finished = False
        self.found = False

        if population is not None:
            self.population = seed_population(population, params.target)
        else:
            self.population = populate(
                params.population_size,
                len(params.target),
                self.rng_manager.get_context_rng('init'),
            )

    @property
    def population_size(self) -> int:
        return self.params.population_size

    def _emit(self, best: Genotype, best_score: float) -> GenerationReport:
        report = GenerationReport(
            generation=self.generation,
            target=self.params.target_text,
            diff=matches(best, self.params.target),
            best=str(best),
            score=best_score,
        )
        if self.reporter is not None:
            self.reporter(report)
        return report

    def step(self) -> GenerationReport | None:
        """Run one generation.

        Returns the report emitted for this generation, or None when the
        generation was not a reporting one.
        """
        if self.finished:
            raise RuntimeError("Search already finished; create a new engine to search again")

        ranked, scores = rank_population(self.population, self.params.target)
        self.population = ranked
        best = ranked[-1]
        best_score = float(scores[-1])
        self.best = best
        self.best_score = best_score

        self.found = best.genes == self.params.target
        capped = self.max_generations is not None and self.generation >= self.max_generations

        self.history.add_metrics({
            'generation': self.generation,
            'best_score': best_score,
            'mean_score': float(scores.mean()),
            'distinct': len({g.genes for g in ranked}),
        })
        logging.debug(f"Generation {self.generation}: best={best_score:.4f} mean={float(scores.mean()):.4f}")

        report = None
        if self.found or capped or self.generation % self.params.report_interval == 0:
            report = self._emit(best, best_score)

        if self.found:
            self.finished = True
            logging.info(f"Target matched at generation {self.generation}")
            return report
        if capped:
            self.finished = True
            logging.warning(f"Generation cap {self.max_generations} reached without a match (best score {best_score:.4f})")
            return report

        self.population = reproduce(
            best,
            ranked,
            self.params.crossover_bias,
            self.params.mutation_rate,
            self.rng_manager.get_context_rng('reproduction'),
        )
        self.generation += 1
        return report

    def run(self, max_generations: int | None = None) -> SearchResult:
        """Step until a match, or until ``max_generations`` when a cap is set."""
        if max_generations is not None:
            self.max_generations = positive_int('max_generations', max_generations)
        while not self.finished:
            self.step()
        if self.best is None:
            raise RuntimeError("Search finished without ranking a generation")
        return SearchResult(
            found=self.found,
            generation=self.generation,
            best=self.best,
            score=self.best_score,
            population=list(self.population),
            history=self.history,
            target=self.params.target,
            seed=getattr(self.rng_manager, 'seed', None),
        )


__all__ = [
    'GenerationHistory',
    'SearchResult',
    'EvolutionEngine',
]
