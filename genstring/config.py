"""Run configuration: defaults, presets and validated run parameters.

Configuration is a plain dict read with ``config.get(key, default)``; the
validated result is a frozen ``RunParameters`` handed to every scoring and
reproduction call so the engine never relies on module-level state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from genstring.evolution.genotype import ALLELE_MAX, ALLELE_MIN
from genstring.utils.validation import ValidationError

DEFAULT_CONFIG: dict[str, Any] = {
    'mutation_rate': 0.01,
    'crossover_bias': 0.8,
    'report_interval': 10,
    'max_generations': None,
    'seed': None,
    'score_precision': 6,
}

PRESET_STANDARD: dict[str, Any] = dict(DEFAULT_CONFIG)

# Harness-friendly: a run can never spin forever.
PRESET_BOUNDED: dict[str, Any] = {**DEFAULT_CONFIG, 'max_generations': 10_000}

PRESET_EXPLORATORY: dict[str, Any] = {**DEFAULT_CONFIG, 'mutation_rate': 0.05}


@dataclass(frozen=True)
class RunParameters:
    """Immutable parameters of a single search.

    Every field is validated on construction, so an engine can never start
    from an empty target or an out-of-range setting.

    Attributes:
        target: Bytes the search must reproduce exactly (ASCII ``str`` is
            accepted and stored as bytes)
        mutation_rate: Per-byte probability of a fresh random allele
        crossover_bias: Per-byte probability of keeping the best parent's byte
        report_interval: Report every N-th generation
        max_generations: Optional cap; None means run until a match
        seed: Seed for the RNGManager, None for a random seed
        score_precision: Decimal places used when displaying scores

    Raises:
        ValidationError: if the target is missing or unusable, or any
            parameter is out of range.
    """

    target: bytes
    mutation_rate: float = 0.01
    crossover_bias: float = 0.8
    report_interval: int = 10
    max_generations: int | None = None
    seed: int | None = None
    score_precision: int = 6

    def __post_init__(self) -> None:
        set_field = object.__setattr__
        set_field(self, 'target', _coerce_target(self.target))
        set_field(self, 'mutation_rate', _probability('mutation_rate', self.mutation_rate))
        set_field(self, 'crossover_bias', _probability('crossover_bias', self.crossover_bias))
        set_field(self, 'report_interval', positive_int('report_interval', self.report_interval))
        if self.max_generations is not None:
            set_field(self, 'max_generations', positive_int('max_generations', self.max_generations))
        if self.seed is not None:
            set_field(self, 'seed', _integer('seed', self.seed))
        precision = _integer('score_precision', self.score_precision)
        if precision < 0:
            raise ValidationError(
                'invalid_score_precision',
                f"score_precision must be a non-negative integer, got {precision!r}",
                value=precision,
            )
        set_field(self, 'score_precision', precision)

    @property
    def population_size(self) -> int:
        # population size follows the target length, not a constant
        return len(self.target)

    @property
    def target_text(self) -> str:
        return self.target.decode('ascii')


def _coerce_target(target: str | bytes | None) -> bytes:
    if target is None or len(target) == 0:
        raise ValidationError('missing_target', 'expected input string')
    if isinstance(target, str):
        try:
            data = target.encode('ascii')
        except UnicodeEncodeError as exc:
            raise ValidationError(
                'invalid_target_encoding',
                'Target must be ASCII text',
                target=target,
            ) from exc
    else:
        try:
            data = bytes(target)
        except (TypeError, ValueError) as exc:
            raise ValidationError('invalid_target_encoding', 'Target must be str or bytes', target=target) from exc
    unreachable = sorted({b for b in data if not ALLELE_MIN <= b <= ALLELE_MAX})
    if unreachable:
        raise ValidationError(
            'unreachable_target',
            f"Target contains characters outside [{chr(ALLELE_MIN)!r}, {chr(ALLELE_MAX)!r}]",
            bytes=tuple(unreachable),
        )
    return data


def _probability(name: str, value: Any) -> float:
    error_type = f'invalid_{name}'
    if isinstance(value, bool):
        raise ValidationError(error_type, f"{name} must be a number in [0, 1]", value=value)
    try:
        prob = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(error_type, f"{name} must be a number in [0, 1]", value=value) from exc
    if math.isnan(prob) or not 0.0 <= prob <= 1.0:
        raise ValidationError(error_type, f"{name} must lie in [0, 1], got {value}", value=value)
    return prob


def _integer(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f'invalid_{name}', f"{name} must be an integer, got {value!r}", value=value)
    return value


def positive_int(name: str, value: Any) -> int:
    """Return ``value`` if it is an int >= 1, else raise ``invalid_<name>``."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f'invalid_{name}', f"{name} must be a positive integer, got {value!r}", value=value)
    return value


def build_run_parameters(target: str | bytes | None, config: dict | None = None, **overrides: Any) -> RunParameters:
    """Merge defaults, ``config`` and ``overrides`` into validated parameters.

    Raises:
        ValidationError: if the target is missing or unusable, or any
            parameter is out of range.
    """
    merged = dict(DEFAULT_CONFIG)
    merged.update(config or {})
    merged.update({k: v for k, v in overrides.items() if v is not None})

    return RunParameters(
        target=target,
        mutation_rate=merged.get('mutation_rate', 0.01),
        crossover_bias=merged.get('crossover_bias', 0.8),
        report_interval=merged.get('report_interval', 10),
        max_generations=merged.get('max_generations'),
        seed=merged.get('seed'),
        score_precision=merged.get('score_precision', 6),
    )


__all__ = [
    'DEFAULT_CONFIG',
    'PRESET_STANDARD',
    'PRESET_BOUNDED',
    'PRESET_EXPLORATORY',
    'RunParameters',
    'build_run_parameters',
    'positive_int',
]
