"""Run reports and determinism checks.

A consolidated report is a JSON-serialisable summary of a finished search.
Two seeded runs with identical parameters must produce reports with the same
determinism signature.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Sequence

SCHEMA_VERSION = 1


def consolidated_report(result: Any, rng_manager: Any | None = None) -> dict[str, Any]:
    """Summarise a ``SearchResult`` as a plain dict."""
    metrics = list(getattr(result.history, 'metrics', []))
    seed = getattr(rng_manager, 'seed', None) if rng_manager is not None else result.seed
    return {
        'schema_version': SCHEMA_VERSION,
        'target': result.target.decode('ascii'),
        'found': bool(result.found),
        'generation': int(result.generation),
        'best': str(result.best),
        'score': float(result.score),
        'population': [str(g) for g in result.population],
        'metrics': {
            'generations': len(metrics),
            'best_scores': [round(float(m['best_score']), 12) for m in metrics],
            'mean_scores': [round(float(m['mean_score']), 12) for m in metrics],
        },
        'env': {'seed': seed},
    }


def determinism_signature(report: dict[str, Any]) -> str:
    payload = json.dumps(report, sort_keys=True, separators=(',', ':'))
    return hashlib.sha256(payload.encode('utf-8')).hexdigest()


def assert_determinism_equivalence(reports: Sequence[dict[str, Any]]) -> None:
    """Raise AssertionError unless all reports share one signature."""
    if not reports:
        return
    signatures = [determinism_signature(r) for r in reports]
    first = signatures[0]
    for idx, sig in enumerate(signatures[1:], start=1):
        if sig != first:
            raise AssertionError(f"Report {idx} diverges from report 0: {sig} != {first}")


__all__ = [
    'SCHEMA_VERSION',
    'consolidated_report',
    'determinism_signature',
    'assert_determinism_equivalence',
]
