"""
Observability & Determinism Tutorial

Goals:
- Build a consolidated report from a finished search
- Compute determinism signatures and show they are stable for a fixed seed
"""

from genstring.config import build_run_parameters, PRESET_BOUNDED
from genstring.generation.engine import EvolutionEngine
from genstring.utils.observability import consolidated_report, determinism_signature
from genstring.utils.rng_manager import RNGManager


def run_once(seed: int) -> dict:
    params = build_run_parameters('determinism', PRESET_BOUNDED, mutation_rate=0.03)
    rng = RNGManager(seed=seed)
    result = EvolutionEngine(params, rng).run()
    return consolidated_report(result, rng_manager=rng)


def main():
    rep1 = run_once(seed=123)
    rep2 = run_once(seed=123)
    rep3 = run_once(seed=124)
    print('schema_version:', rep1['schema_version'])
    print('generations:', rep1['generation'], 'found:', rep1['found'])
    print('same seed, same signature:', determinism_signature(rep1) == determinism_signature(rep2))
    print('other seed, same signature:', determinism_signature(rep1) == determinism_signature(rep3))


if __name__ == '__main__':
    main()
