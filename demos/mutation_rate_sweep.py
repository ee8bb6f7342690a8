"""
Mutation Rate Sweep Demo (GenString)

Summary:
- Runs seeded searches for one target across several mutation rates
- Records generations-to-match (or the cap) for every run
- Logs results to CSV and prints the mean per rate

Use --quick for a short sanity test.
"""

from __future__ import annotations

import argparse
import csv
from typing import List

import numpy as np

from genstring.config import build_run_parameters
from genstring.generation.engine import EvolutionEngine
from genstring.utils.rng_manager import RNGManager


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--target', default='To be or not to be')
    ap.add_argument('--rates', type=float, nargs='+', default=[0.005, 0.01, 0.02, 0.05, 0.1])
    ap.add_argument('--runs', type=int, default=10, help='seeded runs per mutation rate')
    ap.add_argument('--cap', type=int, default=20000, help='generation cap per run')
    ap.add_argument('--out', default='demos/mutation_sweep.csv')
    ap.add_argument('--quick', action='store_true', help='use a tiny config for sanity-run')
    args = ap.parse_args()

    if args.quick:
        args.target = 'quick'
        args.rates = [0.01, 0.05]
        args.runs = 2
        args.cap = 2000

    rows: List[dict] = []
    for rate in args.rates:
        params = build_run_parameters(args.target, mutation_rate=rate, max_generations=args.cap)
        generations = []
        for run in range(args.runs):
            result = EvolutionEngine(params, RNGManager(seed=run)).run()
            generations.append(result.generation)
            rows.append({
                'mutation_rate': rate,
                'seed': run,
                'found': result.found,
                'generations': result.generation,
                'best_score': round(result.score, 6),
            })
        print(f"rate={rate} mean_generations={np.mean(generations):.1f} median={np.median(generations):.0f}")

    try:
        with open(args.out, 'w', newline='') as f:
            w = csv.DictWriter(f, fieldnames=['mutation_rate', 'seed', 'found', 'generations', 'best_score'])
            w.writeheader()
            w.writerows(rows)
        print('csv_log:', args.out)
    except OSError as exc:
        print('csv_log_failed:', exc)


if __name__ == '__main__':
    main()
