"""
GenString command line

Evolves random strings until one matches the string given with ``-i``:

    genstring -i "Hello, World" -m 0.01

Exit codes: 0 on a match, 1 on a configuration error, 3 when
``--max-generations`` stops the search first.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from genstring.config import build_run_parameters
from genstring.generation.engine import EvolutionEngine
from genstring.generation.report import ConsoleReporter
from genstring.utils.rng_manager import RNGManager
from genstring.utils.validation import ValidationError

EXIT_FOUND = 0
EXIT_CONFIG_ERROR = 1
EXIT_CAPPED = 3


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog='genstring', description='Evolve random strings toward a target string.')
    ap.add_argument('-i', '--input', default='', help='the input string to generate')
    ap.add_argument('-m', '--mutation-rate', type=float, default=0.01, help='the mutation rate')
    ap.add_argument('--seed', type=int, default=None, help='seed for a reproducible run')
    ap.add_argument('--max-generations', type=int, default=None, help='stop after this many generations')
    ap.add_argument('--report-interval', type=int, default=10, help='report every N generations')
    ap.add_argument('--no-clear', action='store_true', help='do not clear the screen between reports')
    ap.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s %(message)s')

    try:
        params = build_run_parameters(
            args.input,
            mutation_rate=args.mutation_rate,
            report_interval=args.report_interval,
            max_generations=args.max_generations,
            seed=args.seed,
        )
    except ValidationError as exc:
        logging.error(str(exc))
        return EXIT_CONFIG_ERROR

    reporter = ConsoleReporter(sys.stdout, clear_screen=not args.no_clear, precision=params.score_precision)
    engine = EvolutionEngine(params, RNGManager(seed=params.seed), reporter=reporter)
    result = engine.run()

    if not result.found:
        print(f"no match after {result.generation} generations (best score {result.score:.{params.score_precision}f})")
        return EXIT_CAPPED
    return EXIT_FOUND


if __name__ == '__main__':
    sys.exit(main())
