from genstring.config import build_run_parameters
from genstring.generation.engine import EvolutionEngine
from genstring.generation.report import ConsoleReporter
from genstring.utils.rng_manager import RNGManager


def main():
    # Quickstart goal:
    # 1) Validate a target and mutation rate into RunParameters
    # 2) Run the engine with a seeded RNG so the run is repeatable
    # 3) Print every tenth generation and the final match

    # Population size is derived from the target: 13 characters -> 13 members.
    params = build_run_parameters('Hello, World!', mutation_rate=0.02)

    # Reports go to stdout; keep the scrollback instead of clearing the screen.
    reporter = ConsoleReporter(clear_screen=False)

    # A cap keeps the tutorial bounded even though this target converges quickly.
    engine = EvolutionEngine(params, RNGManager(seed=42), reporter=reporter)
    result = engine.run(max_generations=20_000)

    print('found:', result.found)
    print('generations:', result.generation)
    print('best:', result.best)


if __name__ == '__main__':
    main()
