import io
import itertools
import random

import pytest

from genstring.config import RunParameters, build_run_parameters
from genstring.evolution.genotype import Genotype
from genstring.generation.engine import EvolutionEngine
from genstring.generation.report import ConsoleReporter
from genstring.utils.rng_manager import RNGManager
from genstring.utils.validation import ValidationError


class ScriptedRandom(random.Random):
    """random.Random whose floats and indices follow a fixed cycle."""

    def __init__(self, floats, indices):
        super().__init__(0)
        self._floats = itertools.cycle(floats)
        self._indices = itertools.cycle(indices)

    def random(self):
        return next(self._floats)

    def randrange(self, start, stop=None, step=1):
        return next(self._indices) % start


class StubRNGManager:
    seed = None

    def __init__(self, rng):
        self.rng = rng

    def get_context_rng(self, context):
        return self.rng


def test_initial_population_size_follows_target_length():
    for target in ("Z", "hello", "a much longer target string"):
        params = build_run_parameters(target)
        engine = EvolutionEngine(params, RNGManager(seed=1))
        assert engine.population_size == len(target)
        assert len(engine.population) == len(target)
        assert all(len(g) == len(target) for g in engine.population)
        assert engine.generation == 1


def test_scripted_breeding_reaches_target_on_second_generation():
    params = build_run_parameters("ABC", mutation_rate=0.0)
    # ranked order is XXX (0), AXX (1/3), XBC (2/3); partner index 1 is AXX
    # per position: take partner at 0, best at 1 and 2; mutation draws never fire
    rng = ScriptedRandom(floats=[0.9, 0.5, 0.1, 0.5, 0.1, 0.5], indices=[1])
    reports = []
    engine = EvolutionEngine(params, StubRNGManager(rng), reporter=reports.append,
                             population=["AXX", "XBC", "XXX"])

    assert engine.step() is None
    assert engine.generation == 2
    assert not engine.finished
    assert all(g == b"ABC" for g in engine.population)

    report = engine.step()
    assert report is not None and report.found
    assert report.generation == 2
    assert engine.finished and engine.found
    assert engine.generation == 2
    assert reports == [report]


def test_match_in_first_generation_stops_without_reproducing():
    params = build_run_parameters("AB", mutation_rate=0.0)
    reports = []
    engine = EvolutionEngine(params, RNGManager(seed=3), reporter=reports.append, population=["BB", "AB"])
    result = engine.run()
    assert result.found
    assert result.generation == 1
    assert result.best == b"AB"
    assert result.score == 1.0
    assert len(result.history) == 1
    assert sorted(g.genes for g in result.population) == [b"AB", b"BB"]
    assert [r.generation for r in reports] == [1]
    with pytest.raises(RuntimeError):
        engine.step()


def test_two_letter_scenario_stops_on_matching_generation():
    params = build_run_parameters("AB", mutation_rate=0.0)
    # AA and BB tie; index 0 is always the non-best member after ranking.
    # The first child keeps the best byte at 0 and the partner byte at 1, the
    # second does the opposite, so the children are AB and BA for either tie order.
    rng = ScriptedRandom(floats=[0.1, 0.5, 0.9, 0.5, 0.9, 0.5, 0.1, 0.5], indices=[0])
    engine = EvolutionEngine(params, StubRNGManager(rng), population=["AA", "BB"])
    result = engine.run(max_generations=500)

    assert result.found
    assert result.generation == 2
    assert result.best == "AB"
    assert result.history.best_scores == [0.5, 1.0]
    assert sorted(g.genes for g in result.population) == [b"AB", b"BA"]


def test_generation_cap_and_report_cadence():
    params = build_run_parameters("abcde", mutation_rate=0.0, max_generations=25)
    reports = []
    engine = EvolutionEngine(params, RNGManager(seed=5), reporter=reports.append, population=["zzzzz"] * 5)
    result = engine.run()
    assert not result.found
    assert result.generation == 25
    assert [r.generation for r in reports] == [10, 20, 25]
    assert all(r.target == "abcde" and r.diff == "     " and r.score == 0.0 for r in reports)
    assert all(g == "zzzzz" for g in result.population)


def test_custom_report_interval():
    params = build_run_parameters("abc", mutation_rate=0.0, max_generations=9, report_interval=3)
    reports = []
    EvolutionEngine(params, RNGManager(seed=5), reporter=reports.append, population=["zzz"] * 3).run()
    assert [r.generation for r in reports] == [3, 6, 9]


def test_seeded_search_converges_and_reports_final_generation():
    params = build_run_parameters("Hi", mutation_rate=0.05, seed=11)
    reports = []
    result = EvolutionEngine(params, reporter=reports.append).run(max_generations=50_000)
    assert result.found
    assert result.best == "Hi"
    assert result.seed == 11
    assert reports[-1].generation == result.generation
    assert reports[-1].diff == "||"
    assert reports[-1].best == "Hi"
    assert all(r.generation % 10 == 0 for r in reports[:-1])


def test_run_rejects_non_positive_cap():
    params = build_run_parameters("abc")
    engine = EvolutionEngine(params, RNGManager(seed=1))
    for cap in (0, True, 2.5):
        with pytest.raises(ValidationError) as exc:
            engine.run(max_generations=cap)
        assert exc.value.error_type == "invalid_max_generations"
    assert engine.generation == 1


def test_engine_rejects_empty_target_before_the_loop():
    with pytest.raises(ValidationError) as exc:
        EvolutionEngine(RunParameters(target=b""), RNGManager(seed=1))
    assert exc.value.error_type == "missing_target"


def test_zero_precision_reports_do_not_fail():
    params = build_run_parameters("abc", mutation_rate=0.0, max_generations=2, score_precision=0)
    out = io.StringIO()
    reporter = ConsoleReporter(out, clear_screen=False, precision=params.score_precision)
    result = EvolutionEngine(params, RNGManager(seed=1), reporter=reporter, population=["zzz"] * 3).run()
    assert result.generation == 2
    assert out.getvalue().splitlines()[2].endswith("zzz 0")


def test_seed_population_must_fit_target():
    params = build_run_parameters("abc")
    with pytest.raises(ValidationError):
        EvolutionEngine(params, RNGManager(seed=1), population=["abc", "abc"])
    with pytest.raises(ValidationError):
        EvolutionEngine(params, RNGManager(seed=1), population=[Genotype(b"ab"), "abc", "abc"])
