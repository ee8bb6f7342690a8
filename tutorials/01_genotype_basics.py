"""
Genotype Basics Tutorial

Goals:
- Build genotypes from text and at random
- Score them against a target and show the match diff
- Breed two parents with and without mutation
"""

from genstring.evolution.genotype import Genotype, matches, random_genotype, score
from genstring.evolution.operators import breed
from genstring.utils.rng_manager import RNGManager


def main():
    rng = RNGManager(seed=7).get_context_rng('tutorial')
    target = b'evolve'

    best = Genotype.from_value('evXlve')
    other = random_genotype(len(target), rng)

    for g in (best, other):
        print(f"{str(g)!r:10} score={score(g, target):.3f} diff={matches(g, target)!r}")

    # Without mutation every child byte comes from one of the parents.
    child = breed(best, other, crossover_bias=0.8, mutation_rate=0.0, rng=rng)
    print('child:', repr(str(child)), 'score:', round(score(child, target), 3))

    # With mutation_rate=1.0 every byte is re-drawn from ' '..'z'.
    wild = breed(best, other, crossover_bias=0.8, mutation_rate=1.0, rng=rng)
    print('wild child:', repr(str(wild)))


if __name__ == '__main__':
    main()
