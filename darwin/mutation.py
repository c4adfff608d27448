"""
Mutation strategies for Darwin.
Each strategy returns a mutated copy; the input candidate is unchanged.
"""

import random
from typing import Tuple

from darwin.individual import Candidate
from darwin.interfaces import Mutator


def _random_span(length: int, rng: random.Random) -> Tuple[int, int]:
    """Half-open range between two random indices (possibly empty)."""
    point1 = rng.randrange(length)
    point2 = rng.randrange(length)
    return min(point1, point2), max(point1, point2)


class SwapMutation(Mutator):
    """Exchange the genes at two random positions."""

    def mutate(self, candidate: Candidate, rng: random.Random) -> Candidate:
        mutant = candidate.clone()
        length = len(mutant.genes)
        i = rng.randrange(length)
        j = rng.randrange(length)
        mutant.genes[i], mutant.genes[j] = mutant.genes[j], mutant.genes[i]
        return mutant


class ScrambleMutation(Mutator):
    """Shuffle the genes inside a random span."""

    def mutate(self, candidate: Candidate, rng: random.Random) -> Candidate:
        mutant = candidate.clone()
        start, end = _random_span(len(mutant.genes), rng)
        segment = mutant.genes[start:end]
        rng.shuffle(segment)
        mutant.genes[start:end] = segment
        return mutant


class InversionMutation(Mutator):
    """Reverse the genes inside a random span."""

    def mutate(self, candidate: Candidate, rng: random.Random) -> Candidate:
        mutant = candidate.clone()
        start, end = _random_span(len(mutant.genes), rng)
        mutant.genes[start:end] = mutant.genes[start:end][::-1]
        return mutant
