"""
Crossover strategies for Darwin.
Each strategy turns two equal-length parents into two fresh children and
leaves the parents untouched.
"""

import random
from typing import Tuple

from darwin.individual import Candidate
from darwin.interfaces import Recombiner


class SinglePointCrossover(Recombiner):
    """Swap every gene from one random cut point to the end."""

    def crossover(
        self, parent1: Candidate, parent2: Candidate, rng: random.Random
    ) -> Tuple[Candidate, Candidate]:
        child1 = parent1.clone()
        child2 = parent2.clone()
        point = rng.randrange(len(parent1.genes))

        child1.genes[point:] = parent2.genes[point:]
        child2.genes[point:] = parent1.genes[point:]
        return child1, child2


class TwoPointCrossover(Recombiner):
    """Swap the genes between two random cut points."""

    def crossover(
        self, parent1: Candidate, parent2: Candidate, rng: random.Random
    ) -> Tuple[Candidate, Candidate]:
        child1 = parent1.clone()
        child2 = parent2.clone()
        length = len(parent1.genes)
        point1 = rng.randrange(length)
        point2 = rng.randrange(length)
        start, end = min(point1, point2), max(point1, point2)

        child1.genes[start:end] = parent2.genes[start:end]
        child2.genes[start:end] = parent1.genes[start:end]
        return child1, child2


class UniformCrossover(Recombiner):
    """Swap each gene independently with probability one half."""

    def crossover(
        self, parent1: Candidate, parent2: Candidate, rng: random.Random
    ) -> Tuple[Candidate, Candidate]:
        child1 = parent1.clone()
        child2 = parent2.clone()

        for i in range(len(parent1.genes)):
            if rng.random() < 0.5:
                child1.genes[i] = parent2.genes[i]
                child2.genes[i] = parent1.genes[i]
        return child1, child2


class ArithmeticCrossover(Recombiner):
    """
    Blend the parents with a single random weight.

    The only strategy that produces gene values outside the parents' own
    values, so it needs a continuous gene representation.
    """

    def crossover(
        self, parent1: Candidate, parent2: Candidate, rng: random.Random
    ) -> Tuple[Candidate, Candidate]:
        child1 = parent1.clone()
        child2 = parent2.clone()
        alpha = rng.random()

        for i, (gene1, gene2) in enumerate(zip(parent1.genes, parent2.genes)):
            child1.genes[i] = alpha * gene1 + (1.0 - alpha) * gene2
            child2.genes[i] = alpha * gene2 + (1.0 - alpha) * gene1
        return child1, child2
