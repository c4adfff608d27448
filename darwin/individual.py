"""
Candidate solutions and random population initialization for Darwin.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from darwin.errors import EmptyGenePoolError, InvalidCandidateError
from darwin.interfaces import DEFAULT_FITNESS

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    """A fixed-length real-valued gene sequence plus its fitness score."""

    genes: List[float]
    fitness: float = DEFAULT_FITNESS

    def __post_init__(self):
        if not self.genes:
            raise InvalidCandidateError()
        self.genes = [float(gene) for gene in self.genes]

    @staticmethod
    def default_fitness() -> float:
        """Fitness of a candidate that has not been evaluated yet."""
        return DEFAULT_FITNESS

    def clone(self) -> "Candidate":
        """Independent copy; no gene list is shared with the original."""
        return Candidate(genes=list(self.genes), fitness=self.fitness)

    def __len__(self) -> int:
        return len(self.genes)


def random_population(
    population_size: int,
    gene_length: int,
    gene_pool: Sequence[float],
    rng: Optional[random.Random] = None,
) -> List[Candidate]:
    """
    Build a population by sampling genes uniformly, with replacement.

    Args:
        population_size: Number of candidates to create
        gene_length: Number of genes per candidate
        gene_pool: Allowed gene values
        rng: Random source; a fresh unseeded one is used when omitted

    Returns:
        List of unevaluated candidates
    """
    pool = list(gene_pool)
    if not pool:
        raise EmptyGenePoolError()

    rng = rng or random.Random()
    population = [
        Candidate([rng.choice(pool) for _ in range(gene_length)])
        for _ in range(population_size)
    ]

    logger.debug(
        f"Generated random population of {len(population)} candidates "
        f"with {gene_length} genes from a pool of {len(pool)} values"
    )
    return population
