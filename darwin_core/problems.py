"""
Built-in benchmark problems for the command line and tests.
Both score a perfect solution as exactly 0.0 and everything else below it,
so neither can drive roulette-wheel selection.
"""

from typing import Callable, Dict, List, Optional, Sequence

from darwin.errors import UnknownProblemError
from darwin.individual import Candidate
from darwin.interfaces import FitnessEvaluator


class Problem(FitnessEvaluator):
    """A fitness evaluator that also knows how to seed its own population."""

    name = "problem"

    def __init__(self, gene_length: int, gene_pool: Sequence[float]):
        self.gene_length = gene_length
        self.gene_pool = list(gene_pool)


class TargetMatch(Problem):
    """Negated absolute distance to a fixed target vector."""

    name = "target"
    non_positive = True

    def __init__(
        self,
        target: Optional[Sequence[float]] = None,
        gene_pool: Optional[Sequence[float]] = None,
    ):
        self.target = [float(t) for t in (target or [1.0, 2.0, 3.0, 4.0, 5.0])]
        pool = gene_pool or sorted(set(self.target) | {0.0, 6.0, 7.0, 8.0, 9.0})
        super().__init__(len(self.target), pool)

    def evaluate(self, candidate: Candidate) -> float:
        return -sum(abs(g - t) for g, t in zip(candidate.genes, self.target))


class Sphere(Problem):
    """Negated sum of squares; the optimum is the origin."""

    name = "sphere"
    non_positive = True

    def __init__(
        self, dimensions: int = 5, gene_pool: Optional[Sequence[float]] = None
    ):
        pool = gene_pool or [float(v) for v in range(-5, 6)]
        super().__init__(dimensions, pool)

    def evaluate(self, candidate: Candidate) -> float:
        return -sum(g * g for g in candidate.genes)


PROBLEMS: Dict[str, Callable[..., Problem]] = {
    TargetMatch.name: TargetMatch,
    Sphere.name: Sphere,
}


def get_problem(name: str, **params) -> Problem:
    """Build a benchmark problem by name."""
    if name not in PROBLEMS:
        raise UnknownProblemError(name, sorted(PROBLEMS))
    return PROBLEMS[name](**params)


def problem_names() -> List[str]:
    return sorted(PROBLEMS)
