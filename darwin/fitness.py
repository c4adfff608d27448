"""
Fitness evaluation helpers for Darwin.
Adapts plain callables to the FitnessEvaluator interface.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from darwin.individual import Candidate
from darwin.interfaces import FitnessEvaluator

logger = logging.getLogger(__name__)

FitnessCallable = Callable[[Candidate], float]


@dataclass
class FitnessFunction(FitnessEvaluator):
    """Wraps a callable that scores a candidate."""

    function: FitnessCallable
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            self.name = getattr(self.function, "__name__", type(self.function).__name__)

    def evaluate(self, candidate: Candidate) -> float:
        return float(self.function(candidate))


class NegatedFitness(FitnessEvaluator):
    """
    Turns a cost into a fitness by flipping its sign.

    A perfect solution with zero cost scores 0.0, and every worse solution
    scores below it, which is what the engine's ranking and stopping check
    expect. Non-negative costs give non-positive fitness, which roulette-wheel
    selection cannot use; pair negated fitness with tournament selection.
    """

    non_positive = True

    def __init__(self, evaluator: FitnessEvaluator):
        self.evaluator = evaluator

    def evaluate(self, candidate: Candidate) -> float:
        return -self.evaluator.evaluate(candidate)


def as_evaluator(
    fitness: Union[FitnessEvaluator, FitnessCallable]
) -> FitnessEvaluator:
    """Return `fitness` as a FitnessEvaluator, wrapping callables."""
    if isinstance(fitness, FitnessEvaluator):
        return fitness
    if callable(fitness):
        return FitnessFunction(fitness)
    raise TypeError(
        f"Fitness must be a FitnessEvaluator or a callable, got {type(fitness).__name__}"
    )


def negated(fitness: Union[FitnessEvaluator, FitnessCallable]) -> FitnessEvaluator:
    """Wrap a cost function so that lower cost means higher fitness."""
    return NegatedFitness(as_evaluator(fitness))
