"""
Darwin: a generic genetic algorithm engine.
Provides real-valued candidates, pluggable operators and the generational loop.
"""

from .crossover import (
    ArithmeticCrossover,
    SinglePointCrossover,
    TwoPointCrossover,
    UniformCrossover,
)
from .engine import EvolutionConfig, EvolutionEngine, EvolutionResult
from .errors import (
    ConfigurationError,
    DarwinError,
    EmptyGenePoolError,
    InvalidCandidateError,
    UnknownOperatorError,
    UnknownProblemError,
)
from .fitness import FitnessFunction, negated
from .history import GenerationStats, RunHistory
from .individual import Candidate, random_population
from .interfaces import FitnessEvaluator, Mutator, Recombiner, Selector
from .mutation import InversionMutation, ScrambleMutation, SwapMutation
from .selection import RouletteWheelSelection, TournamentSelection

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "random_population",
    "EvolutionEngine",
    "EvolutionConfig",
    "EvolutionResult",
    "GenerationStats",
    "RunHistory",
    "FitnessEvaluator",
    "FitnessFunction",
    "negated",
    "Selector",
    "Recombiner",
    "Mutator",
    "RouletteWheelSelection",
    "TournamentSelection",
    "SinglePointCrossover",
    "TwoPointCrossover",
    "UniformCrossover",
    "ArithmeticCrossover",
    "SwapMutation",
    "ScrambleMutation",
    "InversionMutation",
    "DarwinError",
    "InvalidCandidateError",
    "EmptyGenePoolError",
    "ConfigurationError",
    "UnknownOperatorError",
    "UnknownProblemError",
]
