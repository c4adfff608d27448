"""Darwin: Core Interface Definitions"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from darwin.individual import Candidate

# Enumerations


class SelectionMethod(Enum):
    """Parent selection strategies."""

    ROULETTE = "roulette"
    TOURNAMENT = "tournament"


class CrossoverType(Enum):
    """Recombination strategies."""

    SINGLE_POINT = "single_point"
    TWO_POINT = "two_point"
    UNIFORM = "uniform"
    ARITHMETIC = "arithmetic"


class MutationType(Enum):
    """Mutation strategies."""

    SWAP = "swap"
    SCRAMBLE = "scramble"
    INVERSION = "inversion"


# Data Classes


@dataclass
class ValidationResult:
    """Validation output."""

    is_valid: bool
    errors: List[str]


# Operator Interfaces
#
# Every operator receives the random source explicitly; none of them keeps
# state between calls.


class FitnessEvaluator(ABC):
    """Scores a candidate; higher is better."""

    # True when every score is <= 0, e.g. a negated cost. Such scores give
    # roulette-wheel selection no wheel to spin.
    non_positive: bool = False

    @abstractmethod
    def evaluate(self, candidate: "Candidate") -> float:
        pass


class Selector(ABC):
    """Picks two parents from a population."""

    @abstractmethod
    def select(
        self, population: List["Candidate"], rng: random.Random
    ) -> Tuple["Candidate", "Candidate"]:
        pass


class Recombiner(ABC):
    """Combines two parents into two children."""

    @abstractmethod
    def crossover(
        self, parent1: "Candidate", parent2: "Candidate", rng: random.Random
    ) -> Tuple["Candidate", "Candidate"]:
        pass


class Mutator(ABC):
    """Perturbs the genes of a single candidate."""

    @abstractmethod
    def mutate(self, candidate: "Candidate", rng: random.Random) -> "Candidate":
        pass


# Constants

DEFAULT_FITNESS = 5000000.0
DEFAULT_POPULATION_SIZE = 50
DEFAULT_MUTATION_RATE = 0.1
DEFAULT_ELITISM_COUNT = 2
DEFAULT_TOURNAMENT_SIZE = 2
DEFAULT_STOP_FITNESS = 0.0
