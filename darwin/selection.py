"""
Parent selection strategies for Darwin.
Both strategies favour higher fitness and return copies, never references
into the population.
"""

import logging
import random
from typing import List, Tuple

from darwin.errors import ConfigurationError
from darwin.individual import Candidate
from darwin.interfaces import DEFAULT_TOURNAMENT_SIZE, Selector

logger = logging.getLogger(__name__)


class RouletteWheelSelection(Selector):
    """
    Fitness-proportional selection.

    The wheel needs non-negative fitness with a positive sum. When the sum is
    zero or negative, as it always is for negated costs, each parent is drawn
    uniformly from the population instead and a warning is logged once per
    selector. Use tournament selection for non-positive fitness.
    """

    def __init__(self):
        self._warned_uniform = False

    def select(
        self, population: List[Candidate], rng: random.Random
    ) -> Tuple[Candidate, Candidate]:
        fitness_sum = sum(candidate.fitness for candidate in population)

        if fitness_sum <= 0.0:
            if not self._warned_uniform:
                logger.warning(
                    f"Fitness sum {fitness_sum} is not positive; roulette-wheel "
                    "selection needs non-negative fitness, selecting uniformly"
                )
                self._warned_uniform = True
            return (
                rng.choice(population).clone(),
                rng.choice(population).clone(),
            )

        return (
            self._spin(population, fitness_sum, rng).clone(),
            self._spin(population, fitness_sum, rng).clone(),
        )

    def _spin(
        self, population: List[Candidate], fitness_sum: float, rng: random.Random
    ) -> Candidate:
        remaining = rng.random() * fitness_sum
        for candidate in population:
            remaining -= candidate.fitness
            if remaining <= 0.0:
                return candidate
        # Rounding can leave a tiny positive remainder
        return population[-1]


class TournamentSelection(Selector):
    """
    Tournament selection with replacement.

    Each parent is the fittest of `tournament_size` contenders drawn at
    random; the earliest drawn contender wins ties.
    """

    def __init__(self, tournament_size: int = DEFAULT_TOURNAMENT_SIZE):
        if tournament_size < 1:
            raise ConfigurationError(
                [f"Tournament size must be at least 1, got {tournament_size}"]
            )
        self.tournament_size = tournament_size

    def select(
        self, population: List[Candidate], rng: random.Random
    ) -> Tuple[Candidate, Candidate]:
        return (
            self._tournament(population, rng).clone(),
            self._tournament(population, rng).clone(),
        )

    def _tournament(
        self, population: List[Candidate], rng: random.Random
    ) -> Candidate:
        winner = rng.choice(population)
        for _ in range(self.tournament_size - 1):
            contender = rng.choice(population)
            if contender.fitness > winner.fitness:
                winner = contender
        return winner
