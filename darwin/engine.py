"""
Evolution Engine implementation for Darwin.
Central orchestrator for the generational loop: evaluate, rank, preserve
elites, reproduce, replace.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union

from darwin.errors import ConfigurationError
from darwin.fitness import FitnessCallable, as_evaluator
from darwin.history import GenerationStats, RunHistory
from darwin.individual import Candidate
from darwin.interfaces import (
    DEFAULT_ELITISM_COUNT,
    DEFAULT_MUTATION_RATE,
    DEFAULT_POPULATION_SIZE,
    DEFAULT_STOP_FITNESS,
    FitnessEvaluator,
    Mutator,
    Recombiner,
    Selector,
    ValidationResult,
)

logger = logging.getLogger(__name__)


@dataclass
class EvolutionConfig:
    """Configuration for evolution engine"""

    population_size: int = DEFAULT_POPULATION_SIZE
    mutation_rate: float = DEFAULT_MUTATION_RATE
    elitism: bool = True
    elitism_count: int = DEFAULT_ELITISM_COUNT

    def validate(self) -> ValidationResult:
        """Check every rule and report all violations at once."""
        errors = []
        if self.elitism and self.elitism_count > self.population_size:
            errors.append("Elitism count cannot be greater than population size")
        if self.elitism and self.elitism_count < 0:
            errors.append("Elitism count cannot be negative")
        if not 0.0 <= self.mutation_rate <= 1.0:
            errors.append("Mutation rate must be between 0.0 and 1.0")
        if self.population_size < 2:
            errors.append("Population size must be greater than 1")
        return ValidationResult(is_valid=not errors, errors=errors)


@dataclass
class EvolutionResult:
    """Result of a run"""

    generations_run: int
    best: Candidate
    converged: bool
    history: RunHistory
    duration_seconds: float
    timestamp: datetime = field(default_factory=datetime.now)


class EvolutionEngine:
    """
    Generational genetic algorithm over real-valued candidates.

    Higher fitness is better throughout: populations are ranked by
    descending fitness and index 0 is the best. The engine owns the
    population passed to `evolve`/`run` for the duration of the call and
    replaces its contents in place every generation.
    """

    def __init__(
        self,
        fitness: Union[FitnessEvaluator, FitnessCallable],
        selector: Selector,
        recombiner: Recombiner,
        mutator: Mutator,
        config: Optional[EvolutionConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.config = config or EvolutionConfig()
        validation = self.config.validate()
        if not validation.is_valid:
            raise ConfigurationError(validation.errors)

        self.fitness_evaluator = as_evaluator(fitness)
        self.selector = selector
        self.recombiner = recombiner
        self.mutator = mutator
        self.rng = rng if rng is not None else random.Random(seed)

        self.current_generation = 0
        self.event_listeners: List[Any] = []

    @property
    def population_size(self) -> int:
        return self.config.population_size

    @property
    def mutation_rate(self) -> float:
        return self.config.mutation_rate

    @property
    def elitism(self) -> bool:
        return self.config.elitism

    @property
    def elitism_count(self) -> int:
        return self.config.elitism_count

    def evaluate(self, population: List[Candidate]) -> None:
        """Score every candidate in place; order and genes are untouched."""
        for candidate in population:
            candidate.fitness = self.fitness_evaluator.evaluate(candidate)

    def evolve(self, population: List[Candidate]) -> GenerationStats:
        """
        Advance the population by one generation, in place.

        Steps:
        1. Evaluate fitness
        2. Rank by descending fitness (stable)
        3. Carry elites forward
        4. Select, cross over and mutate until the population is full
        5. Replace the old population

        Returns statistics of the ranked population the new one was bred from.
        """
        start_time = datetime.now()

        self.evaluate(population)
        population.sort(key=lambda c: c.fitness, reverse=True)

        next_generation: List[Candidate] = []
        if self.config.elitism:
            next_generation.extend(
                c.clone() for c in population[: self.config.elitism_count]
            )

        while len(next_generation) < self.config.population_size:
            parent1, parent2 = self.selector.select(population, self.rng)
            children = self.recombiner.crossover(parent1, parent2, self.rng)
            for child in children:
                if len(next_generation) >= self.config.population_size:
                    break
                if self.rng.random() < self.config.mutation_rate:
                    child = self.mutator.mutate(child, self.rng)
                next_generation.append(child)

        self.current_generation += 1
        stats = GenerationStats.from_population(
            self.current_generation,
            population,
            duration_seconds=(datetime.now() - start_time).total_seconds(),
        )

        population[:] = next_generation
        return stats

    def run(
        self,
        population: List[Candidate],
        generations: int,
        verbose: bool = False,
        stop_fitness: Optional[float] = DEFAULT_STOP_FITNESS,
    ) -> EvolutionResult:
        """
        Evolve for up to `generations` generations.

        Stops early the first generation whose best candidate (index 0 after
        evolving) has fitness exactly equal to `stop_fitness`. Pass
        `stop_fitness=None` to always run every generation.
        """
        start_time = datetime.now()
        history = RunHistory()
        converged = False
        generations_run = 0
        best: Optional[Candidate] = None

        logger.debug(
            f"Starting evolution: {generations} generations, "
            f"population {self.config.population_size}, "
            f"mutation rate {self.config.mutation_rate}"
        )
        self._emit_event(
            "evolution_started",
            {"generations": generations, "population_size": len(population)},
        )

        for generation in range(1, generations + 1):
            stats = self.evolve(population)
            history.record(stats)
            generations_run = generation

            best = population[0].clone()
            if verbose:
                print(format_progress(generation, best))

            logger.info(
                f"Generation {generation} - Best: {best.fitness}, "
                f"Avg: {stats.avg_fitness:.4f}",
                extra={"generation": generation, "fitness": best.fitness},
            )
            self._emit_event(
                "generation_completed",
                {"generation": generation, "best": best, "stats": stats},
            )

            if stop_fitness is not None and best.fitness == stop_fitness:
                converged = True
                logger.info(
                    f"Stop fitness {stop_fitness} reached, ending evolution",
                    extra={"generation": generation, "fitness": best.fitness},
                )
                break

        if best is None:
            best = population[0].clone()

        result = EvolutionResult(
            generations_run=generations_run,
            best=best,
            converged=converged,
            history=history,
            duration_seconds=(datetime.now() - start_time).total_seconds(),
        )

        logger.debug(
            f"Evolution complete after {generations_run} generations",
            extra={"fitness": best.fitness},
        )
        self._emit_event("evolution_completed", {"result": result})
        return result

    def add_event_listener(self, event_type: str, callback: Callable):
        """Add event listener for evolution events"""
        self.event_listeners.append((event_type, callback))

    def _emit_event(self, event_type: str, data: Dict[str, Any]):
        """Emit event to all registered listeners"""
        for listener_type, callback in self.event_listeners:
            if listener_type == event_type:
                try:
                    callback(data)
                except Exception as e:
                    logger.error(f"Event listener error: {e}")


def format_progress(generation: int, best: Candidate) -> str:
    """Human-readable progress line for one generation."""
    return (
        f"Gen: {generation}\tBest fitness: {best.fitness}\tBest genes: {best.genes}"
    )
