"""
Name-based lookup of the built-in operator strategies.
"""

from typing import Any, Callable, Dict, List

from darwin.crossover import (
    ArithmeticCrossover,
    SinglePointCrossover,
    TwoPointCrossover,
    UniformCrossover,
)
from darwin.errors import UnknownOperatorError
from darwin.interfaces import (
    DEFAULT_TOURNAMENT_SIZE,
    CrossoverType,
    MutationType,
    Mutator,
    Recombiner,
    SelectionMethod,
    Selector,
)
from darwin.mutation import InversionMutation, ScrambleMutation, SwapMutation
from darwin.selection import RouletteWheelSelection, TournamentSelection

SELECTORS: Dict[str, Callable[..., Selector]] = {
    SelectionMethod.ROULETTE.value: RouletteWheelSelection,
    SelectionMethod.TOURNAMENT.value: TournamentSelection,
}

RECOMBINERS: Dict[str, Callable[..., Recombiner]] = {
    CrossoverType.SINGLE_POINT.value: SinglePointCrossover,
    CrossoverType.TWO_POINT.value: TwoPointCrossover,
    CrossoverType.UNIFORM.value: UniformCrossover,
    CrossoverType.ARITHMETIC.value: ArithmeticCrossover,
}

MUTATORS: Dict[str, Callable[..., Mutator]] = {
    MutationType.SWAP.value: SwapMutation,
    MutationType.SCRAMBLE.value: ScrambleMutation,
    MutationType.INVERSION.value: InversionMutation,
}


def _lookup(family: str, table: Dict[str, Callable[..., Any]], name: str):
    key = name.strip().lower().replace("-", "_")
    if key not in table:
        raise UnknownOperatorError(family, name, sorted(table))
    return table[key]


def get_selector(
    name: str, tournament_size: int = DEFAULT_TOURNAMENT_SIZE
) -> Selector:
    """Build a selection strategy by name."""
    factory = _lookup("selection", SELECTORS, name)
    if factory is TournamentSelection:
        return TournamentSelection(tournament_size=tournament_size)
    return factory()


def get_recombiner(name: str) -> Recombiner:
    """Build a crossover strategy by name."""
    return _lookup("crossover", RECOMBINERS, name)()


def get_mutator(name: str) -> Mutator:
    """Build a mutation strategy by name."""
    return _lookup("mutation", MUTATORS, name)()


def available_operators() -> Dict[str, List[str]]:
    return {
        "selection": sorted(SELECTORS),
        "crossover": sorted(RECOMBINERS),
        "mutation": sorted(MUTATORS),
    }
