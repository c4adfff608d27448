"""
Centralized configuration management for darwin.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from darwin.engine import EvolutionConfig, EvolutionEngine
from darwin.errors import ConfigurationError
from darwin.fitness import FitnessCallable, as_evaluator
from darwin.interfaces import (
    DEFAULT_ELITISM_COUNT,
    DEFAULT_MUTATION_RATE,
    DEFAULT_POPULATION_SIZE,
    DEFAULT_STOP_FITNESS,
    DEFAULT_TOURNAMENT_SIZE,
    FitnessEvaluator,
)
from darwin.registry import get_mutator, get_recombiner, get_selector
from darwin.selection import RouletteWheelSelection
from darwin_core.logging_config import parse_log_level

logger = logging.getLogger(__name__)

DEFAULT_STATE_DIR = ".darwin"


@dataclass
class EvolutionSettings:
    """Evolution algorithm settings."""

    population_size: int = DEFAULT_POPULATION_SIZE
    mutation_rate: float = DEFAULT_MUTATION_RATE
    elitism: bool = True
    elitism_count: int = DEFAULT_ELITISM_COUNT
    generations: int = 100
    stop_fitness: Optional[float] = DEFAULT_STOP_FITNESS
    seed: Optional[int] = None


@dataclass
class OperatorSettings:
    """Operator strategy names."""

    selection: str = "tournament"
    crossover: str = "single_point"
    mutation: str = "swap"
    tournament_size: int = DEFAULT_TOURNAMENT_SIZE


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    json_output: bool = False
    use_colors: bool = True
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration container."""

    evolution: EvolutionSettings = field(default_factory=EvolutionSettings)
    operators: OperatorSettings = field(default_factory=OperatorSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    state_dir: str = DEFAULT_STATE_DIR

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary.

        Raises:
            ConfigurationError: On unknown keys or wrongly typed values
        """
        if not isinstance(data, dict):
            raise ConfigurationError(["Configuration must be a JSON object"])
        state_dir = data.get("state_dir", DEFAULT_STATE_DIR)
        if not isinstance(state_dir, str):
            raise ConfigurationError(["state_dir must be str"])
        return cls(
            evolution=_load_section(EvolutionSettings, "evolution", data),
            operators=_load_section(OperatorSettings, "operators", data),
            logging=_load_section(LoggingSettings, "logging", data),
            state_dir=state_dir,
        )

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        if path is None:
            path = Path(self.state_dir) / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load config from file."""
        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError([f"{path}: {e}"]) from e
        return cls.from_dict(data)

    def engine_config(self) -> EvolutionConfig:
        return EvolutionConfig(
            population_size=self.evolution.population_size,
            mutation_rate=self.evolution.mutation_rate,
            elitism=self.evolution.elitism,
            elitism_count=self.evolution.elitism_count,
        )


def _load_section(settings_cls: type, name: str, data: Dict[str, Any]) -> Any:
    """Build one settings dataclass, checking values against its defaults."""
    values = data.get(name, {})
    if not isinstance(values, dict):
        raise ConfigurationError([f"Section '{name}' must be a JSON object"])
    try:
        settings = settings_cls(**values)
    except TypeError as e:
        raise ConfigurationError([f"Section '{name}': {e}"]) from e

    errors = []
    defaults = settings_cls()
    for f in fields(settings):
        value, default = getattr(settings, f.name), getattr(defaults, f.name)
        # Fields that default to None are optional and not type-checked
        if value is None or default is None:
            continue
        expected = type(default)
        if expected is float and type(value) is int:
            continue
        if type(value) is not expected:
            errors.append(
                f"{name}.{f.name} must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )
    if errors:
        raise ConfigurationError(errors)
    return settings


def get_config(
    config_path: Optional[Path] = None,
    state_dir: Optional[Path] = None,
) -> Config:
    """Get configuration, loading from file if available.

    Priority:
    1. Explicit config_path
    2. Config in state_dir
    3. Config in current directory
    4. Environment variables
    5. Defaults
    """
    paths_to_try = []

    if config_path:
        paths_to_try.append(config_path)
    if state_dir:
        paths_to_try.append(state_dir / "config.json")
    paths_to_try.extend(
        [
            Path(DEFAULT_STATE_DIR) / "config.json",
            Path("darwin.json"),
        ]
    )

    for path in paths_to_try:
        if path.exists():
            logger.debug(f"Loading configuration from {path}")
            config = Config.load(path)
            _apply_env_overrides(config)
            return config

    config = Config()
    _apply_env_overrides(config)
    return config


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _apply_env_overrides(config: Config) -> None:
    """Apply environment variable overrides to config."""
    env_mappings: Dict[str, tuple] = {
        "DARWIN_POPULATION_SIZE": ("evolution", "population_size", int),
        "DARWIN_MUTATION_RATE": ("evolution", "mutation_rate", float),
        "DARWIN_GENERATIONS": ("evolution", "generations", int),
        "DARWIN_SEED": ("evolution", "seed", int),
        "DARWIN_SELECTION": ("operators", "selection", str),
        "DARWIN_CROSSOVER": ("operators", "crossover", str),
        "DARWIN_MUTATION": ("operators", "mutation", str),
        "DARWIN_LOG_LEVEL": ("logging", "level", parse_log_level),
        "DARWIN_LOG_JSON": ("logging", "json_output", _parse_bool),
        "DARWIN_STATE_DIR": (None, "state_dir", str),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                converted = converter(value)  # type: ignore[operator]
            except (ValueError, TypeError):
                logger.warning(f"Ignoring invalid value for {env_var}: {value!r}")
                continue
            if section:
                setattr(getattr(config, section), key, converted)
            else:
                setattr(config, key, converted)


def build_engine(
    config: Config, fitness: Union[FitnessEvaluator, FitnessCallable]
) -> EvolutionEngine:
    """Assemble a validated engine from settings.

    Raises:
        ConfigurationError: If the settings are invalid, or roulette-wheel
            selection is paired with a fitness that is never positive
    """
    operators = config.operators
    evaluator = as_evaluator(fitness)
    selector = get_selector(
        operators.selection, tournament_size=operators.tournament_size
    )
    if isinstance(selector, RouletteWheelSelection) and evaluator.non_positive:
        raise ConfigurationError(
            [
                "Roulette-wheel selection needs non-negative fitness; "
                f"{type(evaluator).__name__} scores are never positive, "
                "use tournament selection"
            ]
        )
    return EvolutionEngine(
        fitness=evaluator,
        selector=selector,
        recombiner=get_recombiner(operators.crossover),
        mutator=get_mutator(operators.mutation),
        config=config.engine_config(),
        seed=config.evolution.seed,
    )
