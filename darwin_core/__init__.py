"""
darwin_core - configuration, logging and command line for Darwin.
"""

from darwin import (
    Candidate,
    EvolutionConfig,
    EvolutionEngine,
    EvolutionResult,
    random_population,
)

from .config import Config, build_engine, get_config
from .logging_config import configure_logging, get_logger
from .problems import Sphere, TargetMatch, get_problem

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "random_population",
    "EvolutionEngine",
    "EvolutionConfig",
    "EvolutionResult",
    "Config",
    "get_config",
    "build_engine",
    "configure_logging",
    "get_logger",
    "TargetMatch",
    "Sphere",
    "get_problem",
]
