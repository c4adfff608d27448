"""
CLI interface for darwin.
Runs the built-in benchmark problems and manages configuration files.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from darwin.errors import DarwinError
from darwin.individual import random_population
from darwin.registry import available_operators
from darwin_core.config import DEFAULT_STATE_DIR, Config, build_engine, get_config
from darwin_core.logging_config import LOG_LEVELS, configure_logging, get_logger
from darwin_core.problems import get_problem, problem_names


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="darwin",
        description="Genetic algorithm engine for real-valued optimization",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Run a benchmark problem")
    run_parser.add_argument(
        "--problem",
        choices=problem_names(),
        default="target",
        help="Benchmark problem to optimize",
    )
    run_parser.add_argument("--config", type=Path, help="Config file path")
    run_parser.add_argument(
        "--state-dir",
        type=Path,
        default=None,
        help="State directory path",
    )
    run_parser.add_argument("--generations", "-g", type=int, help="Generation limit")
    run_parser.add_argument("--population-size", "-p", type=int)
    run_parser.add_argument("--mutation-rate", "-m", type=float)
    run_parser.add_argument("--selection", help="Selection strategy name")
    run_parser.add_argument("--crossover", help="Crossover strategy name")
    run_parser.add_argument("--mutation", help="Mutation strategy name")
    run_parser.add_argument("--seed", type=int, help="Random seed")
    run_parser.add_argument(
        "--no-elitism", action="store_true", help="Disable elitism"
    )
    run_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print every generation"
    )
    run_parser.add_argument(
        "--history",
        type=Path,
        help="Write per-generation stats (.csv or .json)",
    )
    run_parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override log level",
    )

    # Operators command
    subparsers.add_parser("operators", help="List available operator strategies")

    # Init command
    init_parser = subparsers.add_parser(
        "init", help="Write a default configuration file"
    )
    init_parser.add_argument(
        "--state-dir",
        type=Path,
        default=Path(DEFAULT_STATE_DIR),
        help="State directory path",
    )

    # Config command
    config_parser = subparsers.add_parser("config", help="Show configuration")
    config_parser.add_argument(
        "--state-dir",
        type=Path,
        default=Path(DEFAULT_STATE_DIR),
        help="State directory path",
    )

    return parser


def _apply_run_overrides(config: Config, args: argparse.Namespace) -> None:
    overrides: Dict[str, Any] = {
        "generations": args.generations,
        "population_size": args.population_size,
        "mutation_rate": args.mutation_rate,
        "seed": args.seed,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config.evolution, key, value)
    if args.no_elitism:
        config.evolution.elitism = False

    for key in ("selection", "crossover", "mutation"):
        value = getattr(args, key)
        if value is not None:
            setattr(config.operators, key, value)

    if args.log_level:
        config.logging.level = args.log_level


def cmd_run(args: argparse.Namespace) -> int:
    """Run a benchmark problem."""
    config = get_config(config_path=args.config, state_dir=args.state_dir)
    _apply_run_overrides(config, args)

    configure_logging(
        level=config.logging.level,
        json_output=config.logging.json_output,
        log_file=Path(config.logging.log_file) if config.logging.log_file else None,
        use_colors=config.logging.use_colors,
    )
    elog = get_logger("darwin_core.cli", problem=args.problem)

    problem = get_problem(args.problem)
    engine = build_engine(config, problem)
    engine.add_event_listener(
        "generation_completed",
        lambda data: elog.generation_complete(
            data["generation"],
            data["stats"].best_fitness,
            data["stats"].avg_fitness,
            int(data["stats"].duration_seconds * 1000),
        ),
    )

    population = random_population(
        config.evolution.population_size,
        problem.gene_length,
        problem.gene_pool,
        rng=engine.rng,
    )

    elog.evolution_started(config.to_dict())
    result = engine.run(
        population,
        config.evolution.generations,
        verbose=args.verbose,
        stop_fitness=config.evolution.stop_fitness,
    )
    elog.evolution_complete(
        result.generations_run,
        result.best.fitness,
        int(result.duration_seconds * 1000),
    )

    print(f"Problem: {args.problem}")
    print(f"Generations run: {result.generations_run}")
    print(f"Converged: {'yes' if result.converged else 'no'}")
    print(f"Best fitness: {result.best.fitness}")
    print(f"Best genes: {result.best.genes}")

    if args.history:
        if args.history.suffix == ".csv":
            result.history.export_to_csv(args.history)
        else:
            result.history.export_to_json(args.history)
        print(f"History written to {args.history}")

    return 0


def cmd_operators(args: argparse.Namespace) -> int:
    """List available operator strategies."""
    for family, names in available_operators().items():
        print(f"{family}: {', '.join(names)}")
    print(f"problems: {', '.join(problem_names())}")
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Write a default configuration file."""
    state_dir = args.state_dir
    config_file = state_dir / "config.json"

    if config_file.exists():
        print(f"Already initialized at {state_dir}")
        return 0

    config = Config(state_dir=str(state_dir))
    config.save(config_file)

    print(f"Initialized darwin at {state_dir}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Show the resolved configuration."""
    config = get_config(state_dir=args.state_dir)
    print(json.dumps(config.to_dict(), indent=2))
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "run": cmd_run,
        "operators": cmd_operators,
        "init": cmd_init,
        "config": cmd_config,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except DarwinError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
