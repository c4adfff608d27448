"""
Logging setup for darwin runs.

Records may carry run context (generation, fitness, problem, ...) as
`extra` attributes. The JSON formatter copies those fields verbatim, the
console formatter appends them as a short bracketed suffix.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional, Tuple

from darwin.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONTEXT_FIELDS = ("generation", "fitness", "duration_ms", "event_type", "problem")

# Console rendering of context fields, in display order
CONSOLE_FIELDS = (
    ("generation", "gen={}"),
    ("fitness", "fitness={:.4f}"),
    ("duration_ms", "took={}ms"),
    ("problem", "problem={}"),
)

LOGGER_NAMES = ("darwin", "darwin_core")


def parse_log_level(level: str) -> str:
    """Normalize a level name, raising ValueError for unknown ones."""
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}"
        )
    return name


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class HumanFormatter(logging.Formatter):
    """Console format: `HH:MM:SS LEVEL logger: message [gen=.., fitness=..]`."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__(datefmt="%H:%M:%S")
        self.use_colors = use_colors

    def _level(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return record.levelname
        color = self.LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{record.levelname}{self.RESET}"

    @staticmethod
    def _context_suffix(record: logging.LogRecord) -> str:
        parts = [
            template.format(getattr(record, name))
            for name, template in CONSOLE_FIELDS
            if getattr(record, name, None) is not None
        ]
        return f" [{', '.join(parts)}]" if parts else ""

    def format(self, record: logging.LogRecord) -> str:
        line = (
            f"{self.formatTime(record, self.datefmt)} {self._level(record)} "
            f"{record.name}: {record.getMessage()}{self._context_suffix(record)}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class RunLogger(logging.LoggerAdapter):
    """
    Adapter that stamps every record with the context of one evolution run.

    Context set with `bind` is merged under any `extra` given per call.
    """

    def __init__(self, logger: logging.Logger, context: Optional[Dict] = None):
        super().__init__(logger, dict(context or {}))

    def bind(self, **context) -> None:
        self.extra.update(context)

    def unbind(self) -> None:
        self.extra.clear()

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs

    def evolution_started(self, settings: Dict[str, Any]) -> None:
        self.info(
            "Evolution run started",
            extra={"event_type": "evolution_started", "settings": settings},
        )

    def generation_complete(
        self, generation: int, best_fitness: float, avg_fitness: float, duration_ms: int
    ) -> None:
        self.debug(
            f"Generation {generation} complete (avg {avg_fitness:.4f})",
            extra={
                "event_type": "generation_complete",
                "generation": generation,
                "fitness": best_fitness,
                "duration_ms": duration_ms,
            },
        )

    def evolution_complete(
        self, generations: int, best_fitness: float, total_duration_ms: int
    ) -> None:
        self.info(
            f"Evolution complete after {generations} generations",
            extra={
                "event_type": "evolution_complete",
                "fitness": best_fitness,
                "duration_ms": total_duration_ms,
            },
        )


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True,
) -> None:
    """Install fresh handlers on the darwin and darwin_core loggers.

    Args:
        level: One of LOG_LEVELS, case-insensitive
        json_output: Use JSON format for console output
        log_file: Optional file path; file output is always JSON
        use_colors: Use colors in console output (ignored if json_output=True)

    Raises:
        ConfigurationError: If `level` is not a known level name
    """
    try:
        level_name = parse_log_level(level)
    except ValueError as e:
        raise ConfigurationError([str(e)]) from e

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        StructuredFormatter() if json_output else HumanFormatter(use_colors)
    )
    handlers = [console_handler]

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        handlers.append(file_handler)

    previous = set()
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        previous.update(logger.handlers)
        logger.handlers.clear()
        logger.setLevel(level_name)
        for handler in handlers:
            logger.addHandler(handler)

    for handler in previous:
        handler.close()


def get_logger(name: str, **context) -> RunLogger:
    """Return a RunLogger for `name`, optionally pre-bound with context."""
    return RunLogger(logging.getLogger(name), context)
