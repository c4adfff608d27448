"""
Per-generation statistics for Darwin runs.
Records how the best and average fitness move from one generation to the
next, with JSON and CSV export.
"""

import csv
import json
import logging
import statistics
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from darwin.individual import Candidate

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    """Summary of one ranked generation."""

    generation: int
    best_fitness: float
    avg_fitness: float
    worst_fitness: float
    best_genes: List[float]
    duration_seconds: float = 0.0

    @classmethod
    def from_population(
        cls,
        generation: int,
        population: List[Candidate],
        duration_seconds: float = 0.0,
    ) -> "GenerationStats":
        """Build stats from a population ranked best-first."""
        scores = [candidate.fitness for candidate in population]
        return cls(
            generation=generation,
            best_fitness=population[0].fitness,
            avg_fitness=statistics.fmean(scores),
            worst_fitness=min(scores),
            best_genes=list(population[0].genes),
            duration_seconds=duration_seconds,
        )


@dataclass
class RunHistory:
    """Ordered record of generation statistics for one run."""

    generations: List[GenerationStats] = field(default_factory=list)

    def record(self, stats: GenerationStats) -> None:
        self.generations.append(stats)

    def best(self) -> Optional[GenerationStats]:
        """Generation with the highest best fitness, earliest first on ties."""
        if not self.generations:
            return None
        return max(self.generations, key=lambda s: s.best_fitness)

    def best_fitness_curve(self) -> List[float]:
        return [s.best_fitness for s in self.generations]

    def __len__(self) -> int:
        return len(self.generations)

    def to_dict(self) -> Dict[str, Any]:
        best = self.best()
        return {
            "generations": [asdict(s) for s in self.generations],
            "summary": {
                "generation_count": len(self.generations),
                "best_fitness": best.best_fitness if best else None,
                "best_generation": best.generation if best else None,
            },
        }

    def export_to_json(self, file_path: Path) -> None:
        """Write the full history as JSON."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Exported {len(self.generations)} generations to {file_path}")

    def export_to_csv(self, file_path: Path) -> None:
        """Write one row per generation; genes are space separated."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        fieldnames = [
            "generation",
            "best_fitness",
            "avg_fitness",
            "worst_fitness",
            "duration_seconds",
            "best_genes",
        ]
        with open(file_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for s in self.generations:
                row = asdict(s)
                row["best_genes"] = " ".join(str(g) for g in s.best_genes)
                writer.writerow(row)
        logger.info(f"Exported {len(self.generations)} generations to {file_path}")
