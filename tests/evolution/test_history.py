"""
Unit tests for per-generation statistics and export.
"""

import csv
import json

import pytest

from darwin.history import GenerationStats, RunHistory
from darwin.individual import Candidate


def make_stats(generation, best):
    return GenerationStats(
        generation=generation,
        best_fitness=best,
        avg_fitness=best - 1.0,
        worst_fitness=best - 2.0,
        best_genes=[1.0, 2.0],
        duration_seconds=0.01,
    )


class TestGenerationStats:
    def test_from_ranked_population(self):
        population = [
            Candidate([3.0], fitness=3.0),
            Candidate([2.0], fitness=2.0),
            Candidate([-2.0], fitness=-2.0),
        ]
        stats = GenerationStats.from_population(4, population)

        assert stats.generation == 4
        assert stats.best_fitness == 3.0
        assert stats.worst_fitness == -2.0
        assert stats.avg_fitness == pytest.approx(1.0)
        assert stats.best_genes == [3.0]

    def test_best_genes_are_copied(self):
        population = [Candidate([1.0], fitness=1.0)]
        stats = GenerationStats.from_population(1, population)
        population[0].genes[0] = 5.0

        assert stats.best_genes == [1.0]


class TestRunHistory:
    def setup_method(self):
        self.history = RunHistory()
        for generation, best in enumerate([-3.0, -1.0, -1.0, -2.0], start=1):
            self.history.record(make_stats(generation, best))

    def test_best(self):
        assert self.history.best().generation == 2
        assert RunHistory().best() is None

    def test_curve(self):
        assert self.history.best_fitness_curve() == [-3.0, -1.0, -1.0, -2.0]
        assert len(self.history) == 4

    def test_to_dict(self):
        data = self.history.to_dict()

        assert data["summary"]["generation_count"] == 4
        assert data["summary"]["best_fitness"] == -1.0
        assert data["summary"]["best_generation"] == 2
        assert data["generations"][0]["best_genes"] == [1.0, 2.0]

    def test_export_to_json(self, tmp_path):
        path = tmp_path / "out" / "history.json"
        self.history.export_to_json(path)

        with open(path) as f:
            data = json.load(f)
        assert len(data["generations"]) == 4

    def test_export_to_csv(self, tmp_path):
        path = tmp_path / "history.csv"
        self.history.export_to_csv(path)

        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 4
        assert rows[0]["generation"] == "1"
        assert rows[0]["best_genes"] == "1.0 2.0"
        assert float(rows[1]["best_fitness"]) == -1.0
