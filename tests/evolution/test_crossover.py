"""
Unit tests for crossover strategies.
"""

import random

import pytest

from darwin.crossover import (
    ArithmeticCrossover,
    SinglePointCrossover,
    TwoPointCrossover,
    UniformCrossover,
)
from darwin.individual import Candidate

ALL_CROSSOVERS = [
    SinglePointCrossover,
    TwoPointCrossover,
    UniformCrossover,
    ArithmeticCrossover,
]


@pytest.fixture
def parents():
    return (
        Candidate([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], fitness=1.5),
        Candidate([10.0, 20.0, 30.0, 40.0, 50.0, 60.0], fitness=2.5),
    )


@pytest.mark.parametrize("crossover_cls", ALL_CROSSOVERS)
def test_parents_are_not_modified(crossover_cls, parents):
    parent1, parent2 = parents
    rng = random.Random(7)

    for _ in range(20):
        crossover_cls().crossover(parent1, parent2, rng)

    assert parent1.genes == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert parent2.genes == [10.0, 20.0, 30.0, 40.0, 50.0, 60.0]


@pytest.mark.parametrize("crossover_cls", ALL_CROSSOVERS)
def test_children_are_fresh_and_length_preserving(crossover_cls, parents):
    parent1, parent2 = parents
    child1, child2 = crossover_cls().crossover(parent1, parent2, random.Random(3))

    assert len(child1.genes) == 6
    assert len(child2.genes) == 6
    assert child1 is not parent1 and child2 is not parent2
    assert child1.genes is not parent1.genes


@pytest.mark.parametrize("crossover_cls", ALL_CROSSOVERS)
def test_single_gene_parents(crossover_cls):
    child1, child2 = crossover_cls().crossover(
        Candidate([1.0]), Candidate([3.0]), random.Random(0)
    )
    assert len(child1.genes) == 1
    assert len(child2.genes) == 1


class TestSinglePointCrossover:
    def test_single_gene_always_swaps(self):
        parent1 = Candidate([1.0])
        parent2 = Candidate([3.0])
        rng = random.Random()

        for _ in range(10):
            child1, child2 = SinglePointCrossover().crossover(parent1, parent2, rng)
            assert child1.genes == [3.0], "Child 1 genes are incorrect"
            assert child2.genes == [1.0], "Child 2 genes are incorrect"

    def test_tail_is_swapped_at_cut_point(self, parents, mocker):
        parent1, parent2 = parents
        rng = random.Random()
        mocker.patch.object(rng, "randrange", return_value=4)

        child1, child2 = SinglePointCrossover().crossover(parent1, parent2, rng)

        assert child1.genes == [1.0, 2.0, 3.0, 4.0, 50.0, 60.0]
        assert child2.genes == [10.0, 20.0, 30.0, 40.0, 5.0, 6.0]

    def test_cut_at_zero_swaps_everything(self, parents, mocker):
        parent1, parent2 = parents
        rng = random.Random()
        mocker.patch.object(rng, "randrange", return_value=0)

        child1, child2 = SinglePointCrossover().crossover(parent1, parent2, rng)

        assert child1.genes == parent2.genes
        assert child2.genes == parent1.genes


class TestTwoPointCrossover:
    def test_middle_segment_is_swapped(self, parents, mocker):
        parent1, parent2 = parents
        rng = random.Random()
        mocker.patch.object(rng, "randrange", side_effect=[4, 1])

        child1, child2 = TwoPointCrossover().crossover(parent1, parent2, rng)

        assert child1.genes == [1.0, 20.0, 30.0, 40.0, 5.0, 6.0]
        assert child2.genes == [10.0, 2.0, 3.0, 4.0, 50.0, 60.0]

    def test_coinciding_points_copy_parents(self, parents, mocker):
        parent1, parent2 = parents
        rng = random.Random()
        mocker.patch.object(rng, "randrange", side_effect=[3, 3])

        child1, child2 = TwoPointCrossover().crossover(parent1, parent2, rng)

        assert child1.genes == parent1.genes
        assert child2.genes == parent2.genes


class TestUniformCrossover:
    def test_children_are_complementary(self, parents):
        parent1, parent2 = parents
        child1, child2 = UniformCrossover().crossover(
            parent1, parent2, random.Random(11)
        )

        for i in range(6):
            assert {child1.genes[i], child2.genes[i]} == {
                parent1.genes[i],
                parent2.genes[i],
            }

    def test_coin_flips_drive_swaps(self, parents, mocker):
        parent1, parent2 = parents
        rng = random.Random()
        mocker.patch.object(
            rng, "random", side_effect=[0.1, 0.9, 0.1, 0.9, 0.9, 0.9]
        )

        child1, _ = UniformCrossover().crossover(parent1, parent2, rng)

        assert child1.genes == [10.0, 2.0, 30.0, 4.0, 5.0, 6.0]


class TestArithmeticCrossover:
    def test_blend_with_fixed_alpha(self, mocker):
        rng = random.Random()
        mocker.patch.object(rng, "random", return_value=0.25)

        child1, child2 = ArithmeticCrossover().crossover(
            Candidate([0.0, 4.0]), Candidate([8.0, 0.0]), rng
        )

        assert child1.genes == pytest.approx([6.0, 1.0])
        assert child2.genes == pytest.approx([2.0, 3.0])

    def test_children_lie_between_parents(self, parents):
        parent1, parent2 = parents
        child1, child2 = ArithmeticCrossover().crossover(
            parent1, parent2, random.Random(5)
        )

        for i in range(6):
            low = min(parent1.genes[i], parent2.genes[i])
            high = max(parent1.genes[i], parent2.genes[i])
            assert low <= child1.genes[i] <= high
            assert low <= child2.genes[i] <= high
            assert child1.genes[i] + child2.genes[i] == pytest.approx(
                parent1.genes[i] + parent2.genes[i]
            )
