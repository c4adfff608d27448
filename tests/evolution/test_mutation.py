"""
Unit tests for mutation strategies.
"""

import random

import pytest

from darwin.individual import Candidate
from darwin.mutation import InversionMutation, ScrambleMutation, SwapMutation

ALL_MUTATIONS = [SwapMutation, ScrambleMutation, InversionMutation]


@pytest.fixture
def candidate():
    return Candidate([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], fitness=3.0)


@pytest.mark.parametrize("mutation_cls", ALL_MUTATIONS)
def test_input_is_unchanged(mutation_cls, candidate):
    rng = random.Random(21)
    for _ in range(20):
        mutant = mutation_cls().mutate(candidate, rng)
        assert mutant is not candidate

    assert candidate.genes == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert candidate.fitness == 3.0


@pytest.mark.parametrize("mutation_cls", ALL_MUTATIONS)
def test_mutants_are_permutations(mutation_cls, candidate):
    mutant = mutation_cls().mutate(candidate, random.Random(8))
    assert sorted(mutant.genes) == sorted(candidate.genes)


@pytest.mark.parametrize("mutation_cls", ALL_MUTATIONS)
def test_single_gene_candidate(mutation_cls):
    mutant = mutation_cls().mutate(Candidate([4.0]), random.Random(0))
    assert mutant.genes == [4.0]


@pytest.mark.parametrize("mutation_cls", ALL_MUTATIONS)
def test_mutating_the_clone_leaves_the_original(mutation_cls, candidate):
    duplicate = candidate.clone()
    mutant = mutation_cls().mutate(duplicate, random.Random(2))
    mutant.genes[0] = -1.0

    assert candidate.genes == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


class TestSwapMutation:
    def test_swaps_two_positions(self, candidate, mocker):
        rng = random.Random()
        mocker.patch.object(rng, "randrange", side_effect=[0, 5])

        mutant = SwapMutation().mutate(candidate, rng)
        assert mutant.genes == [6.0, 2.0, 3.0, 4.0, 5.0, 1.0]

    def test_same_position_is_a_no_op(self, candidate, mocker):
        rng = random.Random()
        mocker.patch.object(rng, "randrange", side_effect=[2, 2])

        mutant = SwapMutation().mutate(candidate, rng)
        assert mutant.genes == candidate.genes


class TestScrambleMutation:
    def test_only_the_span_is_shuffled(self, candidate, mocker):
        rng = random.Random(17)
        mocker.patch.object(rng, "randrange", side_effect=[4, 1])

        mutant = ScrambleMutation().mutate(candidate, rng)

        assert mutant.genes[0] == 1.0
        assert mutant.genes[4:] == [5.0, 6.0]
        assert sorted(mutant.genes[1:4]) == [2.0, 3.0, 4.0]

    def test_uses_the_given_rng(self, candidate):
        first = ScrambleMutation().mutate(candidate, random.Random(5))
        second = ScrambleMutation().mutate(candidate, random.Random(5))
        assert first.genes == second.genes


class TestInversionMutation:
    def test_reverses_the_span(self, candidate, mocker):
        rng = random.Random()
        mocker.patch.object(rng, "randrange", side_effect=[5, 1])

        mutant = InversionMutation().mutate(candidate, rng)
        assert mutant.genes == [1.0, 5.0, 4.0, 3.0, 2.0, 6.0]

    def test_end_index_is_exclusive(self, candidate, mocker):
        rng = random.Random()
        mocker.patch.object(rng, "randrange", side_effect=[0, 5])

        mutant = InversionMutation().mutate(candidate, rng)
        assert mutant.genes == [5.0, 4.0, 3.0, 2.0, 1.0, 6.0]
