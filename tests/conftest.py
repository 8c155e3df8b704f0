"""Shared test fixtures and configuration for seqfind tests."""

import random

import pytest


def is_even(x: int) -> bool:
    return x % 2 == 0


@pytest.fixture
def even():
    """Unary predicate used by the documented scenarios."""
    return is_even


@pytest.fixture
def mixed_numbers():
    return [1, 3, 4, 6, 9]


@pytest.fixture
def odd_numbers():
    return [1, 3, 5, 7, 9]


@pytest.fixture
def dna_alphabet():
    """DNA alphabet (ACGT)."""
    return "ACGT"


@pytest.fixture
def random_sequences(dna_alphabet):
    """Small deterministic haystacks over a tiny alphabet, so tokens repeat and overlap."""
    rng = random.Random(1234)
    alphabet = dna_alphabet[:2]
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, 24))) for _ in range(60)]
