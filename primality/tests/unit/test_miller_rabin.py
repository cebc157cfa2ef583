"""
Unit Tests for the Miller-Rabin Test

Tests base cases, decomposition, witness handling and the caller-owned
random source.
"""

import logging
import random

import pytest

from primality.miller_rabin import decompose, is_probable_prime

SMALL_PRIMES = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
]
CARMICHAEL_NUMBERS = [561, 1105, 1729, 2465, 2821, 6601, 8911]


class CountingRandom(random.Random):
    """Seeded random source that counts randbytes calls."""

    def __init__(self, seed):
        super().__init__(seed)
        self.draws = 0

    def randbytes(self, n):
        self.draws += 1
        return super().randbytes(n)


class TestDecompose:
    """Test n - 1 = 2^s * q factoring."""

    @pytest.mark.parametrize("n,expected", [
        (3, (1, 1)), (5, (2, 1)), (7, (1, 3)), (13, (2, 3)), (561, (4, 35)), (97, (5, 3)),
    ])
    def test_known_decompositions(self, n, expected):
        assert decompose(n) == expected

    @pytest.mark.parametrize("n", [3632514097, 2**89 - 1, 10**30 + 57, 2**64 + 1])
    def test_decomposition_property(self, n):
        s, q = decompose(n)
        assert q % 2 == 1
        assert 2**s * q == n - 1

    def test_rejects_small_n(self):
        with pytest.raises(ValueError):
            decompose(1)


class TestMillerRabin:
    """Test the probabilistic primality check."""

    @pytest.mark.parametrize("n", [1, 0, -1, -3, -(10**20)])
    def test_non_positive_and_one(self, rng, n):
        assert is_probable_prime(n, 10, rng) is False

    @pytest.mark.parametrize("n", SMALL_PRIMES)
    def test_small_primes(self, rng, n):
        assert is_probable_prime(n, 10, rng) is True

    @pytest.mark.parametrize("n", [4, 6, 8, 9, 15, 100])
    def test_small_composites(self, rng, n):
        assert is_probable_prime(n, 10, rng) is False

    @pytest.mark.parametrize("n", CARMICHAEL_NUMBERS)
    def test_carmichael_numbers(self, rng, n):
        """Fermat pseudoprimes to every coprime base are still caught."""
        assert is_probable_prime(n, 20, rng) is False

    def test_benchmark_number_is_composite(self, rng):
        # 3632514097 = 6733 * 539509
        assert is_probable_prime(3632514097, 10, rng) is False

    def test_benchmark_composite(self, rng):
        assert is_probable_prime(3632514099, 10, rng) is False

    def test_large_primes(self, rng):
        """32-bit, Mersenne and 256-bit primes are never rejected."""
        primes = [
            2147483647,
            4294967291,
            2**61 - 1,
            2**89 - 1,
            2**127 - 1,
            79422449460098942399106282402512198969536520971550757303162642879618420356623,
        ]
        for p in primes:
            assert is_probable_prime(p, 10, rng) is True

    def test_large_composites(self, rng):
        assert is_probable_prime((2**61 - 1) * (2**89 - 1), 10, rng) is False
        assert is_probable_prime((2**127 - 1) ** 2, 10, rng) is False
        assert is_probable_prime(2**128 + 1, 10, rng) is False

    def test_primes_always_pass(self):
        """No false negatives regardless of which witnesses are drawn."""
        for seed in range(25):
            assert is_probable_prime(4294967291, 5, random.Random(seed)) is True

    def test_caller_rng_drives_witnesses(self):
        source = CountingRandom(3)
        assert is_probable_prime(4294967291, 10, source) is True
        assert source.draws >= 10

    def test_default_rng(self):
        assert is_probable_prime(4294967291, 10) is True
        assert is_probable_prime(3632514097, 10) is False
        assert is_probable_prime(3632514099, 10) is False

    def test_small_bases_skip_sampling(self):
        source = CountingRandom(1)
        assert is_probable_prime(3, 10, source) is True
        assert is_probable_prime(1, 10, source) is False
        assert source.draws == 0

    def test_zero_witnesses(self, rng, caplog):
        """k == 0 runs no rounds, so any n > 3 is reported prime."""
        with caplog.at_level(logging.WARNING, logger="primality.miller_rabin"):
            assert is_probable_prime(100, 0, rng) is True
            assert is_probable_prime(561, 0, rng) is True
        assert "k=0" in caplog.text

    def test_zero_witnesses_base_cases(self, rng):
        assert is_probable_prime(1, 0, rng) is False
        assert is_probable_prime(2, 0, rng) is True

    def test_negative_witness_count(self, rng):
        with pytest.raises(ValueError, match="k must be non-negative"):
            is_probable_prime(97, -1, rng)

    def test_type_validation(self, rng):
        with pytest.raises(TypeError, match="n must be an int"):
            is_probable_prime(97.0, 10, rng)
        with pytest.raises(TypeError, match="k must be an int"):
            is_probable_prime(97, 2.5, rng)
