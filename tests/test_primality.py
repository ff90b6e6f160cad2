import random

import pytest

from natural_number import NaturalNumber
from primality import (
    MAX_WITNESS_TRIALS,
    generate_next_likely_prime,
    is_prime1,
    is_prime2,
    is_witness_to_compositeness,
)

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23]
SMALL_COMPOSITES = [4, 6, 8, 9, 15, 21, 25, 35, 49]


def slow_is_prime(n: int) -> bool:
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return n > 1


class TestWitness:
    """
    Tests for the single witness check.
    """

    def test_two_witnesses_fifteen(self):
        assert is_witness_to_compositeness(NaturalNumber(2), NaturalNumber(15)) is True

    def test_two_does_not_witness_thirteen(self):
        assert is_witness_to_compositeness(NaturalNumber(2), NaturalNumber(13)) is False

    def test_nontrivial_square_root_of_one(self):
        # 4^2 = 16 = 1 (mod 15)
        assert is_witness_to_compositeness(NaturalNumber(4), NaturalNumber(15)) is True

    @pytest.mark.parametrize("prime", [5, 7, 101, 7919])
    def test_no_witness_for_primes(self, prime):
        n = NaturalNumber(prime)
        for w in range(2, min(prime - 1, 60)):
            assert is_witness_to_compositeness(NaturalNumber(w), n) is False

    def test_arguments_are_unchanged(self):
        w, n = NaturalNumber(3), NaturalNumber(91)
        is_witness_to_compositeness(w, n)
        assert w == 3 and n == 91

    @pytest.mark.parametrize("w, n", [(2, 2), (1, 7), (6, 7), (7, 7)])
    def test_out_of_range_is_a_contract_violation(self, w, n):
        with pytest.raises(AssertionError):
            is_witness_to_compositeness(NaturalNumber(w), NaturalNumber(n))


class TestIsPrime:
    """
    Tests for the two primality tests.
    """

    @pytest.mark.parametrize("prime", SMALL_PRIMES)
    def test_known_primes(self, prime):
        assert is_prime1(NaturalNumber(prime)) is True
        assert is_prime2(NaturalNumber(prime), random.Random(prime)) is True

    @pytest.mark.parametrize("composite", SMALL_COMPOSITES)
    def test_known_composites(self, composite):
        assert is_prime1(NaturalNumber(composite)) is False
        assert is_prime2(NaturalNumber(composite), random.Random(composite)) is False

    def test_agrees_with_trial_division_below_2000(self):
        rng = random.Random(11)
        for value in range(2, 2000):
            assert is_prime2(NaturalNumber(value), rng) == slow_is_prime(value), value

    @pytest.mark.parametrize("prime", [2 ** 61 - 1, 2 ** 89 - 1, 2 ** 127 - 1])
    def test_large_primes(self, prime):
        assert is_prime1(NaturalNumber(prime)) is True
        assert is_prime2(NaturalNumber(prime), random.Random(0)) is True

    def test_large_semiprime(self):
        n = NaturalNumber((2 ** 61 - 1) * (2 ** 89 - 1))
        assert is_prime1(n) is False
        assert is_prime2(n, random.Random(0)) is False

    def test_composite_with_over_a_thousand_digits(self):
        # 10^1100 + 1 = (10^100)^11 + 1 is divisible by 10^100 + 1
        value = 10 ** 1100 + 1
        n = NaturalNumber(value)
        assert is_prime2(n, random.Random(6)) is False
        assert n == value

    @pytest.mark.parametrize("pseudoprime", [341, 561, 1105, 1729])
    def test_base_two_pseudoprimes_fool_is_prime1(self, pseudoprime):
        # 2^(n-1) = 1 (mod n) for these composites, so the single base-2 test passes them
        assert is_prime1(NaturalNumber(pseudoprime)) is True

    @pytest.mark.parametrize("carmichael", [561, 1105, 1729, 2465, 2821])
    def test_carmichael_numbers_caught_by_is_prime2(self, carmichael):
        rng = random.Random(carmichael)
        for _ in range(20):
            assert is_prime2(NaturalNumber(carmichael), rng) is False

    def test_argument_is_unchanged(self):
        n = NaturalNumber(7919)
        is_prime1(n)
        is_prime2(n, random.Random(0))
        assert n == 7919

    def test_trial_count(self):
        assert MAX_WITNESS_TRIALS == 50

    @pytest.mark.parametrize("value", [0, 1])
    def test_below_two_is_a_contract_violation(self, value):
        with pytest.raises(AssertionError):
            is_prime1(NaturalNumber(value))
        with pytest.raises(AssertionError):
            is_prime2(NaturalNumber(value))


class TestGenerateNextLikelyPrime:
    """
    Tests for the next likely prime search.
    """

    def test_fourteen_gives_seventeen(self):
        n = NaturalNumber(14)
        generate_next_likely_prime(n, random.Random(0))
        assert n == 17

    def test_prime_is_kept(self):
        n = NaturalNumber(13)
        assert generate_next_likely_prime(n, random.Random(0)) == 1
        assert n == 13

    @pytest.mark.parametrize("start, expected", [(2, 2), (4, 5), (24, 29), (90, 97), (1000, 1009), (7908, 7919)])
    def test_small_starts(self, start, expected):
        n = NaturalNumber(start)
        generate_next_likely_prime(n, random.Random(start))
        assert n == expected

    def test_result_is_never_smaller_and_passes_is_prime2(self):
        rng = random.Random(99)
        for _ in range(20):
            start = rng.randrange(2, 10 ** 30)
            n = NaturalNumber(start)
            generate_next_likely_prime(n, rng)
            assert n >= start
            assert is_prime2(n, rng) is True

    def test_one_is_a_contract_violation(self):
        with pytest.raises(AssertionError):
            generate_next_likely_prime(NaturalNumber(1))
