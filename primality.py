"""
Description: Witness-based primality tests over NaturalNumber, and search for the next likely prime.
Author: Thomas Dang
Date: 17-Oct-2026

Notes:
    - A "composite" answer is always correct; a "prime" answer may be wrong with small probability.
    - is_prime1 only tries the base 2, so it is fooled by base-2 pseudoprimes (e.g. 341 = 11 * 31). Use is_prime2 where that matters.
"""
from __future__ import annotations

from natural_number import NaturalNumber
from number_theory import UniformSource, is_even, power_mod, random_number, resolve_rng

# Number of random witnesses tried by is_prime2 before a number is reported prime
MAX_WITNESS_TRIALS: int = 50


def is_witness_to_compositeness(w: NaturalNumber, n: NaturalNumber) -> bool:
    """
    Report whether w is a "witness" that n is composite.

    w is a witness if either:
        1) w^2 mod n = 1, i.e. w is a square root of 1 other than +-1 (only possible when n is composite), or
        2) w^(n-1) mod n != 1, i.e. n fails the criterion for primality from Fermat's little theorem.

    Args:
        w (NaturalNumber): Witness candidate, 1 < w < n - 1. Left unchanged.
        n (NaturalNumber): The number being checked, n > 2. Left unchanged.

    Returns:
        bool: True iff w proves that n is composite.
    """
    assert n > 2, "Violation of: n > 2"
    assert w > 1, "Violation of: 1 < w"
    n_minus_one: NaturalNumber = NaturalNumber(n)
    n_minus_one.decrement()
    assert w < n_minus_one, "Violation of: w < n - 1"

    # 1st check: w^2 mod n
    w_squared: NaturalNumber = NaturalNumber(w)
    power_mod(w_squared, NaturalNumber(2), n)

    # 2nd check: w^(n-1) mod n
    w_fermat: NaturalNumber = NaturalNumber(w)
    power_mod(w_fermat, n_minus_one, n)

    return w_squared == 1 or w_fermat != 1


def is_prime1(n: NaturalNumber) -> bool:
    """
    Report whether n is a prime, using the single witness 2; may be wrong with "low" probability.

    Args:
        n (NaturalNumber): The number to be checked, n > 1. Left unchanged.

    Returns:
        bool: True means n is very likely prime, False means n is definitely composite.
    """
    assert n > 1, "Violation of: n > 1"
    # 2 and 3 are primes
    if n <= 3:
        return True
    # evens are composite
    if is_even(n):
        return False
    # odd n >= 5: simply check whether 2 is a witness that n is composite
    return not is_witness_to_compositeness(NaturalNumber(2), n)


def is_prime2(n: NaturalNumber, rng: UniformSource | None = None) -> bool:
    """
    Report whether n is a prime, using up to MAX_WITNESS_TRIALS random witnesses; may be wrong with "low" probability.

    In each trial a random witness candidate w in [2, n-2] (1 < w < n-1) is drawn and tested.
    The first witness found proves n composite. If none of the trials finds one, n is reported prime.

    Args:
        n (NaturalNumber): The number to be checked, n > 1. Left unchanged.
        rng (UniformSource | None, optional): Random source for the witness candidates. Defaults to a fresh random.Random().

    Returns:
        bool: True means n is very likely prime, False means n is definitely composite.
    """
    assert n > 1, "Violation of: n > 1"
    # 2 and 3 are primes
    if n <= 3:
        return True
    # evens are composite (this also covers 4, the only n > 3 where [2, n-2] is too small)
    if is_even(n):
        return False

    rng = resolve_rng(rng)

    # Candidates are drawn from [0, n-4] and shifted into [2, n-2]
    upper: NaturalNumber = NaturalNumber(n)
    for _ in range(4):
        upper.decrement()

    for _ in range(MAX_WITNESS_TRIALS):
        candidate: NaturalNumber = random_number(upper, rng)
        candidate.increment()
        candidate.increment()
        if is_witness_to_compositeness(candidate, n):
            return False

    # If passed all trials, n has high probability of being prime
    return True


def generate_next_likely_prime(n: NaturalNumber, rng: UniformSource | None = None) -> int:
    """
    Update n to a likely prime number at least as large as n.

    Even candidates are moved to the next odd number, odd ones advance by 2, until is_prime2 accepts one.

    Args:
        n (NaturalNumber): Minimum value of the likely prime, n > 1. Updated to the prime found.
        rng (UniformSource | None, optional): Random source for is_prime2. Defaults to a fresh random.Random().

    Returns:
        int: The number of candidates tested (1 if n was already a likely prime).
    """
    assert n > 1, "Violation of: n > 1"
    rng = resolve_rng(rng)

    candidates_tested: int = 1
    while not is_prime2(n, rng):
        if is_even(n):
            # Adding one makes it odd
            n.increment()
        else:
            # Adding two keeps it odd
            n.increment()
            n.increment()
        candidates_tested += 1
    return candidates_tested
