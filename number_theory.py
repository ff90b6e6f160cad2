"""
Description: Number-theoretic building blocks over NaturalNumber: uniform random sampling in [0, n], GCD, parity and modular exponentiation.
Author: Thomas Dang
Date: 17-Oct-2026

Notes:
    - Operations that take `n` as an in/out parameter restore it before returning unless documented as updating it.
    - Randomness comes from an explicit `rng` (anything with a `random()` method in [0, 1)); there is no module-level generator.
"""
from __future__ import annotations

import random
from typing import Protocol

from natural_number import NaturalNumber, RADIX


class UniformSource(Protocol):
    """Anything that can draw a float uniformly from [0, 1), e.g. random.Random or secrets.SystemRandom."""

    def random(self) -> float: ...


def resolve_rng(rng: UniformSource | None) -> UniformSource:
    """
    Return the given random source, or a freshly seeded random.Random() if none was given.

    Args:
        rng (UniformSource | None): Caller-supplied random source.

    Returns:
        UniformSource: The source to draw from for the rest of the operation.
    """
    return rng if rng is not None else random.Random()


def random_number(n: NaturalNumber, rng: UniformSource | None = None) -> NaturalNumber:
    """
    Return a random number uniformly distributed in the interval [0, n].

    The digits of n are peeled off and put back one level at a time, top digit first:
        1) At the top level, draw floor((d+1) * U) where d is the top digit.
        2) At each lower level, append a uniform random digit to the value from the level above.
           If the result overshoots n's prefix at this level, throw it away and draw this level
           again, starting over from the top digit.

    A value v <= n is produced by exactly one sequence of draws, so every v is equally likely.
    Each rejection happens with probability at most 9/10 (much less for large n), so the
    resampling terminates with probability 1 and needs O(1) retries on average.
    The levels are walked with a loop, so the digit count of n is not limited by the recursion limit.

    Args:
        n (NaturalNumber): Top end of the interval, must be > 0. Mutated while drawing, restored on return.
        rng (UniformSource | None, optional): Random source. Defaults to a fresh random.Random().

    Returns:
        NaturalNumber: A new number, uniformly distributed in [0, n].
    """
    assert not n.is_zero(), "Violation of: n > 0"
    rng = resolve_rng(rng)

    # Peel every digit off n (lowest first), then put them back top first.
    # prefixes[k] is n's top k+1 digits, the bound at level k.
    digits: list[int] = []
    while not n.is_zero():
        digits.append(n.divide_by_10())
    digits.reverse()
    prefixes: list[NaturalNumber] = []
    for digit in digits:
        n.multiply_by_10(digit)
        prefixes.append(NaturalNumber(n))

    top: int = digits[0]
    # Top level: uniform in [0, top]
    result: NaturalNumber = NaturalNumber(int((top + 1) * rng.random()))
    level: int = 0
    while level < len(digits) - 1:
        level += 1
        # Uniform last digit in [0, 9]
        result.multiply_by_10(int(RADIX * rng.random()))
        if result > prefixes[level]:
            #? Out of range for this level: draw a fresh value for it, from the top digit down
            result = NaturalNumber(int((top + 1) * rng.random()))
            level = 0
    return result


def reduce_to_gcd(n: NaturalNumber, m: NaturalNumber) -> None:
    """
    Replace n with the greatest common divisor of n and m (Euclid's algorithm). m is cleared.

    Each step moves m into n and the remainder into m, so the remainders strictly decrease
    and the loop ends after O(log(min(n, m))) divisions.

    Args:
        n (NaturalNumber): One number; updated to gcd(#n, #m).
        m (NaturalNumber): The other number; left at zero.
    """
    while not m.is_zero():
        remainder: NaturalNumber = n.divide(m)
        n.transfer_from(m)
        m.transfer_from(remainder)


def is_even(n: NaturalNumber) -> bool:
    """
    Report whether n is even, by looking at its last decimal digit. n is left unchanged.

    Args:
        n (NaturalNumber): The number to be checked.

    Returns:
        bool: True iff n mod 2 = 0 (zero is even).
    """
    last_digit: int = n.divide_by_10()
    n.multiply_by_10(last_digit)
    return last_digit % 2 == 0


def power_mod(n: NaturalNumber, p: NaturalNumber, m: NaturalNumber) -> None:
    """
    Update n to its p-th power modulo m, by repeated squaring.

    The exponent is halved down to zero first, remembering whether each halving had a remainder
    (these are exactly the frames the recursive definition would push):
        - p = 0        -> n = 1
        - p even       -> n = (n^(p/2))^2 mod m
        - p odd        -> n = (n^(p/2))^2 * n mod m
    The stack is then unwound from the most significant bit, reducing mod m after every product
    so intermediate values stay below m^2.

    Args:
        n (NaturalNumber): The base; updated to #n^p mod m.
        p (NaturalNumber): The exponent. Consumed while halving, restored before returning.
        m (NaturalNumber): The modulus, must be > 1.
    """
    assert m > 1, "Violation of: m > 1"

    p_original: NaturalNumber = NaturalNumber(p)
    two: NaturalNumber = NaturalNumber(2)

    # Original base, reduced once so every factor is < m
    base: NaturalNumber = NaturalNumber(n).divide(m)

    # Halve p down to zero; halvings[i] is True when the i-th halving had remainder 1
    halvings: list[bool] = []
    while not p.is_zero():
        halvings.append(not p.divide(two).is_zero())

    # p = 0 -> n = 1
    n.clear()
    n.increment()

    for is_odd in reversed(halvings):
        # Square
        n.multiply(NaturalNumber(n))
        n.transfer_from(n.divide(m))
        # One extra factor of the original base for odd exponents
        if is_odd:
            n.multiply(base)
            n.transfer_from(n.divide(m))

    # Restore the exponent
    p.transfer_from(p_original)
