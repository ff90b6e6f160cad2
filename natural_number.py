"""
Description: Arbitrary-precision natural number with in-place (mutating) operations.
Author: Thomas Dang
Date: 17-Oct-2026

Notes:
    - Python ints are immutable, so every "update" below rebinds the wrapped value on the owning instance.
    - Preconditions are checked with assert ("Violation of: ..."), input parsing raises ValueError/TypeError.
"""
from __future__ import annotations

import functools

RADIX: int = 10


@functools.total_ordering
class NaturalNumber:
    """
    A non-negative integer of unbounded size whose operations update the instance in place.

    Callers own the instances they create. Helpers that need a scratch value make a fresh copy
    with `NaturalNumber(other)` instead of sharing a handle.
    """

    __slots__ = ("_value",)
    __hash__ = None  # mutable, so not hashable

    def __init__(self, value: int | str | NaturalNumber = 0) -> None:
        """
        Create a natural number from a non-negative int, a decimal string, or another NaturalNumber (copy).

        Args:
            value (int | str | NaturalNumber, optional): Initial value. Defaults to 0.

        Raises:
            ValueError: If the int is negative or the string is not a plain decimal literal.
            TypeError: If the value is of any other type.
        """
        if isinstance(value, NaturalNumber):
            self._value: int = value._value
        elif isinstance(value, bool):
            raise TypeError("NaturalNumber cannot be built from a bool")
        elif isinstance(value, int):
            if value < 0:
                raise ValueError(f"NaturalNumber must be non-negative, got {value}")
            self._value = value
        elif isinstance(value, str):
            digits: str = value.strip()
            #? str.isdigit() accepts things like superscripts, so check against the ASCII digits only
            if not digits or any(ch not in "0123456789" for ch in digits):
                raise ValueError(f"Not a decimal natural number: {value!r}")
            self._value = int(digits)
        else:
            raise TypeError(f"Cannot build a NaturalNumber from {type(value).__name__}")

    # ============================================================================ #
    #                                   Queries                                    #
    # ============================================================================ #
    def compare_to(self, other: NaturalNumber) -> int:
        """Return a negative number, zero, or a positive number as self is <, ==, > other."""
        return (self._value > other._value) - (self._value < other._value)

    def is_zero(self) -> bool:
        return self._value == 0

    def new_instance(self) -> NaturalNumber:
        """Return a fresh zero of the same type."""
        return type(self)()

    def to_int(self) -> int:
        return self._value

    # ============================================================================ #
    #                                   Updates                                    #
    # ============================================================================ #
    def increment(self) -> None:
        self._value += 1

    def decrement(self) -> None:
        assert self._value > 0, "Violation of: this > 0"
        self._value -= 1

    def multiply_by_10(self, k: int) -> None:
        """
        Append the digit k on the right: this = this * 10 + k.

        Args:
            k (int): The digit to append, 0 <= k < 10.
        """
        assert 0 <= k < RADIX, "Violation of: 0 <= k < 10"
        self._value = self._value * RADIX + k

    def divide_by_10(self) -> int:
        """
        Remove the lowest decimal digit: this = this / 10.

        Returns:
            int: The removed digit (this mod 10 before the call).
        """
        self._value, digit = divmod(self._value, RADIX)
        return digit

    def divide(self, divisor: NaturalNumber) -> NaturalNumber:
        """
        Integer-divide in place: this = this / divisor.

        Args:
            divisor (NaturalNumber): The divisor, must be > 0. Left unchanged.

        Returns:
            NaturalNumber: The remainder, as a new instance.
        """
        assert not divisor.is_zero(), "Violation of: divisor > 0"
        self._value, remainder = divmod(self._value, divisor._value)
        return NaturalNumber(remainder)

    def multiply(self, other: NaturalNumber) -> None:
        self._value *= other._value

    def add(self, other: NaturalNumber) -> None:
        self._value += other._value

    def subtract(self, other: NaturalNumber) -> None:
        assert other._value <= self._value, "Violation of: other <= this"
        self._value -= other._value

    def copy_from(self, other: NaturalNumber) -> None:
        """Set this to the value of other; other keeps its value."""
        self._value = other._value

    def transfer_from(self, other: NaturalNumber) -> None:
        """Move the value of other into this; other is left at zero."""
        self._value = other._value
        other._value = 0

    def clear(self) -> None:
        self._value = 0

    # ============================================================================ #
    #                              Dunder Methods                                  #
    # ============================================================================ #
    def __eq__(self, other: object) -> bool:
        if isinstance(other, NaturalNumber):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, NaturalNumber):
            return self._value < other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value < other
        return NotImplemented

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"NaturalNumber({self._value})"
