"""Small numeric routines: Fibonacci, factorial, gcd, leap years and more."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable
from functools import lru_cache

_LOOKUP_SIZE = 100


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


@lru_cache(maxsize=None)
def _memo_fib(n: int) -> int:
    if n <= 1:
        return n
    return _memo_fib(n - 1) + _memo_fib(n - 2)


def fibonacci_memoized(n: int) -> int:
    """Return the n-th Fibonacci number using a lookup table of 100 entries."""
    if not 0 <= n < _LOOKUP_SIZE:
        raise ValueError(f"n must be in the range 0..{_LOOKUP_SIZE - 1}")
    return _memo_fib(n)


def fibonacci_tabulated(n: int) -> int:
    """Return the n-th Fibonacci number by filling a table bottom-up."""
    if n < 0:
        raise ValueError("n must not be negative")
    table = [0, 1]
    for _ in range(2, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]


def factorial(n: int) -> int:
    """Return n! for a positive integer n."""
    if n < 1:
        raise ValueError("factorial is defined here for n >= 1 only")
    return math.prod(range(1, n + 1))


def bit_xor(x: int, y: int) -> int:
    """Exclusive or built from the complement and and operators only."""
    return ~(~x & ~y) & ~(x & y)


def _c_remainder(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, as in truncating division."""
    result = abs(a) % abs(b)
    return -result if a < 0 else result


def gcd(a: int, b: int) -> int:
    """Highest common factor by Euclid's algorithm."""
    while a != 0:
        a, b = _c_remainder(b, a), a
    return b


def is_leap_year(year: int) -> bool:
    """True for Gregorian leap years."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def leap_years(start: int, end: int) -> list[int]:
    """Leap years between *start* and *end*, both included."""
    return [year for year in range(start, end + 1) if is_leap_year(year)]


def luhn_check(number: str) -> bool:
    """Validate a string of decimal digits with the Luhn checksum."""
    total = 0
    double = False
    for digit in reversed(number):
        if not "0" <= digit <= "9":
            return False
        value = ord(digit) - ord("0")
        if double:
            value *= 2
            if value > 9:
                value -= 9
        double = not double
        total += value
    return total % 10 == 0


def max_subarray_sum(values: Iterable[int]) -> int:
    """Kadane's algorithm; the empty subarray counts, so the result is never negative."""
    best = ending = 0
    for value in values:
        ending = max(ending + value, 0)
        best = max(best, ending)
    return best


def pointer_bits() -> int | None:
    """Width of a native pointer: 32 or 64, or None for any other width."""
    bits = struct.calcsize("P") * 8
    return bits if bits in (32, 64) else None