"""Integer helpers used by the dimension solvers."""
from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm on absolute values.

    ``gcd(a, 0)`` is ``|a|`` and ``gcd(0, 0)`` is 0.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, or 0 when either operand is 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def is_power_of_two(n: int) -> bool:
    """Return True if n is a positive integer with a single set bit."""
    if isinstance(n, float):
        if not n.is_integer():
            return False
        n = int(n)
    return n > 0 and (n & (n - 1)) == 0
