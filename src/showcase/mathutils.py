"""Integer arithmetic helpers."""

from .exceptions import NegativeInputError


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer.

    Computed with a loop over Python integers, so large inputs neither
    exhaust the stack nor lose precision.

    Raises:
        TypeError: If ``n`` is not an ``int`` (``bool`` is rejected too).
        NegativeInputError: If ``n`` is below zero.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"factorial() expects an int, got {type(n).__name__}")
    if n < 0:
        raise NegativeInputError(n)

    result = 1
    for i in range(2, n + 1):
        result *= i
    return result
