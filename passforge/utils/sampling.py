"""
Random integer sampling primitives.
"""

from typing import List, Optional

from ..exceptions import InsufficientRangeError, InvalidRangeError
from .random_source import RandomSource, get_default_source


def random_in_range(min_value: int, max_value: int,
                    source: Optional[RandomSource] = None) -> int:
    """
    Draw one integer uniformly from the inclusive range [min_value, max_value].

    Args:
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        source: Random source to draw from (process default if omitted)

    Returns:
        An integer N with min_value <= N <= max_value

    Raises:
        InvalidRangeError: If min_value > max_value
    """
    if min_value > max_value:
        raise InvalidRangeError(f"Invalid range: min {min_value} > max {max_value}")

    if source is None:
        source = get_default_source()

    return source.randint(min_value, max_value)


def unique_randoms_in_range(quantity: int, min_value: int, max_value: int,
                            source: Optional[RandomSource] = None) -> List[int]:
    """
    Draw `quantity` pairwise distinct integers from [min_value, max_value].

    Values are taken from a shrinking pool of candidates, so every
    size-`quantity` subset is equally likely and the call always terminates.
    The result is in draw order: asking for the whole range yields a
    uniformly random permutation of it.

    Args:
        quantity: How many distinct values to draw
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        source: Random source to draw from (process default if omitted)

    Returns:
        List of `quantity` distinct integers in draw order

    Raises:
        InvalidRangeError: If quantity is negative
        InsufficientRangeError: If quantity exceeds the size of the range
    """
    if quantity < 0:
        raise InvalidRangeError(f"Quantity cannot be negative: {quantity}")

    if quantity == 0:
        return []

    range_size = max_value - min_value + 1
    if quantity > range_size:
        raise InsufficientRangeError(
            f"Cannot draw {quantity} unique values from [{min_value}, {max_value}]"
        )

    pool = list(range(min_value, max_value + 1))
    output = []

    for _ in range(quantity):
        idx = random_in_range(0, len(pool) - 1, source)
        output.append(pool.pop(idx))

    return output
