import logging
import math
from decimal import ROUND_HALF_UP, Decimal

logger = logging.getLogger(__name__)

# sin() is unreliable around these seeds, as are exact multiples of pi
UNSTABLE_SEEDS = frozenset({10000})


def seeded_random(seed: float) -> float:
    """
    Seedable random function for reproducible, yet randomized, stub data.

    Returns the fractional part of ``sin(seed) * 10000``, which is always
    in [0, 1). Avoid 10000 and multiples of pi as seeds. Seeds that do not
    fit in a float raise OverflowError and infinite seeds raise ValueError,
    both straight from ``math.sin``.
    """
    if seed in UNSTABLE_SEEDS:
        logger.warning(f"Seed {seed} is known to produce unstable values")

    x = math.sin(seed) * 10000
    return x - math.floor(x)


def scale_factor(seed: float | None = None) -> float:
    """Scale applied to numeric stub fields: 1 without a seed."""
    if seed is None:
        return 1
    return seeded_random(seed)


def to_fixed(value: float, digits: int = 2) -> str:
    """
    Format a number with a fixed count of decimals.

    Rounds the exact binary value of ``value``, ties going to the larger
    result, so the strings match JavaScript's ``toFixed``.
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
