"""Frequency generation for newly registered users."""

import random

# Frequencies are drawn in thousandths so the formatted value never rounds up
# to the exclusive upper bound.
FREQUENCY_MIN_MILLIS = 100_000
FREQUENCY_MAX_MILLIS = 1_000_000


def generate_frequency(rng: random.Random) -> str:
    """Return a uniform frequency in [100.000, 1000.000) with three decimals."""
    millis = rng.randrange(FREQUENCY_MIN_MILLIS, FREQUENCY_MAX_MILLIS)
    whole, fraction = divmod(millis, 1000)
    return f"{whole}.{fraction:03d}"
