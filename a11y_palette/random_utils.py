"""
Random sources for seed sampling. Default is the OS-backed SystemRandom; pass a seed for
reproducible runs (tests, scripts with --seed).
"""
import random
import secrets


def make_rng(seed: int | None = None) -> random.Random:
    """Seeded Random when seed is given, else a SystemRandom."""
    if seed is None:
        return secrets.SystemRandom()
    return random.Random(seed)


def randint_inclusive(low: int, high: int, rng: random.Random | None = None) -> int:
    """Uniform integer in [low, high], both ends included."""
    if low > high:
        raise ValueError(f"randint_inclusive: low {low} > high {high}")
    return (rng or secrets.SystemRandom()).randint(low, high)
