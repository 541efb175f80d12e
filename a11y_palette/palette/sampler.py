"""
Random seed colors in three brightness bands.
"""
import random

from ..color.convert import hsl_to_hex
from ..random_utils import randint_inclusive

# band -> (hue, saturation, lightness) inclusive integer ranges
BANDS: dict[str, tuple[tuple[int, int], tuple[int, int], tuple[int, int]]] = {
    "light": ((0, 360), (50, 100), (45, 100)),
    "dark": ((0, 360), (0, 100), (0, 25)),
    "pastel": ((0, 360), (25, 100), (75, 95)),
}


def sample_hsl(band: str, rng: random.Random | None = None) -> tuple[int, int, int]:
    if band not in BANDS:
        raise ValueError(f"Unknown band {band!r}; expected one of {sorted(BANDS)}")
    (h_lo, h_hi), (s_lo, s_hi), (l_lo, l_hi) = BANDS[band]
    h = randint_inclusive(h_lo, h_hi, rng)
    s = randint_inclusive(s_lo, s_hi, rng)
    l = randint_inclusive(l_lo, l_hi, rng)
    return h, s, l


def sample_band(band: str, rng: random.Random | None = None) -> str:
    """Random #RRGGBB seed color for a band."""
    return hsl_to_hex(*sample_hsl(band, rng))
