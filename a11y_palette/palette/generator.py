"""
Palette generation by rejection sampling: per band, draw seeds until one yields a text color
that reaches the contrast threshold, then assemble the six variants.
"""
import logging
import random
from typing import Any

from .sampler import sample_band
from .schema import BAND_ORDER, GeneratorOptions, PaletteResult, ThemeConfig, VariantResult
from .variant import generate_variant

logger = logging.getLogger(__name__)

# Per-band sample cap; high enough that exhaustion means the sampling ranges are broken
DEFAULT_MAX_ATTEMPTS = 100_000
# Bands whose text is picked from the inverse (brightened) scale
INVERSE_BANDS = frozenset({"dark"})


class PaletteExhaustedError(RuntimeError):
    """No seed in max_attempts samples produced a contrast-valid pair for a band."""
    def __init__(self, band: str, attempts: int):
        super().__init__(f"No contrast-valid colors for band {band!r} after {attempts} attempts")
        self.band = band
        self.attempts = attempts


def generate_band(
    band: str,
    options: GeneratorOptions | None = None,
    *,
    theme_config: ThemeConfig | None = None,
    max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
    rng: random.Random | None = None,
) -> tuple[VariantResult, VariantResult, int]:
    """
    Sample seeds for band until the pair is valid. Returns (normal, inverted, attempts).
    max_attempts=None never gives up.
    """
    options = options or GeneratorOptions()
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1 or None, got {max_attempts}")
    use_inverse = band in INVERSE_BANDS
    attempt = 0
    while max_attempts is None or attempt < max_attempts:
        attempt += 1
        seed = sample_band(band, rng)
        normal, inverted = generate_variant(
            seed,
            theme_config,
            use_inverse=use_inverse,
            gradient=options.gradient,
            threshold=options.threshold,
        )
        if normal.is_valid and inverted.is_valid:
            if attempt > 1:
                logger.debug("%s: accepted %s after %s attempts", band, seed, attempt)
            return normal, inverted, attempt
        logger.debug("%s: rejected seed %s, no text color reaches %.2f:1 (attempt %s)", band, seed, options.threshold, attempt)
    logger.warning("%s: gave up after %s attempts", band, attempt)
    raise PaletteExhaustedError(band, attempt)


def generate_palette(
    options: GeneratorOptions | dict[str, Any] | None = None,
    *,
    theme_config: ThemeConfig | dict[str, Any] | None = None,
    max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
    rng: random.Random | None = None,
) -> PaletteResult:
    """
    Random pastel, light and dark pairs plus their inverted counterparts, each with
    contrast >= options.threshold between bg and text.
    options and theme_config accept partial dicts merged over the defaults.
    """
    from ..config import merge_generator_options, merge_theme_config

    options = merge_generator_options(options)
    theme_config = merge_theme_config(theme_config)

    pairs: dict[str, tuple[VariantResult, VariantResult]] = {}
    attempts: dict[str, int] = {}
    for band in BAND_ORDER:
        normal, inverted, n = generate_band(
            band,
            options,
            theme_config=theme_config,
            max_attempts=max_attempts,
            rng=rng,
        )
        pairs[band] = (normal, inverted)
        attempts[band] = n

    return PaletteResult(
        pastel=pairs["pastel"][0],
        light=pairs["light"][0],
        dark=pairs["dark"][0],
        inverted_pastel=pairs["pastel"][1],
        inverted_light=pairs["light"][1],
        inverted_dark=pairs["dark"][1],
        attempts=attempts,
    )
