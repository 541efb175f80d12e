# Palette core: sampling, tone scales, contrast selection, variants, rejection-sampling loop

from .schema import (
    BAND_ORDER,
    FALLBACK_TEXT_INDEX,
    SCALE_RATIOS,
    GeneratorOptions,
    GradientOptions,
    PaletteResult,
    ThemeConfig,
    ThemeResult,
    ToneTheme,
    VariantResult,
)
from .sampler import BANDS, sample_band, sample_hsl
from .theme import build_theme, color_keys
from .selector import select_text, valid_contrast
from .variant import generate_variant, gradient_stops
from .generator import (
    DEFAULT_MAX_ATTEMPTS,
    PaletteExhaustedError,
    generate_band,
    generate_palette,
)

__all__ = [
    "BAND_ORDER",
    "FALLBACK_TEXT_INDEX",
    "SCALE_RATIOS",
    "GeneratorOptions",
    "GradientOptions",
    "PaletteResult",
    "ThemeConfig",
    "ThemeResult",
    "ToneTheme",
    "VariantResult",
    "BANDS",
    "sample_band",
    "sample_hsl",
    "build_theme",
    "color_keys",
    "select_text",
    "valid_contrast",
    "generate_variant",
    "gradient_stops",
    "DEFAULT_MAX_ATTEMPTS",
    "PaletteExhaustedError",
    "generate_band",
    "generate_palette",
]
