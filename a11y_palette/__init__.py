"""
a11y-palette: random background/text color pairs with a guaranteed WCAG contrast ratio.
"""
from .palette import (
    GeneratorOptions,
    GradientOptions,
    PaletteExhaustedError,
    PaletteResult,
    ThemeConfig,
    VariantResult,
    generate_palette,
)
from .config import load_config, merge_generator_options, merge_theme_config, options_from_config

__all__ = [
    "GeneratorOptions",
    "GradientOptions",
    "PaletteExhaustedError",
    "PaletteResult",
    "ThemeConfig",
    "VariantResult",
    "generate_palette",
    "load_config",
    "merge_generator_options",
    "merge_theme_config",
    "options_from_config",
]
