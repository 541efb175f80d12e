"""
Color helpers used by the palette generator: conversions, WCAG contrast, adaptive scales.
"""
from .adaptive import build_adaptive_theme, build_ramp, target_ratio
from .contrast import contrast_ratio, luminances, relative_luminance
from .convert import (
    darken,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    interpolate_scale,
    lighten,
    normalize_hex,
    rgb_to_hex,
)

__all__ = [
    "build_adaptive_theme",
    "build_ramp",
    "target_ratio",
    "contrast_ratio",
    "luminances",
    "relative_luminance",
    "darken",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "interpolate_scale",
    "lighten",
    "normalize_hex",
    "rgb_to_hex",
]
