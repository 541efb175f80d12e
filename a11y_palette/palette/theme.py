"""
Build light and inverse tone scales for a seed color using the adaptive theme engine.
"""
from typing import Any

from ..color.adaptive import build_adaptive_theme
from ..color.convert import darken, lighten, normalize_hex
from .schema import SCALE_RATIOS, ThemeConfig, ThemeResult, ToneTheme

BASE_SCALE_KEY = "#FFFFFF"
KEY_SHIFT = 0.3


def color_keys(seed: str) -> list[str]:
    """Lightened, original and darkened anchors for the color ramp, uppercase #RRGGBB."""
    return [normalize_hex(c) for c in (lighten(KEY_SHIFT, seed), seed, darken(KEY_SHIFT, seed))]


def palette_spec(seed: str, config: ThemeConfig) -> dict[str, Any]:
    return {
        "base_scale": "base",
        "color_scales": [
            {
                "name": "base",
                "color_keys": [BASE_SCALE_KEY],
                "colorspace": "RGB",
                "ratios": [config.base_ratio],
            },
            {
                "name": "color",
                "color_keys": color_keys(seed),
                "colorspace": "RGB",
                "ratios": list(SCALE_RATIOS),
            },
        ],
    }


def theme_values(entries: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten the values of the `color` scale entries."""
    return [v for entry in entries if entry.get("name") == "color" for v in entry["values"]]


def build_theme(seed: str, config: ThemeConfig | None = None) -> ThemeResult:
    """
    Tone scales for seed: `colors` at config.light_brightness and `inverse` at
    (config.dark_brightness, config.dark_contrast). Engine errors propagate.
    """
    config = config or ThemeConfig()
    theme = build_adaptive_theme(palette_spec(seed, config))
    values = theme_values(theme(config.light_brightness))
    inverse = theme_values(theme(config.dark_brightness, config.dark_contrast))
    return ThemeResult(
        base=config.base_color,
        theme=ToneTheme(
            colors=[v["value"] for v in values],
            inverse=[v["value"] for v in inverse],
        ),
        raw={"values": values, "inverse": inverse},
    )
