"""
One band's normal/inverted color pair for a seed, with optional gradient expansion.
"""
from dataclasses import replace

from ..color.convert import darken, interpolate_scale, lighten
from .schema import DEFAULT_THRESHOLD, Color, GradientOptions, ThemeConfig, VariantResult
from .selector import select_text
from .theme import build_theme

GRADIENT_SHIFT = 0.2


def gradient_stops(color: str, steps: int, direction: str, amount: float = GRADIENT_SHIFT) -> list[str]:
    """steps stops from color toward its lightened ("lighten") or darkened ("darken") shade."""
    if direction == "lighten":
        end = lighten(amount, color)
    elif direction == "darken":
        end = darken(amount, color)
    else:
        raise ValueError(f"direction must be 'lighten' or 'darken', got {direction!r}")
    return interpolate_scale([color, end], steps)


def generate_variant(
    seed: str,
    theme_config: ThemeConfig | None = None,
    use_inverse: bool = False,
    gradient: GradientOptions | None = None,
    threshold: float = DEFAULT_THRESHOLD,
) -> tuple[VariantResult, VariantResult]:
    """
    (normal, inverted) for seed. Text comes from the inverse scale when use_inverse.
    Both results have text=None when no scale color reaches threshold against the seed.
    """
    config = replace(theme_config or ThemeConfig(), base_color=seed)
    gradient = gradient or GradientOptions()
    built = build_theme(seed, config)
    bg = built.base
    candidates = built.theme.inverse if use_inverse else built.theme.colors
    text = select_text(bg, candidates, threshold)

    if text is None:
        return (
            VariantResult(bg=bg, text=None, theme=built.theme, raw=built.raw),
            VariantResult(bg=bg, text=None, theme=built.theme, raw=built.raw),
        )

    normal_bg: Color = bg
    inverted_bg: Color = text
    normal_text: Color = text
    inverted_text: Color = bg
    if gradient.bg:
        normal_bg = gradient_stops(bg, gradient.steps, "darken")
        inverted_bg = gradient_stops(text, gradient.steps, "lighten")
    if gradient.text:
        normal_text = gradient_stops(text, gradient.steps, "lighten")
        inverted_text = gradient_stops(bg, gradient.steps, "darken")
    return (
        VariantResult(bg=normal_bg, text=normal_text, theme=built.theme, raw=built.raw),
        VariantResult(bg=inverted_bg, text=inverted_text, theme=built.theme, raw=built.raw),
    )
