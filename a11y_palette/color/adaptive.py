"""
Adaptive theme engine: contrast-targeted tonal scales against a brightness-adjusted background.

A palette spec names a base scale and a list of color scales. Each scale is a dense RGB ramp
white -> color keys (lightest first) -> black. Calling the built theme with a brightness picks the
background from the base ramp, then walks each color ramp to find the swatch nearest each target
contrast ratio on the side of the ramp away from the background.
"""
from typing import Any, Callable

import numpy as np

from .contrast import contrast_of_luminance, luminance_of_rgb
from .convert import hex_to_hsl, hex_to_rgb, normalize_hex, rgb_to_hex

# Number of swatches per ramp; enough that adjacent swatches differ by < 0.01 contrast
SWATCHES = 3000
SUPPORTED_COLORSPACES = ("RGB",)

ThemeFn = Callable[..., list[dict[str, Any]]]


def _ramp_anchors(color_keys: list[str]) -> tuple[np.ndarray, np.ndarray]:
    """Anchor positions (0 = white, 1 = black) and RGB rows for a set of keys."""
    keys = sorted(dict.fromkeys(normalize_hex(k) for k in color_keys), key=lambda c: hex_to_hsl(c)[2], reverse=True)
    colors = ["#FFFFFF", *keys, "#000000"]
    positions = [0.0] + [1.0 - hex_to_hsl(k)[2] / 100.0 for k in keys] + [1.0]
    return np.array(positions), np.array([hex_to_rgb(c) for c in colors], dtype=np.float64)


def _sample_ramp(positions: np.ndarray, anchors: np.ndarray, at: np.ndarray) -> np.ndarray:
    rows = np.column_stack([np.interp(at, positions, anchors[:, i]) for i in range(3)])
    return np.clip(np.rint(rows), 0, 255)


def build_ramp(color_keys: list[str], swatches: int = SWATCHES) -> np.ndarray:
    """(swatches, 3) RGB array from white through the keys to black."""
    positions, anchors = _ramp_anchors(color_keys)
    return _sample_ramp(positions, anchors, np.linspace(0.0, 1.0, swatches))


def target_ratio(ratio: float, contrast: float = 1.0) -> float:
    """Scale a nominal ratio by the theme contrast multiplier (ratios <= 1 are left alone)."""
    if ratio <= 1:
        return float(ratio)
    return (ratio - 1.0) * contrast + 1.0


def _pick_swatch(lums: np.ndarray, bg_lum: float, dark_background: bool, target: float) -> tuple[int, float]:
    contrasts = contrast_of_luminance(lums, bg_lum)
    side = lums >= bg_lum if dark_background else lums <= bg_lum
    if not side.any():
        side = np.ones_like(lums, dtype=bool)
    eligible = side & (contrasts >= target)
    if eligible.any():
        idx = int(np.where(eligible, contrasts, np.inf).argmin())
    else:
        # Target out of reach: take the strongest swatch on the correct side
        idx = int(np.where(side, contrasts, -np.inf).argmax())
    return idx, float(contrasts[idx])


def _validate_spec(palette_spec: dict[str, Any]) -> tuple[str, list[dict[str, Any]]]:
    base_name = palette_spec.get("base_scale")
    scales = palette_spec.get("color_scales") or []
    if not scales:
        raise ValueError("Adaptive theme needs at least one color scale")
    names = [s.get("name") for s in scales]
    if base_name not in names:
        raise ValueError(f"Base scale {base_name!r} not found in color scales {names}")
    for scale in scales:
        if not scale.get("color_keys"):
            raise ValueError(f"Color scale {scale.get('name')!r} has no color keys")
        if not scale.get("ratios"):
            raise ValueError(f"Color scale {scale.get('name')!r} has no ratios")
        space = str(scale.get("colorspace", "RGB")).upper()
        if space not in SUPPORTED_COLORSPACES:
            raise ValueError(f"Unsupported colorspace {space!r} for scale {scale.get('name')!r}")
    return base_name, scales


def build_adaptive_theme(palette_spec: dict[str, Any], swatches: int = SWATCHES) -> ThemeFn:
    """
    Prepare ramps for every scale in palette_spec and return theme(brightness, contrast=1).

    palette_spec: {"base_scale": name, "color_scales": [{"name", "color_keys", "colorspace", "ratios"}]}
    theme(...) returns [{"background": hex}, {"name": scale, "values": [{"name", "contrast", "value"}]}, ...]
    """
    base_name, scales = _validate_spec(palette_spec)
    base = next(s for s in scales if s["name"] == base_name)
    base_positions, base_anchors = _ramp_anchors(base["color_keys"])

    prepared = []
    for scale in scales:
        ramp = build_ramp(scale["color_keys"], swatches)
        prepared.append((scale["name"], list(scale["ratios"]), ramp, luminance_of_rgb(ramp)))

    def theme(brightness: float, contrast: float = 1.0) -> list[dict[str, Any]]:
        if not 0 <= brightness <= 100:
            raise ValueError(f"brightness must be within [0, 100], got {brightness}")
        if contrast <= 0:
            raise ValueError(f"contrast must be positive, got {contrast}")
        bg_rgb = _sample_ramp(base_positions, base_anchors, np.array([1.0 - brightness / 100.0]))[0]
        background = rgb_to_hex(*bg_rgb)
        bg_lum = float(luminance_of_rgb(bg_rgb))
        dark_background = brightness < 50

        out: list[dict[str, Any]] = [{"background": background}]
        for name, ratios, ramp, lums in prepared:
            values = []
            for i, ratio in enumerate(ratios):
                idx, actual = _pick_swatch(lums, bg_lum, dark_background, target_ratio(ratio, contrast))
                values.append({
                    "name": f"{name}{(i + 1) * 100}",
                    "contrast": round(actual, 2),
                    "value": rgb_to_hex(*ramp[idx]),
                })
            out.append({"name": name, "values": values})
        return out

    return theme
