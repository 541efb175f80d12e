"""
Color math helpers: hex parsing, HSL conversion, lighten/darken and scale interpolation.
All hex output is uppercase #RRGGBB.
"""
import colorsys
import re

import numpy as np

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_hex(color: str) -> str:
    """Expand shorthand (#abc) and uppercase. Raises ValueError on anything that is not hex."""
    if not isinstance(color, str):
        raise ValueError(f"Color must be a hex string: {color!r}")
    m = _HEX_RE.match(color.strip())
    if not m:
        raise ValueError(f"Color must be a #RGB or #RRGGBB hex string: {color!r}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.upper()}"


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    digits = normalize_hex(color)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """RGB (0-255, rounded and clamped) to #RRGGBB."""
    channels = [max(0, min(255, int(round(c)))) for c in (r, g, b)]
    return "#{:02X}{:02X}{:02X}".format(*channels)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """
    HSL to hex. h in degrees (0-360), s and l in percent (0-100).
    """
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, l / 100.0, s / 100.0)
    return rgb_to_hex(r * 255, g * 255, b * 255)


def hex_to_hsl(color: str) -> tuple[float, float, float]:
    """Hex to (hue degrees, saturation %, lightness %)."""
    r, g, b = hex_to_rgb(color)
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return h * 360.0, s * 100.0, l * 100.0


def _shift_lightness(amount: float, color: str) -> str:
    r, g, b = hex_to_rgb(color)
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    l = min(1.0, max(0.0, l + amount))
    r2, g2, b2 = colorsys.hls_to_rgb(h, l, s)
    return rgb_to_hex(r2 * 255, g2 * 255, b2 * 255)


def lighten(amount: float, color: str) -> str:
    """Raise HSL lightness by amount (0-1), clamped at white."""
    return _shift_lightness(amount, color)


def darken(amount: float, color: str) -> str:
    """Lower HSL lightness by amount (0-1), clamped at black."""
    return _shift_lightness(-amount, color)


def interpolate_scale(colors: list[str], steps: int) -> list[str]:
    """
    Evenly spaced stops along an RGB scale through colors (first stop = first color,
    last stop = last color). steps == 1 returns just the first color.
    """
    if steps < 1:
        raise ValueError(f"interpolate_scale: steps must be >= 1, got {steps}")
    if not colors:
        raise ValueError("interpolate_scale: colors cannot be empty")
    anchors = np.array([hex_to_rgb(c) for c in colors], dtype=np.float64)
    if steps == 1 or len(anchors) == 1:
        return [rgb_to_hex(*anchors[0])] * steps
    domain = np.linspace(0.0, 1.0, len(anchors))
    positions = np.linspace(0.0, 1.0, steps)
    out = np.column_stack([np.interp(positions, domain, anchors[:, i]) for i in range(3)])
    return [rgb_to_hex(*row) for row in out]
