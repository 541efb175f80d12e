"""
WCAG 2.x relative luminance and contrast ratio.
"""
import numpy as np

from .convert import hex_to_rgb


def _linearize(channels: np.ndarray) -> np.ndarray:
    c = channels / 255.0
    return np.where(c <= 0.03928, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def luminance_of_rgb(rgb: np.ndarray) -> np.ndarray:
    """Relative luminance for an (N, 3) array of RGB rows (0-255)."""
    lin = _linearize(np.asarray(rgb, dtype=np.float64))
    return lin[..., 0] * 0.2126 + lin[..., 1] * 0.7152 + lin[..., 2] * 0.0722


def luminances(colors: list[str]) -> np.ndarray:
    """Relative luminance of each hex color, as a float array."""
    if not colors:
        return np.zeros(0, dtype=np.float64)
    return luminance_of_rgb(np.array([hex_to_rgb(c) for c in colors], dtype=np.float64))


def relative_luminance(color: str) -> float:
    return float(luminances([color])[0])


def contrast_of_luminance(l1, l2):
    """Contrast ratio from luminance values; works elementwise on arrays."""
    lighter = np.maximum(l1, l2)
    darker = np.minimum(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Contrast ratio between two hex colors, 1.0 (identical) to 21.0 (black on white)."""
    la, lb = luminances([color_a, color_b])
    return float(contrast_of_luminance(la, lb))
