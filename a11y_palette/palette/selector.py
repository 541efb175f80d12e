"""
Pick a text color that reaches the contrast threshold against a background.
"""
from ..color.contrast import contrast_ratio
from .schema import DEFAULT_THRESHOLD


def valid_contrast(bg: str, candidates: list[str], threshold: float = DEFAULT_THRESHOLD) -> list[str]:
    """Candidates with contrast >= threshold against bg, original order kept."""
    return [c for c in candidates if contrast_ratio(bg, c) >= threshold]


def select_text(
    bg: str,
    candidates: list[str],
    threshold: float = DEFAULT_THRESHOLD,
    fallback_index: int | None = None,
) -> str | None:
    """
    First qualifying candidate, or None. With fallback_index, an empty selection returns
    candidates[fallback_index] instead (contrast is then not guaranteed).
    """
    valid = valid_contrast(bg, candidates, threshold)
    if valid:
        return valid[0]
    if fallback_index is not None and candidates:
        return candidates[fallback_index]
    return None
