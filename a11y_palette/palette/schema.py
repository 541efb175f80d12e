"""
Schema for generated palettes: theme settings, generator options and results.
"""
from dataclasses import asdict, dataclass, field
from typing import Any, Iterator

# Contrast ratios of the 9-step tonal scale, ascending
SCALE_RATIOS: tuple[float, ...] = (1.5, 2, 3, 4.5, 5, 6, 7, 8, 12)
# Canonical fallback text color position in a tone scale
FALLBACK_TEXT_INDEX = 4
# WCAG AA for normal text
DEFAULT_THRESHOLD = 4.5

BAND_ORDER: tuple[str, ...] = ("pastel", "light", "dark")

# (attribute, serialized key) in output order
VARIANT_KEYS: tuple[tuple[str, str], ...] = (
    ("pastel", "pastel"),
    ("light", "light"),
    ("dark", "dark"),
    ("inverted_pastel", "invertedPastel"),
    ("inverted_light", "invertedLight"),
    ("inverted_dark", "invertedDark"),
)

Color = str | list[str]


@dataclass(frozen=True)
class ThemeConfig:
    """
    Settings for the adaptive tone scales built from a seed color.
    base_color is the background the scales are paired with (pure white unless overridden).
    """

    base_color: str = "#FFFFFF"
    base_ratio: float = 1.0
    light_brightness: float = 95     # background lightness for the `colors` scale
    dark_brightness: float = 20      # background lightness for the `inverse` scale
    dark_contrast: float = 1.3       # contrast multiplier for the `inverse` scale

    def __post_init__(self) -> None:
        for name in ("light_brightness", "dark_brightness"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"ThemeConfig.{name} must be within [0, 100], got {value}")
        if self.dark_contrast < 1:
            raise ValueError(f"ThemeConfig.dark_contrast must be >= 1, got {self.dark_contrast}")
        if self.base_ratio < 1:
            raise ValueError(f"ThemeConfig.base_ratio must be >= 1, got {self.base_ratio}")


@dataclass(frozen=True)
class GradientOptions:
    steps: int = 2
    bg: bool = False
    text: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.steps, bool) or not isinstance(self.steps, int) or self.steps < 1:
            raise ValueError(f"GradientOptions.steps must be an integer >= 1, got {self.steps!r}")


@dataclass(frozen=True)
class GeneratorOptions:
    gradient: GradientOptions = field(default_factory=GradientOptions)
    threshold: float = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        if self.threshold < 1:
            raise ValueError(f"GeneratorOptions.threshold must be >= 1, got {self.threshold}")


@dataclass(frozen=True)
class ToneTheme:
    """Light-mode (`colors`) and dark-mode (`inverse`) tone scales, ratio-ascending."""

    colors: list[str]
    inverse: list[str]

    def to_dict(self) -> dict[str, list[str]]:
        return {"colors": list(self.colors), "inverse": list(self.inverse)}


@dataclass(frozen=True)
class ThemeResult:
    base: str
    theme: ToneTheme
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class VariantResult:
    """One background/text pairing. text is None when no scale color reached the threshold."""

    bg: Color
    text: Color | None
    theme: ToneTheme
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.text is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "bg": self.bg,
            "text": self.text,
            "theme": self.theme.to_dict(),
            "raw": self.raw,
        }


@dataclass(frozen=True)
class PaletteResult:
    """Six variants: one normal/inverted pair per band, plus samples drawn per band."""

    pastel: VariantResult
    light: VariantResult
    dark: VariantResult
    inverted_pastel: VariantResult
    inverted_light: VariantResult
    inverted_dark: VariantResult
    attempts: dict[str, int] = field(default_factory=dict)

    def items(self) -> Iterator[tuple[str, VariantResult]]:
        """(serialized key, variant) in output order."""
        for attr, key in VARIANT_KEYS:
            yield key, getattr(self, attr)

    def to_dict(self, include_raw: bool = True) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, variant in self.items():
            d = variant.to_dict()
            if not include_raw:
                d.pop("raw", None)
            out[key] = d
        return out

    def summary(self) -> dict[str, Any]:
        """Compact form for logging: bg/text per variant and attempts."""
        return {
            "variants": {key: {"bg": v.bg, "text": v.text} for key, v in self.items()},
            "attempts": dict(self.attempts),
        }


def options_to_dict(options: GeneratorOptions) -> dict[str, Any]:
    return asdict(options)
