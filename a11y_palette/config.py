"""
Load and expose app config (YAML). Used by the scripts to get theme settings, gradient options
and the retry cap. Merges are section by section and field by field; defaults are never mutated.
"""
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import yaml

from .palette.generator import DEFAULT_MAX_ATTEMPTS
from .palette.schema import GeneratorOptions, GradientOptions, ThemeConfig

DEFAULT_THEME_CONFIG = ThemeConfig()
DEFAULT_GENERATOR_OPTIONS = GeneratorOptions()


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _defaults() -> dict[str, Any]:
    return {
        "theme": {
            "base_color": DEFAULT_THEME_CONFIG.base_color,
            "base_ratio": DEFAULT_THEME_CONFIG.base_ratio,
            "light_brightness": DEFAULT_THEME_CONFIG.light_brightness,
            "dark_brightness": DEFAULT_THEME_CONFIG.dark_brightness,
            "dark_contrast": DEFAULT_THEME_CONFIG.dark_contrast,
        },
        "gradient": {
            "steps": DEFAULT_GENERATOR_OPTIONS.gradient.steps,
            "bg": DEFAULT_GENERATOR_OPTIONS.gradient.bg,
            "text": DEFAULT_GENERATOR_OPTIONS.gradient.text,
        },
        "generator": {
            "threshold": DEFAULT_GENERATOR_OPTIONS.threshold,
            "max_attempts": DEFAULT_MAX_ATTEMPTS,
        },
    }


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    config = _defaults()
    if not path.exists():
        return config
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section] = {**config[section], **values}
        else:
            config[section] = values
    return config


def _known(cls, overrides: dict[str, Any] | None) -> dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in (overrides or {}).items() if k in names}


def merge_theme_config(
    overrides: dict[str, Any] | ThemeConfig | None = None,
    base: ThemeConfig = DEFAULT_THEME_CONFIG,
) -> ThemeConfig:
    """
    Field-by-field merge of overrides onto base:
      base_color, base_ratio, light_brightness, dark_brightness, dark_contrast.
    Unknown keys are ignored. A ThemeConfig passed as overrides is returned as is.
    """
    if isinstance(overrides, ThemeConfig):
        return overrides
    return replace(base, **_known(ThemeConfig, overrides))


def merge_generator_options(
    overrides: dict[str, Any] | GeneratorOptions | None = None,
    base: GeneratorOptions = DEFAULT_GENERATOR_OPTIONS,
) -> GeneratorOptions:
    """
    Merge {"gradient": {"steps", "bg", "text"}, "threshold"} onto base.
    Gradient fields missing from overrides keep the base value.
    """
    if isinstance(overrides, GeneratorOptions):
        return overrides
    overrides = overrides or {}
    gradient = overrides.get("gradient")
    if isinstance(gradient, GradientOptions):
        merged_gradient = gradient
    else:
        merged_gradient = replace(base.gradient, **_known(GradientOptions, gradient))
    kwargs: dict[str, Any] = {"gradient": merged_gradient}
    if "threshold" in overrides:
        kwargs["threshold"] = overrides["threshold"]
    return replace(base, **kwargs)


def options_from_config(config: dict[str, Any]) -> tuple[GeneratorOptions, ThemeConfig, int | None]:
    """Resolve a loaded config into (generator options, theme config, max attempts)."""
    generator = config.get("generator", {}) or {}
    options = merge_generator_options({
        "gradient": config.get("gradient", {}) or {},
        **({"threshold": generator["threshold"]} if "threshold" in generator else {}),
    })
    theme = merge_theme_config(config.get("theme", {}) or {})
    max_attempts = generator.get("max_attempts", DEFAULT_MAX_ATTEMPTS)
    if max_attempts is not None:
        max_attempts = int(max_attempts)
    return options, theme, max_attempts
