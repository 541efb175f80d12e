#!/usr/bin/env python3
"""
CLI: Generate one random accessible palette and print it.
Usage:
  python scripts/generate_palette.py
  python scripts/generate_palette.py --seed 7 --bg-gradient --steps 4
  python scripts/generate_palette.py --json > palette.json
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from rich.console import Console
from rich.table import Table
from rich.text import Text

from a11y_palette.color.contrast import contrast_ratio
from a11y_palette.config import load_config, merge_generator_options, options_from_config
from a11y_palette.palette import PaletteExhaustedError, generate_palette
from a11y_palette.palette.schema import options_to_dict
from a11y_palette.random_utils import make_rng


def _first(color):
    return color[0] if isinstance(color, list) else color


def _swatches(colors) -> Text:
    out = Text()
    for c in colors if isinstance(colors, list) else [colors]:
        out.append("  ", style=f"on {c}")
    out.append(" " + (", ".join(colors) if isinstance(colors, list) else colors))
    return out


def render(palette, console: Console) -> None:
    table = Table(title="Palette")
    table.add_column("variant")
    table.add_column("bg")
    table.add_column("text")
    table.add_column("sample")
    table.add_column("ratio", justify="right")
    for key, variant in palette.items():
        bg, text = _first(variant.bg), _first(variant.text)
        ratio = contrast_ratio(bg, text)
        table.add_row(
            key,
            _swatches(variant.bg),
            _swatches(variant.text),
            Text(f"  {ratio:.2f}  ", style=f"bold {text} on {bg}"),
            f"{ratio:.2f}",
        )
    console.print(table)
    console.print(f"attempts: {palette.attempts}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate random background/text pairs with guaranteed contrast."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--steps", type=int, default=None, help="Gradient stops (default from config: 2).")
    parser.add_argument("--bg-gradient", action="store_true", help="Expand backgrounds into gradients.")
    parser.add_argument("--text-gradient", action="store_true", help="Expand text colors into gradients.")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Per-band sample cap (default from config). 0 for no cap.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table.")
    parser.add_argument("--raw", action="store_true", help="Include engine scale data in JSON output.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every rejected sample.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config)
    options, theme_config, max_attempts = options_from_config(config)
    gradient: dict = {}
    if args.steps is not None:
        gradient["steps"] = args.steps
    if args.bg_gradient:
        gradient["bg"] = True
    if args.text_gradient:
        gradient["text"] = True
    try:
        options = merge_generator_options({"gradient": gradient}, base=options)
    except ValueError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 2
    if args.max_attempts is not None:
        max_attempts = args.max_attempts or None

    try:
        palette = generate_palette(
            options,
            theme_config=theme_config,
            max_attempts=max_attempts,
            rng=make_rng(args.seed),
        )
    except PaletteExhaustedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = {"options": options_to_dict(options), "palette": palette.to_dict(include_raw=args.raw)}
        print(json.dumps(payload, indent=2))
    else:
        render(palette, Console())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
