#!/usr/bin/env python3
"""
Generate many palettes and report the weakest contrast per variant and how many samples
each band needed. Exits 1 if any variant falls below the tolerance.

Usage:
  python scripts/contrast_sweep.py --count 200
  python scripts/contrast_sweep.py --count 50 --seed 3 --tolerance 4.45
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Check the contrast guarantee over many random palettes."
    )
    parser.add_argument("--count", type=int, default=100, help="Number of palettes (default 100).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--tolerance",
        type=float,
        default=4.45,
        help="Minimum acceptable ratio; a little under 4.5 for rounding (default 4.45).",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    from rich.console import Console
    from rich.table import Table

    from a11y_palette.color.contrast import contrast_ratio
    from a11y_palette.config import load_config, options_from_config
    from a11y_palette.palette import BAND_ORDER, generate_palette
    from a11y_palette.random_utils import make_rng

    options, theme_config, max_attempts = options_from_config(load_config(args.config))
    rng = make_rng(args.seed)

    min_ratio: dict[str, float] = {}
    failures: list[tuple[int, str, str, str, float]] = []
    attempts: dict[str, list[int]] = {band: [] for band in BAND_ORDER}
    for i in range(max(0, args.count)):
        palette = generate_palette(options, theme_config=theme_config, max_attempts=max_attempts, rng=rng)
        for key, variant in palette.items():
            bg = variant.bg[0] if isinstance(variant.bg, list) else variant.bg
            text = variant.text[0] if isinstance(variant.text, list) else variant.text
            ratio = contrast_ratio(bg, text)
            min_ratio[key] = min(ratio, min_ratio.get(key, ratio))
            if ratio < args.tolerance:
                failures.append((i, key, bg, text, ratio))
        for band, n in palette.attempts.items():
            attempts[band].append(n)
        if (i + 1) % 25 == 0:
            logger.info("... %s/%s palettes", i + 1, args.count)

    console = Console()
    table = Table(title=f"Contrast sweep ({args.count} palettes)")
    table.add_column("variant")
    table.add_column("min ratio", justify="right")
    for key, ratio in min_ratio.items():
        style = "red" if ratio < args.tolerance else "green"
        table.add_row(key, f"[{style}]{ratio:.2f}[/{style}]")
    console.print(table)
    for band, counts in attempts.items():
        if counts:
            console.print(f"{band}: mean attempts {sum(counts) / len(counts):.2f}, max {max(counts)}")

    for i, key, bg, text, ratio in failures:
        print(f"  palette {i} {key}: {text} on {bg} = {ratio:.2f}", file=sys.stderr)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
