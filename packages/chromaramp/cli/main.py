"""Command-line interface for chromaramp.

Inspect builtin presets, render ramps as sRGB swatches and probe the sRGB
gamut boundary from the terminal.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from chromaramp.core.color.conversion import oklch_to_rgb255
from chromaramp.core.color.gamut import build_gamut_boundary
from chromaramp.core.config.loader import load_app_config
from chromaramp.core.config.models import AppConfig, RampConfig
from chromaramp.core.errors import ChromaRampError, ConfigurationError, reraise_validation
from chromaramp.core.presets.builtins import build_builtin_catalog
from chromaramp.core.presets.max_saturation import calculate_max_saturation_preset
from chromaramp.core.ramps.models import HueFamily
from chromaramp.core.store import PaletteStore
from chromaramp.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def _hex(l: float, c: float, h: float) -> str:
    r, g, b = oklch_to_rgb255(l, c, h)
    return f"#{r:02x}{g:02x}{b:02x}"


def _load_config(args: argparse.Namespace) -> AppConfig:
    try:
        config = load_app_config(getattr(args, "config", None))
    except ValueError as e:
        raise ConfigurationError(f"Could not load config: {e}") from e

    configure_logging(
        level="DEBUG" if args.verbose else config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured,
    )

    ramp_overrides: dict[str, object] = {}
    if getattr(args, "steps", None) is not None:
        ramp_overrides["step_count"] = args.steps
    if getattr(args, "preset", None) is not None:
        ramp_overrides["default_preset"] = args.preset
    if ramp_overrides:
        with reraise_validation("Invalid ramp options"):
            ramp = RampConfig.model_validate({**config.ramp.model_dump(), **ramp_overrides})
        config = config.model_copy(update={"ramp": ramp})
    return config


def _family_table(family: HueFamily) -> Table:
    params = family.params
    title = f"{family.name}  (hue {params.hue:.1f}"
    title += ", ramped" if params.use_hue_ramping else ""
    title += ", gamut-aware)" if params.gamut_aware else ")"

    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("L", justify="right")
    table.add_column("C", justify="right")
    table.add_column("H", justify="right")
    table.add_column("sRGB")
    table.add_column("Swatch")

    for i, step in enumerate(family.steps):
        hex_color = _hex(step.l, step.c, step.h)
        table.add_row(
            str(i),
            f"{step.l:.3f}",
            f"{step.c:.3f}",
            f"{step.h:.1f}",
            hex_color,
            Text("      ", style=f"on {hex_color}"),
        )
    return table


def cmd_presets(args: argparse.Namespace) -> int:
    """List builtin presets."""
    catalog = build_builtin_catalog()

    table = Table(title="Builtin presets")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Families", justify="right")
    table.add_column("Description")
    for info in catalog.list_all():
        table.add_row(info.preset_id, info.name, str(len(info.families)), info.description or "")

    console.print(table)
    return 0


def cmd_ramp(args: argparse.Namespace) -> int:
    """Generate ramps and print each step with a swatch."""
    config = _load_config(args)
    store = PaletteStore.from_config(config)

    families = [store.family(args.family)] if args.family else store.families()
    for family in families:
        console.print(_family_table(family))

    hits, misses = store.boundary.cache.hits, store.boundary.cache.misses
    logger.debug(f"Gamut cache: {hits} hits, {misses} misses, {store.boundary.searches} searches")
    return 0


def cmd_max_chroma(args: argparse.Namespace) -> int:
    """Print the maximum in-gamut chroma for a lightness/hue pair."""
    configure_logging(level="DEBUG" if args.verbose else "WARNING")
    boundary = build_gamut_boundary(args.backend)
    max_chroma = boundary.find_max_chroma(args.lightness, args.hue)

    hex_color = _hex(args.lightness, max_chroma, args.hue)
    console.print(
        f"L={args.lightness:.3f} H={args.hue:.1f} -> max C=[bold]{max_chroma:.4f}[/bold] "
        f"({args.backend}) ",
        Text("      ", style=f"on {hex_color}"),
        hex_color,
    )
    return 0


def cmd_max_saturation(args: argparse.Namespace) -> int:
    """Derive and print the max-saturation preset."""
    config = _load_config(args)
    store = PaletteStore.from_config(config)
    preset = calculate_max_saturation_preset(store, steps=args.sample_steps)

    table = Table(title=f"{preset.name} ({args.sample_steps} samples)")
    table.add_column("Family")
    table.add_column("Hue", justify="right")
    table.add_column("C start", justify="right")
    table.add_column("C peak", justify="right")
    table.add_column("C end", justify="right")
    table.add_column("Peak pos", justify="right")
    for name, params in preset.families.items():
        curve = params.chroma_curve
        table.add_row(
            name,
            f"{params.hue:.1f}",
            f"{curve.start:.3f}",
            f"{curve.peak:.3f}",
            f"{curve.end:.3f}",
            f"{curve.peak_position:.2f}",
        )

    console.print(table)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="chromaramp",
        description="chromaramp - perceptual OKLCH color ramps clamped to sRGB",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    presets = sub.add_parser("presets", help="List builtin presets")
    presets.set_defaults(func=cmd_presets)

    ramp = sub.add_parser("ramp", help="Generate and display ramps")
    ramp.add_argument("--preset", help="Preset id, name or alias (default: from config)")
    ramp.add_argument("--steps", type=int, help="Steps per family (2-20)")
    ramp.add_argument("--family", help="Only show this hue family")
    ramp.add_argument("--config", help="Path to app config (.json/.yaml)")
    ramp.set_defaults(func=cmd_ramp)

    max_chroma = sub.add_parser("max-chroma", help="Find max in-gamut chroma")
    max_chroma.add_argument("lightness", type=float, help="OKLCH lightness in [0, 1]")
    max_chroma.add_argument("hue", type=float, help="Hue angle in [0, 360)")
    max_chroma.add_argument(
        "--backend",
        choices=["coloraide", "formula"],
        default="coloraide",
        help="Gamut predicate (default: coloraide)",
    )
    max_chroma.set_defaults(func=cmd_max_chroma)

    max_sat = sub.add_parser("max-saturation", help="Derive the max-saturation preset")
    max_sat.add_argument(
        "--steps", dest="sample_steps", type=int, default=12, help="Lightness samples"
    )
    max_sat.add_argument("--config", help="Path to app config (.json/.yaml)")
    max_sat.set_defaults(func=cmd_max_saturation)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        return args.func(args)
    except ChromaRampError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
