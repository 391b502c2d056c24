"""Command-line interface for hoshizora.

Reads a ``.osu`` file from disk and hands its text to the decoder.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hoshizora.core.config.loader import load_decoder_config
from hoshizora.core.config.models import DecoderConfig, ErrorPolicy, UnsupportedSectionPolicy
from hoshizora.core.formats.osu import Beatmap, BeatmapDecoder, DecodeResult
from hoshizora.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def read_beatmap_text(path: Path) -> str:
    """Read a beatmap file as UTF-8 with line endings untouched, dropping any BOM."""
    return path.read_bytes().decode("utf-8-sig")


def _resolve_config(args: argparse.Namespace) -> DecoderConfig:
    config = load_decoder_config(args.config)
    overrides: dict[str, object] = {}
    if args.collect_errors:
        overrides["error_policy"] = ErrorPolicy.COLLECT_ALL
    if args.strict_sections:
        overrides["unsupported_sections"] = UnsupportedSectionPolicy.ERROR
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def _summary_table(beatmap: Beatmap) -> Table:
    table = Table(title=escape(f"{beatmap.metadata.artist} - {beatmap.metadata.title}"))
    table.add_column("Field")
    table.add_column("Value")

    rows = [
        ("Version", beatmap.metadata.version),
        ("Creator", beatmap.metadata.creator),
        ("Format", f"v{beatmap.format.version}"),
        ("Mode", beatmap.general.mode.value),
        ("Audio", beatmap.general.audio_filename),
        ("Preview", str(beatmap.general.preview_time)),
        (
            "HP / CS / OD / AR",
            f"{beatmap.difficulty.hp:g} / {beatmap.difficulty.cs:g} / "
            f"{beatmap.difficulty.od:g} / {beatmap.difficulty.ar:g}",
        ),
        ("Tags", " ".join(beatmap.metadata.tags)),
    ]
    for field, value in rows:
        table.add_row(field, escape(value))
    return table


def _print_errors(result: DecodeResult) -> None:
    console.print(f"[red]ERROR: {len(result.errors)} line(s) failed to decode[/red]")
    for error in result.errors:
        console.print(f"  {error}", style="red", markup=False, highlight=False, emoji=False)


def decode_command(args: argparse.Namespace) -> int:
    """Decode one beatmap file and print it.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    path = Path(args.path).resolve()
    if not path.exists():
        console.print(f"[red]ERROR: Beatmap file not found: {path}[/red]")
        return 1

    try:
        config = _resolve_config(args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    try:
        text = read_beatmap_text(path)
    except UnicodeDecodeError as e:
        console.print(f"[red]ERROR: {path} is not valid UTF-8: {e}[/red]")
        return 1

    logger.debug(f"Decoding {path}")
    result = BeatmapDecoder(config).decode(text)

    if result.beatmap is None:
        _print_errors(result)
        return 1

    if args.json:
        console.print(
            result.beatmap.model_dump_json(indent=2),
            soft_wrap=True,
            markup=False,
            highlight=False,
            emoji=False,
        )
    else:
        console.print(_summary_table(result.beatmap))
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="hoshizora",
        description="hoshizora - osu! beatmap decoder",
    )
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    decode = sub.add_parser("decode", help="Decode a .osu file")
    decode.add_argument("path", help="Path to .osu file")
    decode.add_argument("--config", default=None, help="Path to decoder config (JSON or YAML)")
    decode.add_argument(
        "--collect-errors",
        action="store_true",
        help="Report every failing line instead of stopping at the first",
    )
    decode.add_argument(
        "--strict-sections",
        action="store_true",
        help="Fail on content in sections without a parser",
    )
    decode.add_argument("--json", action="store_true", help="Print the decoded model as JSON")

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    configure_logging(level=args.log_level)

    if args.cmd == "decode":
        sys.exit(decode_command(args))
