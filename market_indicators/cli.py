#!/usr/bin/env python3
"""
Command-line interface for the indicator tools.

Usage:
    market-indicators list
    market-indicators call calculate_volume_profile --input bars.json
    echo '{"values": [1, 2, 3, 4], "period": 2}' | market-indicators call calculate_sma
    cat bars.json | market-indicators call calculate_volume_profile --table
    market-indicators serve

The serve command speaks line-delimited JSON over stdio. Each request line
{"id": 1, "tool": "calculate_volume_profile", "arguments": {...}} gets one
response line {"id": 1, "result": {...}} or {"id": 1, "error": "..."}.
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from market_indicators import __version__
from market_indicators.core.config import IndicatorSettings
from market_indicators.core.logging_setup import configure_logging
from market_indicators.indicators.volume_profile import VolumeProfileResult
from market_indicators.tools.registry import ToolRegistry, build_default_registry

logger = logging.getLogger(__name__)

# Width of the volume bar column in --table output
BAR_WIDTH = 30


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="market-indicators",
        description="Technical indicator tools (SMA, EMA, RSI, MACD, ATR, volume profile)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Show available tools
    %(prog)s list

    # Run a tool with JSON arguments from a file
    %(prog)s call calculate_volume_profile --input bars.json

    # Render the profile as a table
    %(prog)s call calculate_volume_profile --input bars.json --table

    # Answer JSON requests on stdin, one per line
    %(prog)s serve
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Path to a .env file with INDICATORS_* settings (default: ./.env if present)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override INDICATORS_LOG_LEVEL",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List registered tools")

    call_parser = subparsers.add_parser("call", help="Run one tool and print its result")
    call_parser.add_argument("tool", help="Tool name (see 'list')")
    call_parser.add_argument(
        "--input",
        "-i",
        default="-",
        help="JSON file with the tool arguments, or '-' for stdin (default: -)",
    )
    call_parser.add_argument(
        "--table",
        "-t",
        action="store_true",
        help="Render a volume profile result as a table instead of JSON",
    )

    subparsers.add_parser("serve", help="Serve tool calls as line-delimited JSON over stdio")

    return parser


def load_arguments(source: str) -> dict:
    """
    Read tool arguments from a JSON file or stdin.

    Raises:
        ValueError: If the input is not a JSON object
        OSError: If the file cannot be read
    """
    if source == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(source).read_text()

    try:
        data = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Tool arguments must be a JSON object")
    return data


def render_tools(registry: ToolRegistry, console: Console) -> None:
    """Print registered tools as a table."""
    table = Table(title="Indicator tools")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Description")

    for tool in registry.list_tools():
        table.add_row(tool.name, tool.description)

    console.print(table)


def render_profile(result: dict, console: Console) -> None:
    """
    Print a volume profile result as a table, highest price first.

    Marks the Point of Control bin and bins inside the value area.
    """
    profile = VolumeProfileResult.from_dict(result)
    poc_bin = profile.poc_bin
    max_volume = max((b.volume for b in profile.bins), default=0)

    table = Table(
        title=(
            f"Volume Profile {profile.price_min:g} - {profile.price_max:g} "
            f"(bin width {profile.bin_width:g})"
        )
    )
    table.add_column("Price Low", justify="right")
    table.add_column("Price High", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Vol %", justify="right")
    table.add_column("Profile", no_wrap=True)
    table.add_column("", no_wrap=True)

    for b in reversed(profile.bins):
        length = round(b.volume / max_volume * BAR_WIDTH) if max_volume > 0 else 0
        in_value_area = all(profile.is_price_in_value_area(p) for p in (b.price_low, b.price_high))
        marker = "POC" if b == poc_bin else ("VA" if in_value_area else "")
        bar_style = "yellow" if marker == "POC" else ("green" if in_value_area else "dim")

        table.add_row(
            f"{b.price_low:g}",
            f"{b.price_high:g}",
            f"{b.volume:,}",
            f"{b.volume_percent:.2f}",
            Text("█" * length, style=bar_style),
            marker,
        )

    console.print(table)
    if profile.value_area is not None and profile.point_of_control is not None:
        va_low, va_high = profile.value_area
        console.print(
            f"POC: {profile.point_of_control:g}   Value Area: {va_low:g} - {va_high:g}"
        )


def dump_json(data: dict, indent: int | None = None) -> str:
    """
    Serialize a result or response as strict JSON.

    Raises:
        ValueError: If the data holds NaN or an infinite float, which JSON
            cannot represent
    """
    try:
        return json.dumps(data, indent=indent, allow_nan=False)
    except ValueError as e:
        raise ValueError(f"Result is not representable as JSON: {e}") from e


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def handle_request(registry: ToolRegistry, line: str) -> dict:
    """
    Answer one line-delimited JSON request.

    Never raises for bad requests or failing tools; the failure is
    returned in the response's "error" field.
    """
    try:
        request = json.loads(line, parse_constant=_reject_constant)
    except ValueError as e:
        return {"id": None, "error": f"Invalid JSON request: {e}"}

    if not isinstance(request, dict):
        return {"id": None, "error": "Request must be a JSON object"}

    request_id = request.get("id")
    tool_name = request.get("tool")
    arguments = request.get("arguments") or {}

    if not isinstance(tool_name, str):
        return {"id": request_id, "error": "Request is missing the 'tool' name"}
    if not isinstance(arguments, dict):
        return {"id": request_id, "error": "'arguments' must be a JSON object"}

    try:
        result = registry.call(tool_name, arguments)
    except (KeyError, ValueError) as e:
        logger.warning("Tool %s failed: %s", tool_name, e)
        return {"id": request_id, "error": str(e)}

    return {"id": request_id, "result": result}


def serve(registry: ToolRegistry, stdin: TextIO, stdout: TextIO) -> None:
    """Process requests from stdin until EOF, writing one response line per request."""
    logger.info("Serving %d indicator tool(s) on stdio", len(registry))

    for line in stdin:
        if not line.strip():
            continue
        response = handle_request(registry, line)
        try:
            encoded = dump_json(response)
        except ValueError as e:
            logger.warning("Request %s failed: %s", response.get("id"), e)
            encoded = dump_json({"id": response.get("id"), "error": str(e)})
        stdout.write(encoded + "\n")
        stdout.flush()

    logger.info("Input closed, stopping")


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected command. Returns the exit status."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = IndicatorSettings.from_env(args.env_file)
        if args.log_level:
            settings = dataclasses.replace(settings, log_level=args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings)
    registry = build_default_registry(settings)
    console = Console(file=sys.stdout)

    if args.command == "list":
        render_tools(registry, console)
        return 0

    if args.command == "serve":
        serve(registry, sys.stdin, sys.stdout)
        return 0

    try:
        arguments = load_arguments(args.input)
        result = registry.call(args.tool, arguments)
        if args.table and "bins" in result:
            render_profile(result, console)
        else:
            print(dump_json(result, indent=2))
    except (KeyError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
