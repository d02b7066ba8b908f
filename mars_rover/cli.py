"""CLI entrypoint for rover runs.

This module owns argument parsing, config-file resolution and the exit
status contract. All rover behaviour lives in the domain and simulation
layers:

- ``mars_rover.domain``     – orientation, rover state machine, errors
- ``mars_rover.config``     – constants and run config dataclasses
- ``mars_rover.simulation`` – ``run_rover`` engine and Parquet traces
- ``mars_rover.viz``        – trajectory rendering
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from mars_rover.config.constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH
from mars_rover.config.types import RunConfig, validate_commands, validate_direction
from mars_rover.simulation.engine import run_rover
from mars_rover.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, message: str) -> int:
    """Coerce *raw* to int, raising ``ValueError(message)`` on failure.

    Strings may carry a sign and surrounding whitespace. Integral floats
    (``"3.0"``, ``3.0``) are accepted; booleans and fractions are not.
    """
    if isinstance(raw, bool):
        raise ValueError(message)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(message)
        return int(raw)
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError as exc:
            raise ValueError(message) from exc
        if not value.is_integer():
            raise ValueError(message)
        return int(value)
    raise ValueError(message)


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _coerce_optional_path(raw: object, key: str) -> Path | None:
    if raw is None:
        return None
    return Path(_coerce_str(raw, key))


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _load_config_file(path: Path) -> dict[str, object]:
    """Read a JSON object of option defaults."""
    try:
        raw = json.loads(Path(path).read_text())
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Config file is not valid JSON: {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return raw


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="mars-rover",
        description="Simulate a Mars rover navigating a grid plateau.",
    )
    parser.add_argument("x", help="Starting X coordinate (integer)")
    parser.add_argument("y", help="Starting Y coordinate (integer)")
    parser.add_argument("direction", help="Starting direction (N|S|E|W)")
    parser.add_argument("commands", help='Command sequence string (e.g., "FFRFF")')
    parser.add_argument(
        "--width", default=None, help=f"Grid width (default: {DEFAULT_GRID_WIDTH})"
    )
    parser.add_argument(
        "--height", default=None, help=f"Grid height (default: {DEFAULT_GRID_HEIGHT})"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--trace", type=Path, default=None, help="Write a Parquet step trace")
    parser.add_argument("--plot", type=Path, default=None, help="Render the trajectory image")
    parser.add_argument(
        "--theme",
        type=str,
        choices=sorted(REGISTERED_THEMES),
        default=None,
    )
    parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print a JSON summary instead of the final position line",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


def _build_run_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    """Validate raw CLI/file values into a :class:`RunConfig`."""
    x = _coerce_int(args.x, "X must be an integer.")
    y = _coerce_int(args.y, "Y must be an integer.")
    validate_direction(args.direction)
    validate_commands(args.commands)
    width = _coerce_int(
        _get_val(args.width, "width", file_cfg, DEFAULT_GRID_WIDTH),
        "Width must be a positive integer.",
    )
    height = _coerce_int(
        _get_val(args.height, "height", file_cfg, DEFAULT_GRID_HEIGHT),
        "Height must be a positive integer.",
    )
    return RunConfig(
        x=x,
        y=y,
        direction=args.direction,
        commands=args.commands,
        width=width,
        height=height,
        trace_path=_coerce_optional_path(_get_val(args.trace, "trace", file_cfg, None), "trace"),
        plot_path=_coerce_optional_path(_get_val(args.plot, "plot", file_cfg, None), "plot"),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit status.

    Supports ``--config path/to/config.json`` for the optional settings
    (``width``, ``height``, ``trace``, ``plot``, ``theme``, ``json``,
    ``log_level``). CLI arguments override config-file values; config-file
    values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        file_cfg = _load_config_file(args.config) if args.config is not None else {}
        log_level = _coerce_str(
            _get_val(args.log_level, "log_level", file_cfg, "WARNING"), "log_level"
        ).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        logging.basicConfig(level=log_level, format=LOG_FORMAT)

        theme = get_theme(_coerce_str(_get_val(args.theme, "theme", file_cfg, "default"), "theme"))
        as_json = _coerce_bool(_get_val(args.json, "json", file_cfg, False), "json")
        config = _build_run_config(args, file_cfg)
        result = run_rover(config, theme=theme)
    except ValueError as exc:
        logger.debug("Rejected run: %s", exc)
        print(str(exc), file=sys.stderr)
        return EXIT_FAILURE
    except Exception as exc:
        logger.exception("Run failed")
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if as_json:
        print(json.dumps(result.to_summary(), ensure_ascii=False, indent=2))
    else:
        print(f"Final position: {result.final_position}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
