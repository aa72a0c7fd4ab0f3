"""CLI entry-point for modeline_bridge.

Usage:
    python -m modeline_bridge <file>
    python -m modeline_bridge <file> --json
    python -m modeline_bridge <file> --config modeline.yaml
    python -m modeline_bridge aliases [--config FILE] [--json]
    python -m modeline_bridge validate <config.yaml>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jsonschema
import yaml

from modeline_bridge import __version__
from modeline_bridge.api import build_dictionary, load_config, resolve_file
from modeline_bridge.contracts.load import validate_instance
from modeline_bridge.core.config import CONFIG_SCHEMA, ConfigError
from modeline_bridge.utils.exit_codes import ExitCode
from modeline_bridge.utils.json_norm import stable_json_dump


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def _print_human(result_dict: dict) -> None:
    """Human summary on stderr; stdout stays free for --json."""
    source = result_dict.get("source", "")
    applied = result_dict.get("applied", [])
    if not applied:
        print(f"{source}: no mode-line settings", file=sys.stderr)
        return
    print(f"{source}:", file=sys.stderr)
    for option, value in sorted(result_dict.get("settings", {}).items()):
        print(f"  {option} = {value}", file=sys.stderr)


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: $MODELINE_BRIDGE_CONFIG).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log every applied and ignored directive to stderr.",
    )


def _build_default_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="modeline-bridge",
        description="Apply Emacs mode lines as native editor settings.",
    )
    p.add_argument("path", type=Path, help="File whose mode lines to resolve.")
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full result JSON to stdout.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    _add_common(p)
    p.set_defaults(command=None)
    return p


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="modeline-bridge",
        description="Apply Emacs mode lines as native editor settings.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")

    # ── aliases subcommand ──────────────────────────────────────────
    aliases_p = sub.add_parser(
        "aliases",
        help="Print the merged mode alias table.",
    )
    aliases_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the table as JSON.",
    )
    _add_common(aliases_p)

    # ── validate subcommand ─────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate a YAML configuration file against the bundled schema.",
    )
    val_p.add_argument("config_file", type=Path, help="Path to the YAML file.")
    return p


def _handle_aliases(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    table = build_dictionary(config).as_dict()
    if args.json_out:
        stable_json_dump(table, sys.stdout)
    else:
        width = max((len(k) for k in table), default=0)
        for alias, canonical in table.items():
            print(f"{alias:<{width}}  {canonical}")
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    # Exit code contract:
    #   1 = schema violation
    #   2 = unreadable file / invalid YAML
    try:
        data = yaml.safe_load(args.config_file.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    try:
        validate_instance(data, CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    print("OK")
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an ``ExitCode``."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    # A first positional that is not a subcommand is a file path, so
    # `modeline-bridge <file> --json` works without a subcommand.
    known_commands = {"aliases", "validate"}
    first_positional = next(
        (a for a in effective_argv if not a.startswith("-")), None
    )
    if first_positional and first_positional not in known_commands:
        args = _build_default_parser().parse_args(effective_argv)
    else:
        args = _build_parser().parse_args(effective_argv)

    if args.command == "validate":
        return _handle_validate(args)

    _configure_logging(bool(getattr(args, "verbose", False)))

    if args.command == "aliases":
        return _handle_aliases(args)

    # ── default positional-path mode ────────────────────────────────
    if getattr(args, "path", None) is None:
        print("error: please provide a file or use a subcommand.", file=sys.stderr)
        return ExitCode.ERROR

    target: Path = args.path
    if not target.is_file():
        print(f"error: not a file: {target}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        config = load_config(args.config)
        result_dict = resolve_file(target, config=config)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except OSError as e:
        print(f"error: cannot read {target}: {e}", file=sys.stderr)
        return ExitCode.ERROR

    _print_human(result_dict)
    if args.json_out:
        stable_json_dump(result_dict, sys.stdout)
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
