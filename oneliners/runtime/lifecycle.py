from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml

from oneliners import __version__
from oneliners.config.loader import load_config, profile_paths
from oneliners.config.model import AppConfig, OutputConfig
from oneliners.core.errors import ConfigError, TextDecodeError, UsageError
from oneliners.idioms import concat, reverse, reverse_bytes, select
from oneliners.observability.logging import configure_logging


logger = logging.getLogger(__name__)

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oneliners",
        description="Readable one-line idioms: select, reverse, concat",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=None,
        help="log level for this run; wins over logging.level in the config",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--config",
        type=Path,
        help="read exactly this YAML file instead of a profile",
    )
    group.add_argument(
        "--profile",
        choices=["app", "dev"],
        default=None,
        help="layer ./configs/*.yaml by profile: app = app.yaml, dev = app.yaml + dev.yaml",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    select_p = sub.add_parser("select", help="Pick one of two values by a boolean")
    select_p.add_argument("condition", help="true/false, yes/no, on/off or 1/0")
    select_p.add_argument("if_true")
    select_p.add_argument("if_false")

    reverse_p = sub.add_parser("reverse", help="Reverse text character by character")
    reverse_p.add_argument("text", nargs="?", default="-", help="Text to reverse; '-' or omitted reads stdin")

    concat_p = sub.add_parser("concat", help="Concatenate sequences given as YAML/JSON lists")
    concat_p.add_argument("sequences", nargs="+", metavar="SEQ", help='e.g. "[1, 2, 3]"')

    sub.add_parser("print-config", help="Load and print the validated config")

    return parser


def _parse_condition(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise UsageError(f"invalid condition {raw!r}; expected true/false, yes/no, on/off or 1/0")


def _parse_sequence(raw: str, *, index: int) -> list[Any]:
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise UsageError(f"SEQ #{index} is not valid YAML/JSON: {e}") from e
    if not isinstance(value, list):
        raise UsageError(f"SEQ #{index} must be a list like [1, 2, 3], got {raw!r}")
    return value


def _reverse_stdin(encoding: str) -> str:
    reversed_text = reverse_bytes(sys.stdin.buffer.read(), encoding=encoding).decode(encoding)
    # The input's final line ending now leads the reversed text; drop it once.
    for ending in ("\n\r", "\n"):
        if reversed_text.startswith(ending):
            return reversed_text[len(ending):]
    return reversed_text


def _resolve_config_paths(ns: argparse.Namespace, *, configs_dir: Path) -> list[Path]:
    if ns.config is not None:
        return [ns.config]
    if ns.profile is not None:
        return profile_paths(ns.profile, configs_dir)
    default = configs_dir / "app.yaml"
    return [default] if default.exists() else []


def _render(result: Any, output: OutputConfig) -> str:
    if output.format == "text" and isinstance(result, str):
        return result
    return json.dumps(result, ensure_ascii=output.ensure_ascii, indent=output.indent, default=str)


def _run_command(ns: argparse.Namespace, cfg: AppConfig) -> Any:
    if ns.command == "select":
        return select(_parse_condition(ns.condition), ns.if_true, ns.if_false)

    if ns.command == "reverse":
        if ns.text != "-":
            return reverse(ns.text)
        return _reverse_stdin(cfg.text.encoding)

    if ns.command == "concat":
        parsed = [_parse_sequence(raw, index=i) for i, raw in enumerate(ns.sequences, start=1)]
        return concat(parsed)

    if ns.command == "print-config":
        return cfg.to_dict()

    raise UsageError(f"unknown command: {ns.command}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one `oneliners` command and return its exit status.

    Exit codes: 0 on success, 2 for usage/config/decode errors, 1 otherwise.
    """

    parser = _build_parser()

    try:
        ns = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as e:
        # --help, --version and usage errors; argparse already wrote the text.
        return e.code if isinstance(e.code, int) else 1

    configure_logging(level=ns.log_level or "INFO")

    configs_dir = Path.cwd() / "configs"
    try:
        config_paths = _resolve_config_paths(ns, configs_dir=configs_dir)
        raw = load_config(config_paths) if config_paths else {}
        cfg = AppConfig.from_mapping(raw)

        if ns.log_level is None:
            configure_logging(level=cfg.logging.level)

        logger.info("config_loaded", extra={"config_files": [str(p) for p in config_paths]})

        result = _run_command(ns, cfg)
        sys.stdout.write(_render(result, cfg.output))
        sys.stdout.write("\n")
        logger.info("command_done", extra={"command": ns.command})
        return 0

    except (ConfigError, UsageError, TextDecodeError) as e:
        kind = type(e).__name__
        logger.error("command_failed", extra={"command": ns.command, "error_type": kind, "error": str(e)})
        sys.stderr.write(f"{kind}: {e}\n")
        return 2
    except MemoryError:
        raise
    except Exception as e:  # noqa: BLE001
        logger.exception("fatal_error", extra={"command": ns.command})
        sys.stderr.write(f"Fatal error: {e}\n")
        return 1
