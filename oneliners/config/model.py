from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

from oneliners.core.errors import ConfigError, TextDecodeError
from oneliners.idioms.text import text_codec_name

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_OUTPUT_FORMATS = ("text", "json")
_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _expand(value: Any, *, path: str) -> Any:
    """Replace ${VAR} in a string value; missing or empty variables are errors."""

    if not isinstance(value, str):
        return value

    def lookup(match: re.Match[str]) -> str:
        var = match.group(1)
        resolved = os.environ.get(var)
        if not resolved:
            state = "not set" if resolved is None else "empty"
            raise ConfigError(f"environment variable {var} is {state}", path=path)
        return resolved

    return _PLACEHOLDER.sub(lookup, value)


def _section(raw: Mapping[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError("must be a mapping", path=key)
    return {str(k): _expand(v, path=f"{key}.{k}") for k, v in value.items()}


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class OutputConfig:
    format: str = "text"  # noqa: A003
    indent: int | None = None
    ensure_ascii: bool = False


@dataclass(frozen=True)
class TextConfig:
    encoding: str = "utf-8"


@dataclass(frozen=True)
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    text: TextConfig = field(default_factory=TextConfig)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> AppConfig:
        """Build a validated config from a loaded mapping.

        `${VAR}` placeholders in the values of the known sections are
        expanded from the environment first. Missing sections and keys fall
        back to defaults; unknown top-level sections are ignored untouched.

        Raises:
            ConfigError: On the first invalid field, with its dotted path.
        """

        logging_raw = _section(raw, "logging")
        level = logging_raw.get("level", LoggingConfig.level)
        if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"must be one of {', '.join(_LOG_LEVELS)}", path="logging.level")

        output_raw = _section(raw, "output")
        fmt = output_raw.get("format", OutputConfig.format)
        if fmt not in _OUTPUT_FORMATS:
            raise ConfigError(f"must be one of {', '.join(_OUTPUT_FORMATS)}", path="output.format")
        indent = output_raw.get("indent", OutputConfig.indent)
        # bool is an int subclass; reject it explicitly.
        if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
            raise ConfigError("must be a non-negative integer or null", path="output.indent")
        ensure_ascii = output_raw.get("ensure_ascii", OutputConfig.ensure_ascii)
        if not isinstance(ensure_ascii, bool):
            raise ConfigError("must be a boolean", path="output.ensure_ascii")

        text_raw = _section(raw, "text")
        encoding = text_raw.get("encoding", TextConfig.encoding)
        if not isinstance(encoding, str) or not encoding.strip():
            raise ConfigError("must be a non-empty string", path="text.encoding")
        try:
            text_codec_name(encoding)
        except TextDecodeError as e:
            raise ConfigError(str(e), path="text.encoding") from e

        return cls(
            logging=LoggingConfig(level=level.upper()),
            output=OutputConfig(format=fmt, indent=indent, ensure_ascii=ensure_ascii),
            text=TextConfig(encoding=encoding),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
