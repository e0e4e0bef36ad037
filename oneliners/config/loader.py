"""Read YAML config files and layer them by profile.

Placeholder expansion and validation happen in `AppConfig.from_mapping`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import yaml
from dotenv import load_dotenv

from oneliners.core.errors import ConfigError

# Files per profile, lowest precedence first.
PROFILES: dict[str, tuple[str, ...]] = {
    "app": ("app.yaml",),
    "dev": ("app.yaml", "dev.yaml"),
}


def _layer(lower: dict[str, Any], upper: dict[str, Any]) -> dict[str, Any]:
    out = dict(lower)
    for key, value in upper.items():
        below = out.get(key)
        out[key] = _layer(below, value) if isinstance(below, dict) and isinstance(value, dict) else value
    return out


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read YAML config: {e}", path=str(path)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("top level must be a mapping", path=str(path))
    return data


def load_config(
    paths: str | Path | Iterable[str | Path],
    *,
    load_dotenv_file: bool = True,
    dotenv_path: Path | None = None,
) -> dict[str, Any]:
    """Read one or more YAML files; later files override earlier ones key by key.

    A `.env` file (default: the working directory's) is loaded first so that
    `${VAR}` placeholders can resolve from it; variables already set win.
    """

    files = [Path(paths)] if isinstance(paths, (str, Path)) else [Path(p) for p in paths]
    if not files:
        raise ConfigError("no config files given")

    if load_dotenv_file:
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)

    merged: dict[str, Any] = {}
    for path in files:
        merged = _layer(merged, _read_yaml(path))
    return merged


def profile_paths(profile: str, configs_dir: Path) -> list[Path]:
    names = PROFILES.get(profile)
    if names is None:
        raise ConfigError(f"unknown profile {profile!r}; expected one of {', '.join(PROFILES)}")
    return [configs_dir / name for name in names]
