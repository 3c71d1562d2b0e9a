"""Where id3craft keeps its config and log files.

Everything lives beside the checkout so the tool stays portable:

- Config: ``<repo_root>/config/config.toml``; ``ID3CRAFT_CONFIG`` points
  elsewhere when set to a non-blank value.
- Logs: ``<repo_root>/logs/id3craft.log``.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "ID3CRAFT_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the first of explicit path, environment value, default; resolved."""

    if explicit_path is None and env_var:
        override = (env if env is not None else os.environ).get(env_var, "").strip()
        explicit_path = override or None

    chosen = Path(explicit_path) if explicit_path is not None else default_factory()
    return chosen.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor holding a root marker, else the CWD."""

    origin = (start or Path(__file__).resolve()).parent
    return next(
        (
            candidate
            for candidate in (origin, *origin.parents)
            if any((candidate / marker).exists() for marker in _ROOT_MARKERS)
        ),
        Path.cwd(),
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the TOML config location, honouring ``ID3CRAFT_CONFIG``."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Return the rotating log file written by the CLI."""

    return default_log_dir() / "id3craft.log"


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
