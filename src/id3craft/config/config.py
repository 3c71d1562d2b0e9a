"""Configuration management for id3craft."""

from __future__ import annotations

import math
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from id3craft.config.paths import default_config_path
from id3craft.features.audio.domain.silence import (
    DEFAULT_DURATION_SECONDS as DEFAULT_SILENCE_DURATION_SECONDS,
)
from id3craft.features.tagging.domain.header import (
    DEFAULT_PADDING_SIZE as DEFAULT_ID3V2_PADDING_SIZE,
)
from id3craft.platform.logging import logger
from id3craft.shared.errors import ValidationError


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Tag writer defaults
    write_id3v1: bool = True
    write_id3v2: bool = True
    id3v2_padding_size: int = DEFAULT_ID3V2_PADDING_SIZE

    # Length of the silent payload produced by ``id3craft create``
    silence_duration_seconds: float = DEFAULT_SILENCE_DURATION_SECONDS

    def __post_init__(self) -> None:
        """Convert string paths and validate numeric settings.

        Only fields flagged with ``metadata={"path": True}`` by ``_path_field``
        are converted to ``Path``.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if isinstance(self.id3v2_padding_size, bool) or not isinstance(self.id3v2_padding_size, int):
            raise ValidationError("id3v2_padding_size must be an integer")
        if self.id3v2_padding_size < 0:
            raise ValidationError("id3v2_padding_size must not be negative")

        duration = self.silence_duration_seconds
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            raise ValidationError("silence_duration_seconds must be a number")
        if not math.isfinite(duration) or duration <= 0:
            raise ValidationError("silence_duration_seconds must be positive")

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# id3craft Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/id3craft.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Which tags to write (both default to true)")
        lines.append(f"write_id3v1 = {self._format_toml_value(config['write_id3v1'])}")
        lines.append(f"write_id3v2 = {self._format_toml_value(config['write_id3v2'])}")
        lines.append("")

        lines.append("# Zero bytes reserved after the ID3v2 frames for in-place edits")
        lines.append(
            f"id3v2_padding_size = {self._format_toml_value(config['id3v2_padding_size'])}"
        )
        lines.append("")

        lines.append("# Duration of the silent audio generated by 'id3craft create'")
        lines.append(
            "silence_duration_seconds = "
            f"{self._format_toml_value(config['silence_duration_seconds'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default location.

        A default configuration file is created when none exists yet.

        Raises:
            ValidationError: If the file holds unknown keys or invalid values.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        config_file = path or default_config_path()

        if not config_file.exists():
            config = cls()
            _ = config.save(config_file)
            logger.info("Created default configuration at %s", config_file)
            return config

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ValidationError(f"Unknown configuration keys: {', '.join(unknown)}")

        logger.info("Configuration loaded from %s", config_file)
        return cls(**config_dict)


__all__ = [
    "Config",
    "DEFAULT_ID3V2_PADDING_SIZE",
    "DEFAULT_SILENCE_DURATION_SECONDS",
]
