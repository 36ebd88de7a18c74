"""Loader for plain ``key=value`` configuration files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import ConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from pathlib import Path


def load_config_file(path: Path) -> dict[str, str]:
    """Read ``path`` as ``key=value`` lines.

    Blank lines and lines starting with ``#`` are skipped. Later keys win.
    """

    if not path.is_file():
        raise MissingConfigurationError(f"Configuration file not found: {path}")

    values: dict[str, str] = {}
    with path.open(encoding="utf-8") as handle:
        for line_number, raw_line in enumerate(handle, start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            key, separator, value = line.partition("=")
            if not separator or not key.strip():
                raise ConfigurationError(
                    f"Malformed configuration line {line_number} in {path}: {raw_line.rstrip()}"
                )
            values[key.strip()] = value.strip()
    return values
