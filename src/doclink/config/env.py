"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX: Final[str] = "DOCLINK_"


def environment_values(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return ``DOCLINK_*`` variables translated to dotted configuration keys.

    ``DOCLINK_SIMILARITY__MEASURES`` becomes ``similarity.measures``. Blank values
    are ignored so an empty variable never shadows a file value.
    """

    source = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for name, value in source.items():
        if not name.startswith(ENV_PREFIX) or not value.strip():
            continue
        key = name.removeprefix(ENV_PREFIX).lower().replace("__", ".")
        values[key] = value.strip()
    return values
