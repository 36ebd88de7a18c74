"""Root logger setup for the doclink command line."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger once.

    Merge decisions are logged at DEBUG, skipped measures at WARNING and stage
    progress at INFO. Calling again is a no-op unless ``force`` is set.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
