from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Route log records to stderr; calling it again replaces the previous setup."""
    logging.basicConfig(level=level, format=_FORMAT, stream=sys.stderr, force=True)
