"""Package logger.

Library code only ever logs through :data:`logger`; the CLI decides whether
anything is actually emitted (``--verbose``).
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("ezpoon")
logger.addHandler(logging.NullHandler())


def enable_verbose_logging() -> None:
    """Attach a stderr handler at DEBUG level (idempotent)."""
    for handler in logger.handlers:
        if getattr(handler, "_ezpoon_verbose", False):
            return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler._ezpoon_verbose = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
