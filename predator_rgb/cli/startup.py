from __future__ import annotations

import logging
import os


def configure_logging(*, verbose: bool = False) -> None:
    """Configure root logging for the CLI.

    If callers already configured logging handlers, we don't override them.
    """

    if logging.getLogger().handlers:
        return

    debug = verbose or bool(os.environ.get("PREDATOR_RGB_DEBUG"))
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
