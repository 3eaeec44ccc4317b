"""Root logger setup for the passivetree command line."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send log records to stderr as ``time level [logger] message``.

    Library modules only create loggers; this is called by entry points. The CLI
    passes ``force=True`` so ``--verbose`` can lower the level after an earlier setup.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
