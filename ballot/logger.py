"""Named loggers for the ballot package, with console and optional file output."""

import logging
import os

_LOGGERS: dict[str, logging.Logger] = {}

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(
    name: str,
    *,
    level: str | int = "INFO",
    logfile: str | os.PathLike | None = None,
) -> logging.Logger:
    """
    Create or retrieve a named logger under the ``ballot`` namespace.

    Parameters:
    - name: logger namespace (e.g. session-1, events)
    - level: threshold for the logger
    - logfile: optional path of a file that receives the same records

    The console handler is attached once per name. A file handler is
    attached for every distinct logfile requested, so asking again for a
    cached logger with a new path still routes records there. Child loggers
    (``logger.getChild("tally")``) carry no handlers of their own and write
    through this one.
    """
    qualified = name if name.startswith("ballot") else f"ballot.{name}"
    formatter = logging.Formatter(FORMAT)

    logger = _LOGGERS.get(qualified)
    if logger is None:
        logger = logging.getLogger(qualified)

        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

        logger.propagate = False
        _LOGGERS[qualified] = logger

    logger.setLevel(level)

    if logfile:
        path = os.path.abspath(logfile)
        attached = {
            h.baseFilename for h in logger.handlers
            if isinstance(h, logging.FileHandler)
        }
        if path not in attached:
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
