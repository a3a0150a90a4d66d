# logger.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"

logger = logging.getLogger("hackasm")


def setup_logging(verbose=False, logfile=None):
    level = logging.DEBUG if verbose else logging.INFO

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console)

    if logfile:
        fh = logging.FileHandler(logfile, mode="w", encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)

    logger.setLevel(level)
    return logger
