from __future__ import annotations

import logging
import sys

LOGGER_NAME = "askgpt"
LOG_FORMAT = "%(levelname)s\t%(asctime)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class _MaxLevel(logging.Filter):
    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def build_logger(debug: bool = False, name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return a logger writing INFO/DEBUG to stdout and WARNING+ to stderr.
    Handlers are replaced on every call so repeated runs in one process don't stack them.
    """
    log = logging.getLogger(name)
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.propagate = False
    for h in list(log.handlers):
        log.removeHandler(h)

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    out = logging.StreamHandler(sys.stdout)
    out.setLevel(logging.DEBUG)
    out.addFilter(_MaxLevel(logging.WARNING))
    out.setFormatter(fmt)

    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    err.setFormatter(fmt)

    log.addHandler(out)
    log.addHandler(err)
    return log
