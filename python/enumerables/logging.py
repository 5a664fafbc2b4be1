from __future__ import annotations

import logging
import sys

from .constants import DEFAULT_LOGGING_LEVEL, DEFAULT_LOGGING_TARGET
from .errors import InvalidArgumentError

_config_to_level = {
    "crit": logging.CRITICAL,
    "err": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_level_to_name = {
    logging.CRITICAL: "CRIT",
    logging.ERROR: "ERRO",
    logging.WARNING: "WARN",
    logging.INFO: "INFO",
    logging.DEBUG: "DEBG",
}

_targets = ("stdout", "stderr")

for level, name in _level_to_name.items():
    logging.addLevelName(level, name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def start_logging(level: str = DEFAULT_LOGGING_LEVEL, target: str = DEFAULT_LOGGING_TARGET) -> logging.Handler:
    """
    Attach a stream handler to the 'enumerables' logger hierarchy.

    'level' is one of crit, err, warning, info, debug and 'target' one of stdout, stderr.
    Calling it again replaces the handler installed by the previous call.
    """

    if level not in _config_to_level:
        raise InvalidArgumentError(f"unknown logging level '{level}'", "level")
    if target not in _targets:
        raise InvalidArgumentError(f"unknown logging target '{target}'", "target")

    handler = logging.StreamHandler(sys.stdout if target == "stdout" else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("enumerables")
    for old in [h for h in root.handlers if getattr(h, "_enumerables_handler", False)]:
        old.flush()
        old.close()
        root.removeHandler(old)

    setattr(handler, "_enumerables_handler", True)
    root.setLevel(_config_to_level[level])
    root.addHandler(handler)
    return handler
