import logging
import os

try:
    _log_levels = dict(logging.getLevelNamesMapping())
except AttributeError:
    # getLevelNamesMapping is new in python 3.11
    _log_levels = {name: num for num, name in logging._levelToName.items()}
# DD_LOG_LEVEL also takes the agent's TRACE, WARN and OFF
_log_levels.update({"TRACE": 5, "WARN": logging.WARNING, "OFF": 100})


def initialize_logging(name):
    """Set the level of the `name` logger from DD_LOG_LEVEL, INFO if unset."""
    logger = logging.getLogger(name)
    level_name = (os.environ.get("DD_LOG_LEVEL") or "INFO").upper()
    level = _log_levels.get(level_name)
    if level is None:
        logger.setLevel(logging.INFO)
        logger.warning("Invalid log level: %s Defaulting to INFO", level_name)
        return logger

    logger.setLevel(level)
    return logger
