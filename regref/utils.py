import logging
from regref.config import auth


## logging

def makeSimpleLogger(name, level=logging.INFO):
    logger = logging.getLogger(name)
    logger.setLevel(level)
    ch = logging.StreamHandler()
    fmt = ('[%(asctime)s] - %(levelname)8s - '
           '%(name)14s - '
           '%(filename)16s:%(lineno)-4d - '
           '%(message)s')
    formatter = logging.Formatter(fmt)
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    return logger


def _log_level(value):
    if value is None:
        return logging.INFO

    if isinstance(value, int):
        return value

    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        # unknown names would make setLevel raise at import
        return logging.INFO

    return level


log = makeSimpleLogger('regref', level=_log_level(auth.get('log-level')))
