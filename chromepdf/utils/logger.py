import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "chromepdf", level: int = logging.INFO, stream=None):
    """
    Configure the package logger once and return it.

    Module loggers (chromepdf.converter, chromepdf.browser...) propagate
    into it. Repeat calls only adjust the level, so `-v` still applies
    when the handler already exists.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        # own handler, keep records out of the root logger
        logger.propagate = False

    return logger
