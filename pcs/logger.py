import logging
import sys


def setup_logger(name="pcs", level=logging.INFO, log_file=None):
    """Attach one formatted handler to the ``name`` logger and return it.

    Logs go to stderr unless ``log_file`` is given. Calling this twice for the
    same logger does not stack handlers.
    """
    if log_file is None:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.FileHandler(log_file)
    formatter = logging.Formatter(
        "%(asctime)s:[%(filename)s:%(lineno)s]:[%(levelname)s]:%(message)s"
    )
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)

    return logger
