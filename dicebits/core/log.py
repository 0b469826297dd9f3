"""
dicebits structured logging.

Provides a consistent logging interface for the core modules.
The generated secret is written to stdout by cli.py and never goes through logging.
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'dicebits'."""
    return logging.getLogger(f'dicebits.{name}')


def setup_logging(level=logging.WARNING, log_file=None):
    """
    Configure the dicebits root logger.

    Handlers installed by a previous call are replaced, so calling this
    more than once in a process does not duplicate records.

    Args:
        level: Logging level or level name (default WARNING)
        log_file: Optional file path for file logging
    """
    logger = logging.getLogger('dicebits')
    logger.setLevel(level)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    fmt = logging.Formatter('%(asctime)s [%(name)s] %(levelname)s: %(message)s')

    handler = logging.StreamHandler()
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    if log_file:
        try:
            fh = logging.FileHandler(log_file)
        except OSError as e:
            logger.warning("Cannot open log file %s: %s", log_file, e)
        else:
            fh.setFormatter(fmt)
            logger.addHandler(fh)

    return logger
