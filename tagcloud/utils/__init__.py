"""
utils - Shared helpers for the tag cloud generator

Provides the component logger factory used by the pipeline
and the entry point.
"""

import os
import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name, filename=None, log_dir="Logs"):
    """
    Return a named logger writing to Logs/<filename>.log and the console.

    Args:
        name: Logger name shown in every record (e.g. "GENERATOR")
        filename: Log file stem, defaults to the logger name
        log_dir: Directory holding the log files
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    log_path = os.path.abspath(os.path.join(log_dir, f"{filename if filename else name}.log"))

    # Reuse the handlers while they still point at the same file
    if any(getattr(handler, "baseFilename", None) == log_path for handler in logger.handlers):
        return logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    formatter = logging.Formatter(LOG_FORMAT)

    fh = logging.FileHandler(log_path)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)

    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger
