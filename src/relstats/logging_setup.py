"""Root logger configuration from InternalConfig."""

import logging
from pathlib import Path

from relstats.schemas import InternalConfig

__all__ = ['configure_logging']

logger = logging.getLogger(__name__)


def configure_logging(config: InternalConfig) -> logging.Logger:
    """Install console (and optional file) handlers on the root logger.

    Existing root handlers are removed first, so calling this twice does
    not duplicate output.

    Parameters
    ----------
    config : InternalConfig
        Uses ``config.logging.level``, ``log_file``, ``format`` and
        ``datefmt``.

    Returns
    -------
    logging.Logger
        The configured root logger.
    """
    log_level = getattr(logging, config.logging.level)
    formatter = logging.Formatter(fmt=config.logging.format, datefmt=config.logging.datefmt)

    # Clear existing handlers and add new ones
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    log_path = None
    if config.logging.log_file:
        log_path = Path(config.logging.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.info("Logging: level=%s, file=%s", config.logging.level, log_path)
    return root
