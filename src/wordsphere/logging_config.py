"""
Logging Configuration
Sets up the global logger for the word cloud.

Relayouts and reconfiguration are logged on the package logger. The animation
driver runs once per frame, so its logger has its own level and stays quiet
unless frame-level tracing is asked for.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "wordsphere"
ANIMATION_LOGGER = "wordsphere.controller.animation"

# Per-frame messages only show up when explicitly requested
DEFAULT_ANIMATION_LEVEL = logging.WARNING


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    animation_level: int = DEFAULT_ANIMATION_LEVEL
) -> None:
    """
    Configures the logger for the 'wordsphere' namespace.

    Args:
        level: Logging level for the package (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        animation_level: Level of the per-frame animation logger. Pass
            logging.DEBUG to trace pause/resume and tick counts.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers when main() runs more than once in a process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.getLogger(ANIMATION_LOGGER).setLevel(animation_level)

    logger.info(
        f"Logging initialized (package: {logging.getLevelName(level)}, "
        f"animation: {logging.getLevelName(animation_level)})."
    )
