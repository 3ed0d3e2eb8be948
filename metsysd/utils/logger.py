import logging
import sys

# Prevent multiple handler registrations
_CONFIGURED = False


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure unified metsysd logging.

    Safe to call more than once: later calls only adjust the level.

    Args:
        level: Level for the ``metsysd`` logger (default WARNING)
    """
    global _CONFIGURED

    root_logger = logging.getLogger("metsysd")
    root_logger.setLevel(level)
    if _CONFIGURED:
        return

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"metsysd.{name}")
