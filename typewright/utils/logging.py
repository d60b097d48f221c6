"""loguru sinks for the typewright command line."""

from pathlib import Path
import sys

from loguru import logger

# Keystroke traces need the module and line that produced them
DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
PLAIN_FORMAT = "<level>{message}</level>"


def level_name(verbose: bool = False, debug: bool = False) -> str:
    """Minimum level for the given flags; debug wins over verbose."""
    if debug:
        return "DEBUG"
    return "INFO" if verbose else "WARNING"


def setup_logger(verbose: bool = False, debug: bool = False) -> int:
    """Replace loguru's default handler with a stderr handler.

    Returns:
        The handler id
    """
    logger.remove()
    return logger.add(
        sys.stderr,
        format=DEBUG_FORMAT if debug else PLAIN_FORMAT,
        level=level_name(verbose, debug),
        colorize=True,
    )


def add_log_file_handler(log_file: str | Path, verbose: bool = False, debug: bool = False) -> int:
    """Also write log records to log_file, creating its directory.

    Markup tags in the formats are stripped since the file is not colorized.

    Returns:
        The handler id
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logger.add(
        log_path,
        format=DEBUG_FORMAT if debug else PLAIN_FORMAT,
        level=level_name(verbose, debug),
        colorize=False,
        encoding="utf-8",
    )
