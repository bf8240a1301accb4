import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | {message}"

logger.remove()
logger.add(
    sys.stderr,
    format=CONSOLE_FORMAT,
    level="INFO",
    colorize=None,
)


def add_file_sink(log_dir: str | Path) -> int:
    log_file = Path(log_dir) / "docsync_{time}.log"
    return logger.add(
        log_file,
        rotation="16 MB",
        retention="10 days",
        compression="zip",
        encoding="utf-8",
        level="DEBUG",
    )
