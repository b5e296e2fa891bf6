import sys
from pathlib import Path
from loguru import logger
from dataaccess.config import settings


class LogConfig:
    """Global logging configuration using Loguru."""
    @classmethod
    def setup_logging(cls, log_dir: str = None, level: str = None):
        log_dir = Path(log_dir or settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        level = level or settings.LOG_LEVEL

        logger.remove()

        logger.add(
            sys.stdout,
            enqueue=True,
            backtrace=True,
            diagnose=settings.DEBUG,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "<magenta>{extra[component]}</magenta> - <level>{message}</level>"
            ),
            level=level,
        )

        logger.add(
            log_dir / "dataaccess_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="30 days",
            compression="zip",
            enqueue=True,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {extra[component]} - {message}",
            level="DEBUG",
        )

        logger.add(
            log_dir / "error_{time:YYYY-MM-DD}.log",
            level="ERROR",
            rotation="100 MB",
            enqueue=True,
        )

        logger.configure(extra={"component": "dataaccess"})


def get_logger(name: str = None):
    """Get logger instance bound to a component name."""
    if name:
        return logger.bind(component=name)
    return logger.bind(component="dataaccess")
