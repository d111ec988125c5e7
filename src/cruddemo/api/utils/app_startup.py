import logging
import sys
from pathlib import Path

from loguru import logger

from src.cruddemo.runtime.config.config_data import LoggingConfig
from src.cruddemo.runtime.context import get_config

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Quiet by default; uvicorn access lines duplicate the request middleware.
_STDLIB_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.CRITICAL,
}


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == "uvicorn.access":
            return
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, verbose: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)
    is_json = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if is_json else PLAIN_FORMAT,
        serialize=is_json,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        enqueue=True,
        backtrace=verbose,
        diagnose=verbose,
    )


def configure_logging() -> None:
    """Install the loguru sinks described by the ``logging`` config section."""
    main_config = get_config()
    cfg = main_config.logging
    env = main_config.app.environment
    verbose = env != "production"

    logger.remove()
    logger.configure(extra={"request_id": "-"})

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=PLAIN_FORMAT,
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )
    if cfg.file:
        _add_file_sink(cfg, verbose)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True
    for name, level in _STDLIB_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    logger.info(
        "Logging configured (level={}, format={}, file={}, environment={})",
        cfg.level,
        cfg.format,
        cfg.file,
        env,
    )
