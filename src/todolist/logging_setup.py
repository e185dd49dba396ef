import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


LOG_FILE_NAME = "todolist.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_CONFIGURED_FLAG = "_todolist_log_file"


def resolve_log_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}.")
    return resolved


def _handlers(log_file: Path) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stdout)
    file_handler = RotatingFileHandler(log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT)
    for handler in (stream_handler, file_handler):
        handler.setFormatter(formatter)
    return [stream_handler, file_handler]


def setup_logging(log_dir: Path = Path("./data/logs"), level: str | int = "INFO") -> Path:
    """Configure the root logger once; later calls only change the level.

    Returns the path of the log file in use.
    """
    log_level = resolve_log_level(level)
    root_logger = logging.getLogger()
    log_file = getattr(root_logger, _CONFIGURED_FLAG, None)

    if log_file is None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME
        root_logger.handlers.clear()
        for handler in _handlers(log_file):
            root_logger.addHandler(handler)
        setattr(root_logger, _CONFIGURED_FLAG, log_file)

    root_logger.setLevel(log_level)
    for handler in root_logger.handlers:
        handler.setLevel(log_level)
    logging.getLogger(__name__).debug("Logging to %s at %s", log_file, logging.getLevelName(log_level))
    return log_file
