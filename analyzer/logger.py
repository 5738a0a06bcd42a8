import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from datetime import datetime
from typing import Any, Mapping

LOG_FORMAT = "[{asctime}] [{levelname:^7}] [{name}] {message}"


def rotate_previous_log(log_file: Path, date_format: str) -> None:
    if not log_file.exists():
        return
    # Keep the previous run next to the new log
    timestamp = datetime.now().strftime(date_format).replace(":", "-").replace(" ", "_")
    backup_log = log_file.with_name(f"{timestamp}.log")
    try:
        log_file.rename(backup_log)
    except OSError as e:
        logging.getLogger(__name__).warning(f"Failed to rotate log: {e}")


def setup_logging(config: Mapping[str, Any]) -> None:
    settings = config.get("logging", {})

    log_date_format = os.environ.get("DATETIME_FORMAT", settings.get("datetime_format", "%Y-%m-%d %H:%M:%S"))
    log_level = os.environ.get("LOG_LEVEL", settings.get("level") or "WARNING").upper()
    level = getattr(logging, log_level, logging.WARNING)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=log_date_format, style="{")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    log_file = settings.get("file")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        rotate_previous_log(log_path, log_date_format)

        file_handler = RotatingFileHandler(
            filename=log_path,
            mode='a',
            maxBytes=1_000_000,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers)

    logging.getLogger(__name__).debug(f"Logging initialized at level {log_level}")
