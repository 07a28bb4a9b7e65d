import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter


def configure_logging(
    level: str = "INFO", json_format: bool = True, log_file: str = "logs/modconfig.log"
) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)

    stream_handler = logging.StreamHandler(sys.stderr)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")

    formatter: logging.Formatter
    if json_format:
        formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    stream_handler.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.addHandler(stream_handler)
    root.addHandler(file_handler)
