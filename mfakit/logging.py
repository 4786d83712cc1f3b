import logging
import sys
import time

from pythonjsonlogger.json import JsonFormatter

FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class UTCJsonFormatter(JsonFormatter):
    converter = time.gmtime


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Route every logger to stdout; JSON lines unless `json_output` is off."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(UTCJsonFormatter(FORMAT))
    else:
        handler.setFormatter(logging.Formatter(FORMAT))
    root.addHandler(handler)

    logging.getLogger("httpx").setLevel("WARNING")
