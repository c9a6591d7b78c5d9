# farmstand/core/logging.py
import logging
import sys
import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s%(reset)s %(cyan)s%(name)s%(reset)s | %(message)s"

LEVEL_COLORS = {
    "DEBUG": "white",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Server loggers that ship their own handlers; they are re-parented onto ours
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_handler(stream=None) -> logging.Handler:
    handler = colorlog.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", log_colors=LEVEL_COLORS)
    )
    return handler


def configure_logging(level=logging.INFO, stream=None) -> logging.Handler:
    """Install one colored handler on the root logger and route the server's loggers through it."""
    handler = build_handler(stream)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.propagate = True
        server_logger.setLevel(level)

    # access lines for every static asset drown the app's own messages
    if level > logging.DEBUG:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return handler
