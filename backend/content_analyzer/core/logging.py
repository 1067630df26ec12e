"""Logging setup shared by the API and the bootstrap entry point."""

import logging
import sys

_logging_configured = False

NOISY_LOGGERS = ("pdfminer", "PIL", "httpx", "httpcore", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    global _logging_configured
    if _logging_configured:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
