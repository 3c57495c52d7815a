"""
Logging setup for the Bookstore Service
"""
import logging.config
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def build_logging_config(level: str = "INFO", log_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Build a dictConfig mapping for the service and uvicorn loggers

    Records go to stdout, and also to ``log_file`` when it is set.
    """
    level = level.upper()
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "service",
            "stream": "ext://sys.stdout",
        }
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "service",
            "filename": log_file,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"service": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers)},
        "loggers": {
            # uvicorn installs its own handlers; route them through ours
            "uvicorn": {"level": level, "handlers": [], "propagate": True},
            "uvicorn.access": {"level": level, "handlers": [], "propagate": True},
            "uvicorn.error": {"level": level, "handlers": [], "propagate": True},
        },
    }


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Apply the service logging configuration"""
    logging.config.dictConfig(build_logging_config(level, log_file))
