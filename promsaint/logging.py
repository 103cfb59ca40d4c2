import copy
import logging
import logging.config
import os
import sys

from pythonjsonlogger import jsonlogger

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOG_FORMAT_JSON = "json"
LOG_FORMAT_TEXT = "text"

LOG_FORMAT = os.environ.get("LOG_FORMAT", LOG_FORMAT_JSON)

# attributes every LogRecord has, anything else came in through `extra`
_RESERVED_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class TextFormatter(logging.Formatter):
    """Plain text lines with the record's extra fields appended as [key: value]."""

    def format(self, record):
        message = super().format(record)
        extra_info = " ".join(
            f"[{k}: {v}]"
            for k, v in record.__dict__.items()
            if k not in _RESERVED_RECORD_ATTRS
        )
        return f"{message} {extra_info}" if extra_info else message


class CommandLineLoggerAdapter(logging.LoggerAdapter):
    """Attaches the full process command line to every record."""

    def __init__(self, logger, argv=None):
        super().__init__(logger, {})
        self.cmdline = " ".join(sys.argv if argv is None else argv)

    def process(self, msg, kwargs):
        kwargs = kwargs.copy() if kwargs else {}
        if "extra" not in kwargs:
            kwargs["extra"] = {}
        kwargs["extra"].update({"cmdline": self.cmdline})
        return msg, kwargs


def get_logger(name, argv=None):
    return CommandLineLoggerAdapter(logging.getLogger(name), argv)


CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": jsonlogger.JsonFormatter,
            "fmt": "%(asctime)s %(message)s %(levelname)s %(name)s",
            "rename_fields": {"levelname": "level", "asctime": "time"},
        },
        "text": {
            "()": TextFormatter,
            "fmt": "%(asctime)s %(levelname)s %(name)s - %(message)s",
        },
    },
    "handlers": {
        "default": {
            "level": "DEBUG",
            "formatter": "json" if LOG_FORMAT == LOG_FORMAT_JSON else "text",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "promsaint": {
            "handlers": ["default"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
    },
}


def setup_logging(log_file=None):
    """Configure the promsaint logger.

    When ``log_file`` is given, records are appended to it as text instead of
    being written to stdout.
    """
    config = copy.deepcopy(CONFIG)
    if log_file:
        config["handlers"] = {
            "file": {
                "level": "DEBUG",
                "formatter": "text",
                "class": "logging.FileHandler",
                "filename": log_file,
                "mode": "a",
                "encoding": "utf-8",
            }
        }
        config["loggers"]["promsaint"]["handlers"] = ["file"]

    logging.config.dictConfig(config)
