"""Default values for headerprep."""

from enum import IntEnum


class EXITCODES(IntEnum):
    """Exit codes for headerprep."""

    SUCCESS = 0
    """Successful execution."""
    ERROR = 1
    """General unspecified error."""
    CONFIGURATION_ERROR = 2
    """An error in the configuration."""


DELIMITER_KEY = "delimiter"
HEADERS_KEY = "headers"
HEADER_LIST_SEPARATOR = ","
HEADER_NAME_SEPARATOR = ":"

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_FORMAT = "%(asctime)-15s %(process)-6s %(name)-10s %(levelname)-8s: %(message)s"
DEFAULT_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "INFO"

# dictconfig as described in
# https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
DEFAULT_LOG_CONFIG: dict = {
    "version": 1,
    "formatters": {
        "headerprep": {
            "class": "headerprep.util.logging.HeaderprepFormatter",
            "format": DEFAULT_LOG_FORMAT,
            "datefmt": DEFAULT_LOG_DATE_FORMAT,
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "headerprep",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "root": {"level": DEFAULT_LOG_LEVEL, "handlers": ["console"]},
    },
    "filters": {},
    "disable_existing_loggers": False,
}
