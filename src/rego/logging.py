"""
    Copyright 2025 Inmanta

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

    Contact: code@inmanta.com
"""

"""
Logging setup for applications built on the rego client.

The client only logs through module level loggers. :func:`configure_logging` installs a handler on the root logger,
as configured in the [logging] section of the config.
"""

import logging
import logging.config
import os
import sys
from typing import Optional, TextIO

import colorlog
import yaml
from colorlog.formatter import LogColors

from rego import config, const

LOGGER = logging.getLogger(__name__)

logging.addLevelName(const.LOG_LEVEL_TRACE, "TRACE")

# Log level per verbosity, from 0 to 4
VERBOSITY_LEVELS = (logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG, const.LOG_LEVEL_TRACE)

LOG_COLORS: LogColors = {
    "TRACE": "purple",
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}

CONSOLE_FORMAT = "%(log_color)s%(name)-25s%(levelname)-8s%(reset)s%(blue)s%(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)-10s %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    return VERBOSITY_LEVELS[max(0, min(verbosity, len(VERBOSITY_LEVELS) - 1))]


def _use_colors(stream: TextIO) -> bool:
    return (hasattr(stream, "isatty") and stream.isatty()) or const.ENVIRON_FORCE_TTY in os.environ


class MultiLineFormatter(colorlog.ColoredFormatter):
    """
    Indents the continuation lines of a record to the start of the message, so multi-line messages like the XML
    bodies logged at trace level stay readable.
    """

    def __init__(self, fmt: Optional[str] = None, *, log_colors: Optional[LogColors] = None, no_color: bool = False):
        super().__init__(fmt, log_colors=log_colors, reset=not no_color, no_color=no_color)
        self._header_formatter = colorlog.ColoredFormatter(fmt, log_colors=log_colors, reset=False, no_color=True)

    def _header_length(self, record: logging.LogRecord) -> int:
        empty = logging.LogRecord(record.name, record.levelno, record.pathname, record.lineno, "", (), None)
        return len(self._header_formatter.format(empty))

    def format(self, record: logging.LogRecord) -> str:
        head, *tail = super().format(record).splitlines(True)
        if not tail:
            return head
        indent = " " * self._header_length(record)
        return head + "".join(indent + line for line in tail)


def build_logging_config(
    stream: TextIO = sys.stderr,
    verbosity: int = 1,
    log_file: Optional[str] = None,
    log_file_level: str = "INFO",
    timed: bool = False,
) -> dict[str, object]:
    """
    Build a dict based logging config with a single handler on the root logger. The handler writes to the log file
    when one is given, to the stream otherwise.

    :param verbosity: The verbosity of the console handler, from 0 to 4.
    :param log_file_level: The name of the level of the file handler, e.g. DEBUG or TRACE.
    :param timed: Prefix console lines with the time.
    """
    if log_file:
        level = logging.getLevelName(log_file_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {log_file_level}")
        handler: dict[str, object] = {
            "class": "logging.handlers.WatchedFileHandler",
            "filename": log_file,
            "mode": "a+",
            "formatter": "rego_file",
        }
    else:
        level = verbosity_to_level(verbosity)
        handler = {"class": "logging.StreamHandler", "stream": stream, "formatter": "rego_console"}
    handler["level"] = level

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "rego_console": {
                "()": MultiLineFormatter,
                "fmt": ("%(asctime)s " if timed else "") + CONSOLE_FORMAT,
                "log_colors": LOG_COLORS,
                "no_color": not _use_colors(stream),
            },
            "rego_file": {"format": FILE_FORMAT},
        },
        "handlers": {"rego_handler": handler},
        # Tornado reports every dropped stream connection on this logger
        "loggers": {"tornado.general": {"level": "WARNING"}},
        "root": {"handlers": ["rego_handler"], "level": level},
    }


def load_logging_config(file_name: str) -> dict[str, object]:
    """
    Read a dict based logging config from a yaml file.

    :raises FileNotFoundError: The file does not exist.
    :raises ValueError: The file does not contain a yaml mapping.
    """
    with open(file_name, "r") as fh:
        try:
            logging_config = yaml.safe_load(fh)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse logging config file {file_name} as yaml") from e
    if not isinstance(logging_config, dict):
        raise ValueError(f"Logging config file {file_name} does not contain a mapping")
    return logging_config


def configure_logging(stream: TextIO = sys.stderr) -> list[logging.Handler]:
    """
    Configure the logging framework from the [logging] section of the config. A logging config file takes
    precedence over the other options. Handlers installed on the root logger before are replaced.

    :param stream: The stream the console handler writes to.
    :return: The handlers that were added to the root logger.
    """
    config_file = config.logging_config_file.get()
    if config_file:
        logging_config = load_logging_config(config_file)
    else:
        logging_config = build_logging_config(
            stream,
            config.logging_verbosity.get(),
            config.logging_log_file.get(),
            config.logging_log_file_level.get() or "INFO",
            config.logging_timed.get(),
        )

    handlers_before = list(logging.root.handlers)
    logging.config.dictConfig(logging_config)
    handlers = [handler for handler in logging.root.handlers if handler not in handlers_before]
    LOGGER.debug("Logging configured from %s", config_file if config_file else "the logging options")
    return handlers
