"""Initiate logging for cellborders.core."""

from __future__ import annotations

import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from prompt_toolkit.formatted_text.base import FormattedText
from prompt_toolkit.output.defaults import create_output
from prompt_toolkit.shortcuts.utils import print_formatted_text
from prompt_toolkit.styles.style import Style

if TYPE_CHECKING:
    from typing import Any, TextIO

    from cellborders.core.config import Config

LOG_STYLE = Style.from_dict(
    {
        "log.level.debug": "fg:ansigreen",
        "log.level.info": "fg:ansiblue",
        "log.level.warning": "fg:ansiyellow",
        "log.level.error": "fg:ansired",
        "log.level.critical": "fg:ansiwhite bg:ansired bold",
        "log.ref": "fg:ansibrightblack",
    }
)


class FtFormatter(logging.Formatter):
    """Format log records as formatted text."""

    def ft_format(self, record: logging.LogRecord) -> FormattedText:
        """Format a log record as :py:class:`FormattedText`."""
        level = record.levelname
        output = [
            (f"class:log.level.{level.lower()}", f"{level:>8}"),
            ("", f" {record.getMessage()} "),
            ("class:log.ref", f"[{record.name}]"),
            ("", "\n"),
        ]
        if record.exc_info:
            output.append(("", self.formatException(record.exc_info) + "\n"))
        return FormattedText(output)


class FormattedTextHandler(logging.StreamHandler):
    """Print styled log records to a terminal."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Create a new log handler instance."""
        super().__init__(stream)
        self.output = create_output(stdout=self.stream)

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a formatted record."""
        formatter = self.formatter
        if not isinstance(formatter, FtFormatter):
            formatter = FtFormatter()
        try:
            print_formatted_text(
                formatter.ft_format(record),
                end="",
                style=LOG_STYLE,
                output=self.output,
                include_default_pygments_style=False,
            )
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def setup_logs(config: Config | None = None) -> None:
    """Configure the logger for cellborders."""
    log_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "file_format": {
                "format": "{asctime} {levelname:<7} [{name}:{lineno}] {message}",
                "style": "{",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "ft_format": {"()": FtFormatter},
        },
        "handlers": {
            "stderr": {
                "()": FormattedTextHandler,
                "formatter": "ft_format",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "cellborders": {
                "level": "WARNING",
                "handlers": ["stderr"],
                "propagate": False,
            },
        },
    }

    if config is not None:
        level = config.log_level.upper()
        log_config["loggers"]["cellborders"]["level"] = level
        if config.log_file:
            log_config["handlers"]["file"] = {
                "class": "logging.FileHandler",
                "filename": Path(config.log_file).expanduser(),
                "formatter": "file_format",
            }
            log_config["loggers"]["cellborders"]["handlers"] = ["file"]

    logging.config.dictConfig(log_config)
