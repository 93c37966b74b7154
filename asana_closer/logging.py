"""Logging from config and env.

Levels (inclusive):
- ERROR: failed task completions and fatal errors
- WARNING: non-critical issues and ERROR
- INFO: gate decisions, found tasks, WARNING, and ERROR
- DEBUG: debugging and all levels above

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging

from asana_closer.config import LoggingConfig

# Supported levels only (DEBUG, INFO, WARNING, ERROR)
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(message)s"

# GitHub Actions workflow command prefixes
ANNOTATIONS = {
    logging.ERROR: "::error::",
    logging.WARNING: "::warning::",
}


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


class ActionsFormatter(logging.Formatter):
    """Formatter that turns ERROR and WARNING records into GitHub Actions
    annotations."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        level = logging.ERROR if record.levelno >= logging.ERROR else record.levelno
        prefix = ANNOTATIONS.get(level)
        if not prefix:
            return text
        # Workflow commands end at the first newline unless it is escaped
        return prefix + text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class CloserLogging:
    """Configures root logger from LoggingConfig (YAML + env LOGGING_*)."""

    def __init__(self, config: LoggingConfig) -> None:
        """Store logging config (level, format and annotation mode)."""
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._annotations = config.github_annotations

    def setup(self) -> None:
        """Apply level and format to the root logger."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            force=True,
        )
        if self._annotations:
            for handler in logging.root.handlers:
                handler.setFormatter(ActionsFormatter(self._format))

    def get_logger(self, name: str) -> logging.Logger:
        """Return a logger with the given name (uses root config)."""
        return logging.getLogger(name)
