"""
Exceptions raised by the taskrecords package.
"""

from typing import Any


class TaskRecordsError(Exception):
    """Base class of every error raised by the package."""


class InvalidConfigurationError(TaskRecordsError, TypeError):
    """
    Raised when a record is built with a configuration that is neither ``None`` nor a mapping, or when one of the
    mapping's keys cannot be used as an attribute name.

    :param message: Human-readable description of the error
    :param configuration: The rejected configuration value
    """

    def __init__(self, message: str, configuration: Any = None) -> None:
        super().__init__(message)
        self.configuration = configuration


class DocumentError(TaskRecordsError, ValueError):
    """Raised when a task document handed to the command line is malformed."""
