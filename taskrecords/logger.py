"""
This module contains all the logging configuration used throughout the package.

Library modules only ask the manager for bound loggers. Sinks are installed once, by whoever instantiates the
LoggingManager (the command line entry point in practice).
"""

from __future__ import annotations

import sys
from threading import Lock
from typing import Optional

import loguru
from loguru import logger


class SingletonMeta(type):
    """Singleton metaclass"""
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            instance = super().__call__(*args, **kwargs)
            cls._instances[cls] = instance
        return cls._instances[cls]


class LoggingManager(metaclass=SingletonMeta):
    """
    Singleton logging manager class used throughout the package to have a centralized log formatting.

    The format is: <date> | <level> [| <caller>] | [<app>] <message>
    """
    loggers: dict[str, loguru.Logger] = {}
    mu = Lock()
    fmt = ""

    def __init__(self, verbose: bool = False, debug: bool = False, log_file: Optional[str] = None):
        if debug:
            LoggingManager.fmt = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>[{extra[app]}] {message}</level>"
        else:
            LoggingManager.fmt = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <level>[{extra[app]}] {message}</level>"

        log_lvl = "DEBUG" if verbose or debug else "INFO"

        # stdout is reserved for the documents printed by the command line
        logger.enable("taskrecords")
        logger.remove()
        logger.add(sys.stderr, level=log_lvl, format=LoggingManager.fmt)

        if log_file:
            logger.add(log_file, format=LoggingManager.fmt, level=log_lvl, rotation="10 MB")

    @classmethod
    def get_logger(cls, _id: str, **bind_kwargs) -> loguru.Logger:
        with cls.mu:
            if _id not in cls.loggers:
                if 'app' not in bind_kwargs:
                    bind_kwargs['app'] = "General"
                cls.loggers[_id] = logger.bind(**bind_kwargs)
            return cls.loggers[_id]
