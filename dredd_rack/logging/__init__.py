"""Module de logging."""

from dredd_rack.logging.base import Logger
from dredd_rack.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
