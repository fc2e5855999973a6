"""Module de gestion des erreurs."""

from dredd_rack.errors.exceptions import (
    DreddRackError,
    InvalidArgumentError,
    UnknownOptionError,
)

__all__ = [
    "DreddRackError",
    "InvalidArgumentError",
    "UnknownOptionError",
]
