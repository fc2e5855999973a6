"""
Dredd Rack - Wrapper Python autour de l'outil de validation Dredd.

Modules disponibles:
- runner: Constructeur et lanceur de la commande Dredd (Runner,
  AndersonRunner)
- commands: Registre des options, contrôle des arguments, exécution
  via le shell (ShellCommandExecutor)
- config: Modèles Pydantic de configuration (RunnerConfig)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions (InvalidArgumentError, UnknownOptionError)
"""

__version__ = "1.0.0"

from dredd_rack.errors import (
    DreddRackError,
    InvalidArgumentError,
    UnknownOptionError,
)
from dredd_rack.logging import Logger, FileLogger
from dredd_rack.config import (
    LoggingConfig,
    OptionSetting,
    RunnerConfig,
)
from dredd_rack.commands import (
    CommandResult,
    CommandExecutor,
    ShellCommandExecutor,
    CommandFormatter,
    PlainCommandFormatter,
    AnsiCommandFormatter,
    OptionSpec,
    has_at_least_two_arguments,
)
from dredd_rack.runner import Runner, AndersonRunner

__all__ = [
    # Runner
    "Runner",
    "AndersonRunner",
    # Errors
    "DreddRackError",
    "InvalidArgumentError",
    "UnknownOptionError",
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "LoggingConfig",
    "OptionSetting",
    "RunnerConfig",
    # Commands - Options et validation
    "OptionSpec",
    "has_at_least_two_arguments",
    # Commands - Exécution
    "CommandResult",
    "CommandExecutor",
    "ShellCommandExecutor",
    # Commands - Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
]
