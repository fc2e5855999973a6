"""Module de configuration."""

from dredd_rack.config.settings import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_DREDD_COMMAND,
    DEFAULT_PATHS_TO_BLUEPRINTS,
    LoggingConfig,
    OptionSetting,
    RunnerConfig,
)

__all__ = [
    "DEFAULT_API_ENDPOINT",
    "DEFAULT_DREDD_COMMAND",
    "DEFAULT_PATHS_TO_BLUEPRINTS",
    "LoggingConfig",
    "OptionSetting",
    "RunnerConfig",
]
