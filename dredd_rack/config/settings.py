"""Modèles Pydantic décrivant la configuration d'un runner Dredd.

Ces modèles valident des données déjà chargées (dict) : la lecture
de fichiers de configuration n'est pas prise en charge.

Example:
    Construction d'un runner depuis un dict :

        config = RunnerConfig.model_validate({
            "api_endpoint": "https://api.example.com",
            "paths_to_blueprints": ["blueprints/*.md"],
            "options": [
                {"name": "level", "value": "warning"},
                {"name": "no_color"},
            ],
        })
        runner = Runner.from_config(config)
        # runner.command :
        # "dredd blueprints/*.md https://api.example.com
        #  --level warning --no-color"
"""

import logging
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from dredd_rack.commands.options import find_option

DEFAULT_DREDD_COMMAND = "dredd"
DEFAULT_API_ENDPOINT = "http://localhost:3000"
DEFAULT_PATHS_TO_BLUEPRINTS = ("doc/*.apib", "doc/*.apib.md")


class LoggingConfig(BaseModel):
    """Section 'logging' : niveau et format des traces."""

    model_config = {"extra": "forbid"}

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def level_must_exist(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Niveau de log inconnu : {v}")
        return level


class OptionSetting(BaseModel):
    """Une option Dredd à appliquer, avec sa valeur éventuelle."""

    model_config = {"extra": "forbid"}

    name: str
    value: Optional[Union[str, int, float]] = None

    @field_validator("name")
    @classmethod
    def name_must_be_known(cls, v: str) -> str:
        if find_option(v) is None:
            raise ValueError(f"Option Dredd inconnue : {v}")
        return v


class RunnerConfig(BaseModel):
    """Configuration complète d'un runner Dredd."""

    model_config = {"extra": "forbid"}

    dredd_command: str = DEFAULT_DREDD_COMMAND
    api_endpoint: str = DEFAULT_API_ENDPOINT
    paths_to_blueprints: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PATHS_TO_BLUEPRINTS)
    )
    options: List[OptionSetting] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("dredd_command", "api_endpoint")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("La valeur ne peut pas être vide")
        return v

    @field_validator("paths_to_blueprints")
    @classmethod
    def paths_must_not_be_empty(cls, v: List[str]) -> List[str]:
        if not any(p.strip() for p in v):
            raise ValueError("Au moins un chemin de blueprint est requis")
        return v
