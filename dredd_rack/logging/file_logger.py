"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import Any, Dict, Optional, Union

from dredd_rack.config.settings import LoggingConfig, RunnerConfig
from dredd_rack.logging.base import Logger


class FileLogger(Logger):
    """
    Logger qui écrit les exécutions Dredd dans un fichier.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[
            Union[LoggingConfig, RunnerConfig, Dict[str, Any]]
        ] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: LoggingConfig ou dict {"level": ..., "format": ...}.
                    Un RunnerConfig, ou son dict (clé "logging"),
                    est aussi accepté : sa section logging est lue.
            console_output: Activer la sortie console en plus du fichier

        Raises:
            pydantic.ValidationError: Si le dict de configuration
                est invalide.
        """
        self.log_file = log_file
        settings = self._resolve_config(config)

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level = logging.getLevelName(settings.level)

        self.logger = logging.getLogger(f"dredd_rack.{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            formatter = logging.Formatter(settings.format)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    @staticmethod
    def _resolve_config(
        config: Optional[
            Union[LoggingConfig, RunnerConfig, Dict[str, Any]]
        ]
    ) -> LoggingConfig:
        """Normalise la configuration reçue en LoggingConfig.

        Args:
            config: Configuration brute ou déjà validée.

        Returns:
            Instance LoggingConfig validée.
        """
        if config is None:
            return LoggingConfig()
        if isinstance(config, LoggingConfig):
            return config
        if isinstance(config, RunnerConfig):
            return config.logging
        if "logging" in config:
            config = config["logging"]
        return LoggingConfig.model_validate(config)

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if hasattr(self, 'handler') and self.handler:
            self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()
