"""Tests pour le module logging."""

import logging
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from dredd_rack.config import LoggingConfig, RunnerConfig
from dredd_rack.logging import FileLogger, Logger


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        logger = FileLogger(str(tmp_path / "dredd.log"))

        assert isinstance(logger, Logger)

    def test_log_info(self, tmp_path):
        """Test du logging info."""
        log_file = tmp_path / "info.log"
        logger = FileLogger(str(log_file))

        logger.log_info("[user] Exécution : dredd")

        content = log_file.read_text(encoding="utf-8")
        assert "INFO" in content
        assert "[user] Exécution : dredd" in content

    def test_log_warning(self, tmp_path):
        """Test du logging warning."""
        log_file = tmp_path / "warning.log"
        logger = FileLogger(str(log_file))

        logger.log_warning("Commande ignorée")

        content = log_file.read_text(encoding="utf-8")
        assert "WARNING" in content
        assert "Commande ignorée" in content

    def test_log_error(self, tmp_path):
        """Test du logging error."""
        log_file = tmp_path / "error.log"
        logger = FileLogger(str(log_file))

        logger.log_error("Code retour 1")

        content = log_file.read_text(encoding="utf-8")
        assert "ERROR" in content
        assert "Code retour 1" in content

    def test_creates_log_directory(self, tmp_path):
        """Test que le répertoire de log est créé si nécessaire."""
        log_file = tmp_path / "subdir" / "dredd.log"

        logger = FileLogger(str(log_file))
        logger.log_info("Test")

        assert log_file.exists()

    def test_config_logging_config(self, tmp_path):
        """Test de la configuration depuis un LoggingConfig."""
        log_file = tmp_path / "model.log"
        config = LoggingConfig(
            level="WARNING", format="%(levelname)s | %(message)s"
        )

        logger = FileLogger(str(log_file), config=config)
        logger.log_info("ignoré")
        logger.log_warning("gardé")

        content = log_file.read_text(encoding="utf-8")
        assert "ignoré" not in content
        assert "WARNING | gardé" in content

    def test_config_from_dict(self, tmp_path):
        """Test de la configuration depuis un dictionnaire."""
        log_file = tmp_path / "dict.log"
        config = {
            "logging": {
                "level": "DEBUG",
                "format": "%(levelname)s - %(message)s"
            }
        }

        logger = FileLogger(str(log_file), config=config)
        logger.log_info("Test")

        assert "INFO - Test" in log_file.read_text(encoding="utf-8")

    def test_config_runner_config(self, tmp_path):
        """Test de la configuration depuis un RunnerConfig complet."""
        log_file = tmp_path / "runner.log"
        config = RunnerConfig.model_validate(
            {"logging": {"level": "ERROR", "format": "%(message)s"}}
        )

        logger = FileLogger(str(log_file), config=config)
        logger.log_warning("ignoré")
        logger.log_error("Code retour 2")

        assert log_file.read_text(encoding="utf-8") == "Code retour 2\n"

    def test_niveau_personnalise(self, tmp_path):
        """Test d'un niveau enregistré via logging.addLevelName."""
        logging.addLevelName(25, "NOTICE")
        log_file = tmp_path / "notice.log"

        logger = FileLogger(str(log_file), config={"level": "notice"})
        logger.log_info("ignoré")
        logger.log_warning("gardé")

        assert logger.logger.level == 25
        content = log_file.read_text(encoding="utf-8")
        assert "ignoré" not in content
        assert "gardé" in content

    def test_config_invalide(self, tmp_path):
        """Test qu'un niveau inconnu lève ValidationError."""
        with pytest.raises(ValidationError):
            FileLogger(
                str(tmp_path / "bad.log"), config={"level": "BAVARD"}
            )

    def test_no_propagation(self, tmp_path):
        """Test que le logger ne propage pas vers la racine."""
        logger = FileLogger(str(tmp_path / "propagate.log"))

        assert logger.logger.propagate is False


class TestLoggerInterface:
    """Tests pour l'interface abstraite Logger."""

    def test_cannot_instantiate(self):
        """Test que Logger ne peut pas être instancié."""
        with pytest.raises(TypeError):
            Logger()

    def test_mock_logger(self):
        """Test qu'un mock respecte l'interface."""
        mock_logger = MagicMock(spec=Logger)
        mock_logger.log_info("message")

        mock_logger.log_info.assert_called_once_with("message")
