"""Tests pour les modèles Pydantic de configuration."""

import unittest
from unittest.mock import MagicMock

from pydantic import ValidationError

from dredd_rack import Runner
from dredd_rack.commands.base import CommandExecutor
from dredd_rack.config import (
    DEFAULT_API_ENDPOINT,
    LoggingConfig,
    OptionSetting,
    RunnerConfig,
)


class TestLoggingConfig(unittest.TestCase):
    """Tests pour LoggingConfig."""

    def test_valeurs_par_defaut(self):
        """Les valeurs par défaut sont INFO et le format standard."""
        config = LoggingConfig()
        self.assertEqual(config.level, "INFO")
        self.assertIn("%(message)s", config.format)

    def test_niveau_normalise_en_majuscules(self):
        """Le niveau est normalisé en majuscules."""
        self.assertEqual(LoggingConfig(level="debug").level, "DEBUG")

    def test_niveau_inconnu_refuse(self):
        """Un niveau inconnu lève ValidationError."""
        with self.assertRaises(ValidationError):
            LoggingConfig(level="BAVARD")

    def test_cle_inconnue_refusee(self):
        """Les clés supplémentaires sont refusées."""
        with self.assertRaises(ValidationError):
            LoggingConfig(level="INFO", colour=True)


class TestOptionSetting(unittest.TestCase):
    """Tests pour OptionSetting."""

    def test_option_connue(self):
        """Une option connue est acceptée avec sa valeur."""
        setting = OptionSetting(name="level", value="warning")
        self.assertEqual(setting.name, "level")
        self.assertEqual(setting.value, "warning")

    def test_forme_negative(self):
        """Une forme négative est acceptée sans valeur."""
        self.assertIsNone(OptionSetting(name="no_color").value)

    def test_option_inconnue_refusee(self):
        """Une option inconnue lève ValidationError."""
        with self.assertRaises(ValidationError):
            OptionSetting(name="bogus")

    def test_valeur_numerique_acceptee(self):
        """Une valeur numérique est acceptée comme par l'appel direct."""
        config = RunnerConfig.model_validate(
            {"options": [{"name": "level", "value": 3}]}
        )
        runner = Runner.from_config(config)
        self.assertEqual(runner.command_parts, ["--level", "3"])
        self.assertEqual(
            runner.command_parts, Runner().level(3).command_parts
        )


class TestRunnerConfig(unittest.TestCase):
    """Tests pour RunnerConfig."""

    def test_valeurs_par_defaut(self):
        """Les valeurs par défaut reprennent celles du runner."""
        config = RunnerConfig()
        self.assertEqual(config.dredd_command, "dredd")
        self.assertEqual(config.api_endpoint, DEFAULT_API_ENDPOINT)
        self.assertEqual(
            config.paths_to_blueprints, ["doc/*.apib", "doc/*.apib.md"]
        )
        self.assertEqual(config.options, [])

    def test_model_validate_depuis_dict(self):
        """Un dict imbriqué est validé en modèles."""
        config = RunnerConfig.model_validate({
            "api_endpoint": "https://api.example.com",
            "options": [{"name": "dry_run"}],
            "logging": {"level": "warning"},
        })
        self.assertIsInstance(config.options[0], OptionSetting)
        self.assertEqual(config.logging.level, "WARNING")

    def test_endpoint_vide_refuse(self):
        """Un endpoint vide lève ValidationError."""
        with self.assertRaises(ValidationError):
            RunnerConfig(api_endpoint="")

    def test_commande_vide_refusee(self):
        """Une commande vide lève ValidationError."""
        with self.assertRaises(ValidationError):
            RunnerConfig(dredd_command="")

    def test_chemins_vides_refuses(self):
        """Une liste de chemins vide ou [''] est refusée."""
        with self.assertRaises(ValidationError):
            RunnerConfig(paths_to_blueprints=[])
        with self.assertRaises(ValidationError):
            RunnerConfig(paths_to_blueprints=[""])

    def test_chemins_tous_vides_refuses(self):
        """Une liste dont tous les chemins sont vides est refusée."""
        with self.assertRaises(ValidationError):
            RunnerConfig(paths_to_blueprints=["", ""])
        with self.assertRaises(ValidationError):
            RunnerConfig(paths_to_blueprints=["  "])

    def test_chemin_vide_parmi_d_autres_accepte(self):
        """Un chemin vide à côté d'un chemin réel est accepté."""
        config = RunnerConfig(paths_to_blueprints=["doc/*.apib", ""])
        self.assertEqual(config.paths_to_blueprints, ["doc/*.apib", ""])

    def test_option_inconnue_refusee(self):
        """Une option inconnue dans la liste est refusée."""
        with self.assertRaises(ValidationError):
            RunnerConfig.model_validate({"options": [{"name": "bogus"}]})

    def test_cle_inconnue_refusee(self):
        """Les clés supplémentaires sont refusées."""
        with self.assertRaises(ValidationError):
            RunnerConfig.model_validate({"endpoint": "http://x"})


class TestRunnerFromConfig(unittest.TestCase):
    """Tests pour Runner.from_config()."""

    def test_commande_rendue(self):
        """La configuration est appliquée dans l'ordre."""
        config = RunnerConfig.model_validate({
            "api_endpoint": "https://api.example.com",
            "paths_to_blueprints": ["blueprints/*.md"],
            "options": [
                {"name": "level", "value": "warning"},
                {"name": "no_color"},
            ],
        })
        runner = Runner.from_config(config)
        self.assertEqual(
            runner.command,
            "dredd blueprints/*.md https://api.example.com "
            "--level warning --no-color",
        )

    def test_commande_personnalisee(self):
        """Le programme configuré est utilisé."""
        config = RunnerConfig(dredd_command="./node_modules/.bin/dredd")
        runner = Runner.from_config(config)
        self.assertTrue(
            runner.render().startswith("./node_modules/.bin/dredd ")
        )

    def test_executeur_injecte(self):
        """L'exécuteur injecté est utilisé par run()."""
        executor = MagicMock(spec=CommandExecutor)
        executor.run.return_value = MagicMock(success=True)
        runner = Runner.from_config(RunnerConfig(), executor=executor)

        self.assertTrue(runner.run())
        executor.run.assert_called_once_with(runner.render())


if __name__ == "__main__":
    unittest.main()
