"""Wrapper Python autour de l'outil de validation de blueprints Dredd.

Le runner accumule les options Dredd via des appels chaînés, puis rend
et exécute la ligne de commande complète.

Example:
    Lance `dredd doc/*.apib doc/*.apib.md http://localhost:3000
    --level warning --dry-run` :

        from dredd_rack import Runner

        Runner().level("warning").dry_run().run()

    Configuration groupée à la construction :

        def configure(options):
            options.set_blueprint_patterns("blueprints/*.md", "doc/*.md")
            options.no_color()

        anderson = AndersonRunner("https://api.example.com", configure)
        anderson.run()
        # lance `dredd blueprints/*.md doc/*.md https://api.example.com
        #        --no-color`
"""

import os
from typing import Callable, List, Optional

from dredd_rack.commands.base import CommandExecutor
from dredd_rack.commands.executor import ShellCommandExecutor
from dredd_rack.commands.formatter import PlainCommandFormatter
from dredd_rack.commands.options import (
    OptionSpec,
    find_option,
    option_names,
    resolve_option,
)
from dredd_rack.commands.validity import has_at_least_two_arguments
from dredd_rack.config.settings import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_DREDD_COMMAND,
    DEFAULT_PATHS_TO_BLUEPRINTS,
    RunnerConfig,
)
from dredd_rack.errors.exceptions import (
    InvalidArgumentError,
    UnknownOptionError,
)
from dredd_rack.logging.base import Logger


class Runner:
    """Constructeur fluent de la ligne de commande Dredd.

    Chaque option Dredd connue est accessible comme une méthode :
    ``runner.dry_run()``, ``runner.no_color()``,
    ``runner.level("warning")``. Ces méthodes ne sont pas déclarées
    sur la classe ; elles sont résolues par __getattr__ à partir du
    registre des options, et apparaissent dans dir() et hasattr().
    Un nom inconnu lève UnknownOptionError, qui est un AttributeError.

    Aucune méthode de la classe ne porte le nom d'une option : en
    particulier ``runner.method("POST")`` produit bien ``--method POST``.

    Une instance n'est pas prévue pour être partagée entre threads.

    Attributes:
        dredd_command: Programme invoqué.
        paths_to_blueprints: Globs des blueprints, séparés par des
            espaces.
        api_endpoint: URL de l'API testée.
        command_parts: Jetons d'options, dans l'ordre des appels.
    """

    def __init__(
        self,
        api_endpoint: Optional[str] = None,
        configure: Optional[Callable[["Runner"], object]] = None,
        *,
        logger: Optional[Logger] = None,
        executor: Optional[CommandExecutor] = None,
        dredd_command: str = DEFAULT_DREDD_COMMAND,
    ) -> None:
        """Initialise un runner.

        L'endpoint de l'API peut être local ou distant.

        Args:
            api_endpoint: URL de l'API (défaut: http://localhost:3000).
            configure: Callable appelé une fois avec le runner, pour
                grouper les appels de configuration.
            logger: Logger optionnel pour tracer les exécutions.
            executor: Exécuteur de commandes (défaut:
                ShellCommandExecutor).
            dredd_command: Programme à invoquer.

        Raises:
            InvalidArgumentError: Si api_endpoint est une chaîne vide.
        """
        if api_endpoint == "":
            raise InvalidArgumentError("Endpoint d'API invalide")

        self.dredd_command = dredd_command
        self.paths_to_blueprints = " ".join(DEFAULT_PATHS_TO_BLUEPRINTS)
        self.api_endpoint = (
            api_endpoint if api_endpoint is not None
            else DEFAULT_API_ENDPOINT
        )
        self.command_parts: List[str] = []

        self._logger = logger
        self._executor = executor or ShellCommandExecutor(logger=logger)
        self._plain = PlainCommandFormatter()
        self._is_root: bool = os.getuid() == 0

        if configure is not None:
            configure(self)

    @classmethod
    def from_config(
        cls,
        config: RunnerConfig,
        *,
        logger: Optional[Logger] = None,
        executor: Optional[CommandExecutor] = None,
    ) -> "Runner":
        """Construit un runner depuis une configuration validée.

        Les options sont appliquées dans l'ordre de la configuration.

        Args:
            config: Configuration Pydantic du runner.
            logger: Logger optionnel.
            executor: Exécuteur de commandes optionnel.

        Returns:
            Le runner configuré.
        """
        runner = cls(
            config.api_endpoint,
            logger=logger,
            executor=executor,
            dredd_command=config.dredd_command,
        )
        runner.set_blueprint_patterns(*config.paths_to_blueprints)
        for option in config.options:
            runner.set_option(option.name, option.value)
        return runner

    @staticmethod
    def option_names() -> List[str]:
        """Liste les noms d'options acceptés, formes 'no_' incluses."""
        return option_names()

    @property
    def command(self) -> str:
        """Ligne de commande Dredd (voir render())."""
        return self.render()

    def render(self) -> str:
        """Rend la ligne de commande Dredd.

        Aucun échappement n'est appliqué : les valeurs doivent être
        sûres pour le shell.

        Returns:
            'dredd <blueprints> <endpoint> [--option [valeur]]...'
        """
        return " ".join(
            [self.dredd_command, self.paths_to_blueprints, self.api_endpoint]
            + self.command_parts
        )

    def set_blueprint_patterns(self, *patterns: str) -> "Runner":
        """Remplace les chemins des blueprints.

        Args:
            patterns: Autant de globs que de chemins où se trouvent
                des blueprints.

        Returns:
            L'instance courante pour le chaînage.

        Raises:
            InvalidArgumentError: Si aucun chemin n'est fourni ou si
                l'unique chemin fourni est vide.
        """
        if not patterns or patterns == ("",):
            raise InvalidArgumentError("Chemin de blueprints invalide")

        self.paths_to_blueprints = " ".join(patterns)
        return self

    def set_option(self, name: str, value: object = None) -> "Runner":
        """Ajoute une option Dredd désignée par son nom.

        Équivalent explicite de l'appel dynamique : ``set_option("level",
        "warning")`` revient à ``level("warning")``.

        Args:
            name: Nom de l'option (ex: 'dry_run', 'no_color', 'level').
            value: Valeur des options à argument, ignorée sinon.

        Returns:
            L'instance courante pour le chaînage.

        Raises:
            UnknownOptionError: Si le nom n'est pas une option Dredd.
        """
        return self._append_option(resolve_option(name), value)

    def run(self) -> Optional[bool]:
        """Lance Dredd.

        Si la commande ne passe pas has_at_least_two_arguments(), rien
        n'est exécuté et None est retourné, sans exception : l'appelant
        doit tester la valeur de retour.

        Returns:
            True si le code de sortie de Dredd est zéro, False sinon,
            None si la commande a été ignorée.
        """
        command = self.render()
        if not has_at_least_two_arguments(command):
            if self._logger:
                self._logger.log_warning(
                    self._plain.format_skipped(command, self._is_root)
                )
            return None
        return self._executor.run(command).success

    def _append_option(self, spec: OptionSpec, value: object) -> "Runner":
        self.command_parts.extend(spec.tokens(value))
        return self

    def __getattr__(self, name: str) -> Callable[..., "Runner"]:
        # Appelé uniquement quand la recherche normale a échoué.
        spec = find_option(name)
        if spec is None:
            raise UnknownOptionError(name)

        def option_setter(*args: object) -> "Runner":
            return self._append_option(spec, args[0] if args else None)

        option_setter.__name__ = name
        option_setter.__doc__ = f"Ajoute l'option {spec.flag}."
        return option_setter

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(option_names()))


# AndersonRunner(...).run() va aussi vite que Runner(...).run()
AndersonRunner = Runner
