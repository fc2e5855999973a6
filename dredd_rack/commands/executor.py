"""Exécuteur de la ligne de commande Dredd via le shell.

La commande rendue par le runner est une chaîne unique contenant des
globs (ex: 'doc/*.apib') : elle est donc confiée au shell, qui se
charge de leur expansion. Aucune protection n'est appliquée, les
valeurs fournies par l'appelant doivent être sûres pour le shell.

Example :
    from dredd_rack.commands import ShellCommandExecutor

    executor = ShellCommandExecutor(logger=logger)
    result = executor.run("dredd doc/*.apib http://localhost:3000")
    print(result.success)
"""

import os
import subprocess  # nosec B404
import time
from typing import Optional

from dredd_rack.commands.base import CommandExecutor, CommandResult
from dredd_rack.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from dredd_rack.logging.base import Logger


class ShellCommandExecutor(CommandExecutor):
    """Exécuteur synchrone de commandes shell.

    La sortie du processus n'est pas capturée : elle s'affiche
    directement sur le terminal de l'appelant. L'appel bloque jusqu'à
    la fin du processus.

    Attributes:
        _logger: Logger optionnel pour les logs fichier.
        _default_timeout: Timeout par défaut en secondes.
        _dry_run: Mode simulation.
        _is_root: True si le processus courant est root (uid 0).
        _plain: Formateur texte brut pour les logs fichier.
        _console_formatter: Formateur optionnel pour la console.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        default_timeout: Optional[int] = None,
        dry_run: bool = False,
        console_formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise l'exécuteur.

        Args:
            logger: Logger optionnel pour les sorties fichier.
            default_timeout: Timeout par défaut en secondes.
            dry_run: Si True, logue la commande sans la lancer.
            console_formatter: Formateur optionnel pour la console
                (ex: AnsiCommandFormatter()).
        """
        self._logger = logger
        self._default_timeout = default_timeout
        self._dry_run = dry_run
        self._is_root: bool = os.getuid() == 0
        self._plain = PlainCommandFormatter()
        self._console_formatter = console_formatter

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _failure(self, command: str, start: float) -> CommandResult:
        """Résultat d'une exécution qui n'a pas pu aboutir."""
        return CommandResult(
            command=command,
            return_code=-1,
            success=False,
            duration=time.monotonic() - start,
            executed_as_root=self._is_root,
        )

    def run(
        self,
        command: str,
        timeout: Optional[int] = None,
    ) -> CommandResult:
        """Exécute la commande via le shell et retourne le résultat.

        Args:
            command: Ligne de commande complète.
            timeout: Timeout en secondes (prioritaire sur le
                timeout par défaut).

        Returns:
            CommandResult ; return_code vaut -1 en cas de timeout
            ou si le shell n'a pas pu être lancé.
        """
        if self._dry_run:
            self._log(self._plain.format_dry_run(command, self._is_root))
            if self._console_formatter:
                print(self._console_formatter.format_dry_run(
                    command, self._is_root
                ))
            return CommandResult(
                command=command,
                return_code=0,
                success=True,
                duration=0.0,
                executed_as_root=self._is_root,
            )

        effective_timeout = (
            timeout if timeout is not None else self._default_timeout
        )

        self._log(self._plain.format_start(command, self._is_root))
        if self._console_formatter:
            print(self._console_formatter.format_start(
                command, self._is_root
            ))

        start = time.monotonic()
        try:
            proc = subprocess.run(  # nosec B602
                command,
                shell=True,
                timeout=effective_timeout,
            )
        except subprocess.TimeoutExpired:
            self._log_error(
                f"Timeout après {effective_timeout}s : {command}"
            )
            return self._failure(command, start)
        except OSError as e:
            self._log_error(f"Erreur système : {e}")
            return self._failure(command, start)

        duration = time.monotonic() - start
        if proc.returncode != 0:
            self._log_error(f"Code retour {proc.returncode} : {command}")
        return CommandResult(
            command=command,
            return_code=proc.returncode,
            success=proc.returncode == 0,
            duration=duration,
            executed_as_root=self._is_root,
        )
