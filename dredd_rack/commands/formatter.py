"""Formateurs des messages émis autour d'une exécution Dredd.

Les messages diffèrent selon la destination (fichier de log ou
console) et les privilèges du processus (root ou utilisateur).

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut avec préfixes [ROOT]/[user].
    AnsiCommandFormatter : Codes ANSI colorés pour la console.

Note :
    AnsiCommandFormatter n'émet des codes ANSI que si stdout est un
    terminal (TTY).
"""

import sys
from abc import ABC, abstractmethod


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande."""

    @abstractmethod
    def format_start(self, command: str, is_root: bool) -> str:
        """Formate le message de début d'exécution.

        Args:
            command: Ligne de commande Dredd.
            is_root: True si la commande est exécutée en root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_dry_run(self, command: str, is_root: bool) -> str:
        """Formate le message de simulation (l'exécuteur ne lance rien)."""
        pass

    @abstractmethod
    def format_skipped(self, command: str, is_root: bool) -> str:
        """Formate le message d'une commande refusée par le contrôle
        du nombre d'arguments."""
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier.

    Example :
        [user] Exécution : dredd doc/*.apib http://localhost:3000
        [user] Commande ignorée (arguments manquants) : dredd --help
    """

    _ROOT_PREFIX = "[ROOT]"
    _USER_PREFIX = "[user]"

    def _prefix(self, is_root: bool) -> str:
        return self._ROOT_PREFIX if is_root else self._USER_PREFIX

    def format_start(self, command: str, is_root: bool) -> str:
        """Formate le début d'exécution avec préfixe textuel."""
        return f"{self._prefix(is_root)} Exécution : {command}"

    def format_dry_run(self, command: str, is_root: bool) -> str:
        """Formate le message de simulation avec préfixe."""
        return f"{self._prefix(is_root)} [dry-run] {command}"

    def format_skipped(self, command: str, is_root: bool) -> str:
        """Formate le refus d'exécution avec préfixe."""
        return (
            f"{self._prefix(is_root)} "
            f"Commande ignorée (arguments manquants) : {command}"
        )


class AnsiCommandFormatter(CommandFormatter):
    """Formateur ANSI coloré pour la sortie console.

    Styles ANSI :
        ROOT    → \\033[1;33m (jaune-or gras)
        user    → \\033[0;32m (vert normal)
        dry-run → \\033[0;90m (gris discret)
        ignorée → \\033[0;31m (rouge)
    """

    RESET = "\033[0m"
    ROOT_STYLE = "\033[1;33m"
    USER_STYLE = "\033[0;32m"
    DRY_STYLE = "\033[0;90m"
    SKIP_STYLE = "\033[0;31m"

    ROOT_PREFIX = "[ROOT]"
    USER_PREFIX = "[user]"

    def _is_tty(self) -> bool:
        """Vérifie si stdout est un terminal interactif (TTY)."""
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _prefix(self, is_root: bool) -> str:
        return self.ROOT_PREFIX if is_root else self.USER_PREFIX

    def _style(self, text: str, style: str) -> str:
        """Entoure le texte du style donné si on est dans un TTY."""
        if not self._is_tty():
            return text
        return f"{style}{text}{self.RESET}"

    def format_start(self, command: str, is_root: bool) -> str:
        """Formate le début d'exécution avec style ANSI."""
        style = self.ROOT_STYLE if is_root else self.USER_STYLE
        return self._style(
            f"{self._prefix(is_root)} Exécution : {command}", style
        )

    def format_dry_run(self, command: str, is_root: bool) -> str:
        """Formate le message de simulation avec style gris discret."""
        return self._style(
            f"{self._prefix(is_root)} [dry-run] {command}",
            self.DRY_STYLE,
        )

    def format_skipped(self, command: str, is_root: bool) -> str:
        """Formate le refus d'exécution en rouge."""
        return self._style(
            f"{self._prefix(is_root)} "
            f"Commande ignorée (arguments manquants) : {command}",
            self.SKIP_STYLE,
        )
