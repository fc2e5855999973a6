"""Interfaces abstraites et structures de données pour l'exécution
de la ligne de commande Dredd.

Ce module définit :
    - CommandResult : Résultat immuable d'une exécution de commande.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CommandResult:
    """Résultat de l'exécution d'une commande shell.

    La sortie n'est pas capturée : Dredd écrit directement sur le
    terminal de l'appelant.

    Attributes:
        command: Ligne de commande exécutée par le shell.
        return_code: Code de retour du processus (-1 si le shell
            n'a pas pu être lancé ou a dépassé le timeout).
        success: True si la commande a réussi (code 0).
        duration: Durée d'exécution en secondes.
        executed_as_root: True si lancée par root.
    """

    command: str
    return_code: int
    success: bool
    duration: float
    executed_as_root: bool = False


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution d'une ligne de commande."""

    @abstractmethod
    def run(
        self,
        command: str,
        timeout: Optional[int] = None,
    ) -> CommandResult:
        """Exécute une ligne de commande et retourne le résultat.

        Args:
            command: Ligne de commande complète, passée telle quelle
                au shell.
            timeout: Timeout en secondes.

        Returns:
            Résultat de l'exécution.
        """
        pass
