"""Interface abstraite pour les traces d'exécution du runner."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface de logging injectée dans le runner et l'exécuteur.

    Permet de substituer un mock dans les tests ou de brancher
    n'importe quel backend de logs (DIP).
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass
