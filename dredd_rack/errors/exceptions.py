"""
Module contenant les exceptions personnalisées de dredd_rack.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""


class DreddRackError(Exception):
    """Exception de base pour toutes les erreurs du runner."""
    pass


class InvalidArgumentError(DreddRackError, ValueError):
    """Argument invalide (endpoint vide, chemin de blueprint vide)."""
    pass


class UnknownOptionError(DreddRackError, AttributeError):
    """Option Dredd inconnue.

    Hérite d'AttributeError : un nom d'option inconnu échoue comme
    n'importe quel attribut inexistant, ce qui garde hasattr() et
    getattr(obj, nom, défaut) cohérents.
    """

    def __init__(self, name: str) -> None:
        """Initialise l'erreur avec le nom de l'option refusée.

        Args:
            name: Nom de l'option demandée.
        """
        super().__init__(f"Option Dredd inconnue : {name!r}")
        self.name = name
