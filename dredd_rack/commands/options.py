"""Registre fermé des options de la ligne de commande Dredd.

Chaque option connue est décrite par un OptionSpec : le jeton
``--flag`` rendu, son arité (0 ou 1 argument) et le fait qu'elle
accepte ou non une forme négative ``no_<option>``.

Les formes négatives ne sont pas enregistrées : elles sont reconnues
en retirant le préfixe ``no_`` et en cherchant l'option de base parmi
les options négociables.

Example:
    Résolution d'une forme négative :

        resolve_option("no_color").flag        # '--no-color'
        resolve_option("level").takes_argument  # True
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from dredd_rack.errors.exceptions import UnknownOptionError

NEGATION_PREFIX = "no_"


@dataclass(frozen=True)
class OptionSpec:
    """Description d'une option Dredd.

    Attributes:
        name: Nom Python de l'option (ex: 'dry_run', 'no_color').
        takes_argument: True si l'option attend une valeur.
        negatable: True si la forme 'no_<name>' est acceptée.
    """

    name: str
    takes_argument: bool = False
    negatable: bool = False

    @property
    def flag(self) -> str:
        """Jeton de ligne de commande (ex: '--dry-run')."""
        return "--" + self.name.replace("_", "-")

    def tokens(self, value: object = None) -> List[str]:
        """Retourne les jetons à ajouter à la commande.

        Args:
            value: Valeur de l'option, ignorée pour les booléens.
                None est rendu comme une chaîne vide.

        Returns:
            [flag] ou [flag, str(value)].
        """
        if not self.takes_argument:
            return [self.flag]
        return [self.flag, "" if value is None else str(value)]


NEGATABLE_BOOLEAN_OPTIONS = (
    "dry_run", "names", "sorted", "inline_errors",
    "details", "color", "timestamp", "silent",
)
META_OPTIONS = ("help", "version")
BOOLEAN_OPTIONS = NEGATABLE_BOOLEAN_OPTIONS + META_OPTIONS

SINGLE_ARGUMENT_OPTIONS = (
    "hookfiles", "only", "reporter", "output", "header",
    "user", "method", "level", "path",
)

OPTIONS: Dict[str, OptionSpec] = {
    **{
        name: OptionSpec(name, negatable=True)
        for name in NEGATABLE_BOOLEAN_OPTIONS
    },
    **{name: OptionSpec(name) for name in META_OPTIONS},
    **{
        name: OptionSpec(name, takes_argument=True)
        for name in SINGLE_ARGUMENT_OPTIONS
    },
}


def find_option(name: str) -> Optional[OptionSpec]:
    """Cherche une option par nom, forme négative comprise.

    Args:
        name: Nom de l'option (ex: 'level', 'no_color').

    Returns:
        L'OptionSpec correspondant, ou None si le nom est inconnu.
    """
    spec = OPTIONS.get(name)
    if spec is not None:
        return spec
    if name.startswith(NEGATION_PREFIX):
        base = OPTIONS.get(name[len(NEGATION_PREFIX):])
        if base is not None and base.negatable:
            return OptionSpec(name)
    return None


def resolve_option(name: str) -> OptionSpec:
    """Comme find_option, mais refuse les noms inconnus.

    Args:
        name: Nom de l'option.

    Returns:
        L'OptionSpec correspondant.

    Raises:
        UnknownOptionError: Si le nom n'est pas une option Dredd.
    """
    spec = find_option(name)
    if spec is None:
        raise UnknownOptionError(name)
    return spec


def option_names() -> List[str]:
    """Liste tous les noms acceptés, formes négatives incluses."""
    negated = [
        NEGATION_PREFIX + name for name in NEGATABLE_BOOLEAN_OPTIONS
    ]
    return list(OPTIONS) + negated
