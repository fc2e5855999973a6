"""Construction et exécution de la ligne de commande Dredd.

Classes et fonctions disponibles :
    OptionSpec : Description d'une option Dredd.
    resolve_option : Résolution d'un nom d'option (formes 'no_' incluses).
    has_at_least_two_arguments : Contrôle heuristique avant exécution.
    CommandResult : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    ShellCommandExecutor : Exécuteur concret via le shell.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut (logs fichier).
    AnsiCommandFormatter : Formatage ANSI coloré (console).
"""

from dredd_rack.commands.base import (
    CommandResult,
    CommandExecutor,
)
from dredd_rack.commands.executor import ShellCommandExecutor
from dredd_rack.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
    AnsiCommandFormatter,
)
from dredd_rack.commands.options import (
    OPTIONS,
    OptionSpec,
    find_option,
    option_names,
    resolve_option,
)
from dredd_rack.commands.validity import has_at_least_two_arguments

__all__ = [
    # Options
    "OPTIONS",
    "OptionSpec",
    "find_option",
    "option_names",
    "resolve_option",
    # Validation
    "has_at_least_two_arguments",
    # Structures de données
    "CommandResult",
    # Interface abstraite
    "CommandExecutor",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # Implémentation
    "ShellCommandExecutor",
]
