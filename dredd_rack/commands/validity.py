"""Contrôle heuristique d'une ligne de commande Dredd avant exécution."""

OPTIONS_DELIMITER = "--"
MINIMUM_TOKENS = 3


def has_at_least_two_arguments(command: str) -> bool:
    """Vérifie qu'une commande a au moins deux arguments (hors options).

    Seule la partie précédant le premier '--' est examinée : elle doit
    contenir le programme suivi d'au moins deux arguments.

    Examples:
        >>> has_at_least_two_arguments(
        ...     "dredd doc/*.apib http://api.example.com")
        True
        >>> has_at_least_two_arguments(
        ...     "dredd doc/*.apib http://api.example.com --level verbose")
        True
        >>> has_at_least_two_arguments("dredd http://api.example.com")
        False
        >>> has_at_least_two_arguments("dredd doc/*.apib --dry-run")
        False

    Limites connues :
        Les options courtes (ex: '-l' au lieu de '--level') ne sont pas
        reconnues et les options doivent suivre le dernier argument.
        Il peut donc y avoir des faux négatifs, jamais de faux positifs :
        si la fonction retourne True, la commande a bien au moins deux
        arguments.

    Args:
        command: Ligne de commande complète.

    Returns:
        True si la commande a au moins deux arguments, False sinon.
    """
    head = command.split(OPTIONS_DELIMITER, 1)[0]
    return len(head.split()) >= MINIMUM_TOKENS
