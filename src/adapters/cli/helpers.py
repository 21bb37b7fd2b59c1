"""
Utilitaires partages pour les commandes CLI de ParcelTrack.

Ce module fournit :
- console : instance Rich Console partagee (confirmations et erreurs)
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- handle_parcel_errors : decorateur traduisant les erreurs metier en code de sortie
"""

from contextlib import contextmanager
from functools import wraps

import typer
from dependency_injector import providers
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from src.container import Container
from src.core.errors import ParcelError, PreconditionError

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Le service du container ecrit ses confirmations sur la console partagee.

    Args:
        requires_db: Si True (defaut), cree la table parcel si necessaire.

    Usage:
        @with_container()
        def my_command(container, ...):
            service = container.parcel_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            container.console.override(providers.Object(console))
            if requires_db:
                container.database.init()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def handle_parcel_errors(func):
    """
    Affiche les erreurs metier en rouge et termine la commande avec le code 1.

    Les refus lies au statut (PreconditionError) sont affiches en jaune.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PreconditionError as exc:
            console.print(f"[yellow]Refuse : {escape(str(exc))}[/yellow]")
            raise typer.Exit(1)
        except ParcelError as exc:
            console.print(f"[red]Erreur : {escape(str(exc))}[/red]")
            raise typer.Exit(1)
    return wrapper
