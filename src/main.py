"""
Point d'entrée CLI de ParcelTrack.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    change_address,
    delete,
    demo,
    list_parcels,
    next_status,
    register,
    show,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity

__version__ = "0.1.0"

app = typer.Typer(
    name="parceltrack",
    help="Suivi de colis : enregistrement, expedition, livraison",
)
container = Container()


def _setup_logging(settings: Settings, level: str) -> None:
    configure_logging(settings, level=level)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """ParcelTrack - Suivi de colis."""
    settings = get_config()
    _setup_logging(settings, level_from_verbosity(verbose, quiet, settings.log_level))


# Monter les commandes depuis commands/
app.command()(register)
app.command()(show)
# Note: "list" masquerait le builtin, la fonction s'appelle list_parcels
app.command(name="list")(list_parcels)
app.command(name="next-status")(next_status)
app.command(name="change-address")(change_address)
app.command()(delete)
app.command()(demo)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration ParcelTrack")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"ParcelTrack v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    logger.info("Démarrage de ParcelTrack", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
