"""
Commandes CLI de suivi des colis (register, show, list, next-status, change-address, delete, demo).
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from src.adapters.cli.helpers import (
    console,
    handle_parcel_errors,
    suppress_loguru,
    with_container,
)
from src.core.entities.parcel import Parcel
from src.core.errors import PreconditionError

# Adresses utilisees par le scenario de demonstration
DEMO_ADDRESS = "Rennes, 5 rue de la Monnaie"
DEMO_NEW_ADDRESS = "Nantes, 25 quai de la Fosse"


def register(
    client: Annotated[int, typer.Argument(help="Identifiant du client")],
    address: Annotated[str, typer.Argument(help="Adresse de livraison")],
) -> None:
    """Enregistre un nouveau colis (statut registered)."""
    _register(client, address)


@handle_parcel_errors
@with_container()
def _register(container, client: int, address: str) -> None:
    container.parcel_service().register(client, address)


def show(
    number: Annotated[int, typer.Argument(help="Numero du colis")],
) -> None:
    """Affiche le detail d'un colis."""
    _show(number)


@handle_parcel_errors
@with_container()
def _show(container, number: int) -> None:
    parcel = container.parcel_service().get(number)
    with suppress_loguru():
        console.print(_render_parcel(parcel))


def _render_parcel(parcel: Parcel) -> Table:
    """Construit la table Rich decrivant un colis."""
    table = Table(title=f"Colis n° {parcel.number}", show_header=False)
    table.add_column("Champ", style="cyan")
    table.add_column("Valeur")
    table.add_row("Client", str(parcel.client))
    table.add_row("Statut", parcel.status.value)
    table.add_row("Adresse", escape(parcel.address))
    table.add_row("Cree le", parcel.created_at)
    return table


def list_parcels(
    client: Annotated[int, typer.Argument(help="Identifiant du client")],
) -> None:
    """Liste les colis d'un client."""
    _list_parcels(client)


@handle_parcel_errors
@with_container()
def _list_parcels(container, client: int) -> None:
    container.parcel_service().print_client_parcels(client)


def next_status(
    number: Annotated[int, typer.Argument(help="Numero du colis")],
) -> None:
    """Fait avancer le colis au statut suivant (registered -> sent -> delivered)."""
    _next_status(number)


@handle_parcel_errors
@with_container()
def _next_status(container, number: int) -> None:
    if container.parcel_service().next_status(number) is None:
        console.print(f"[dim]Le colis n° {number} est deja livre.[/dim]")


def change_address(
    number: Annotated[int, typer.Argument(help="Numero du colis")],
    address: Annotated[str, typer.Argument(help="Nouvelle adresse de livraison")],
) -> None:
    """Change l'adresse d'un colis encore au statut registered."""
    _change_address(number, address)


@handle_parcel_errors
@with_container()
def _change_address(container, number: int, address: str) -> None:
    container.parcel_service().change_address(number, address)
    console.print(f"[green]Le colis n° {number} sera livré à l'adresse {escape(address)}[/green]")


def delete(
    number: Annotated[int, typer.Argument(help="Numero du colis")],
) -> None:
    """Supprime un colis encore au statut registered."""
    _delete(number)


@handle_parcel_errors
@with_container()
def _delete(container, number: int) -> None:
    container.parcel_service().delete(number)
    console.print(f"[green]Le colis n° {number} a été supprimé[/green]")


def demo(
    client: Annotated[
        int,
        typer.Option("--client", "-c", help="Client utilise pour le scenario"),
    ] = 1,
) -> None:
    """
    Rejoue le scenario de reference sur la base configuree.

    Enregistre un colis, change son adresse, l'expedie, tente de le supprimer
    (refuse), puis enregistre et supprime un second colis. La liste du client
    est affichee entre chaque etape.
    """
    _demo(client)


@handle_parcel_errors
@with_container()
def _demo(container, client: int) -> None:
    service = container.parcel_service()

    parcel = service.register(client, DEMO_ADDRESS)
    service.change_address(parcel.number, DEMO_NEW_ADDRESS)
    service.next_status(parcel.number)
    service.print_client_parcels(client)

    # Le colis expedie ne doit pas pouvoir etre supprime
    try:
        service.delete(parcel.number)
    except PreconditionError as exc:
        console.print(f"[yellow]Refuse : {escape(str(exc))}[/yellow]")
    service.print_client_parcels(client)

    # Un colis encore registered se supprime
    second = service.register(client, DEMO_ADDRESS)
    service.delete(second.number)
    service.print_client_parcels(client)
