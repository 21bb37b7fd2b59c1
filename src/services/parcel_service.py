"""
Service de suivi des colis.

Le ParcelService porte les regles metier au-dessus du store :
- enregistrement d'un colis au statut registered, horodate en UTC
- progression du statut, une etape a la fois, via la table de transitions
- modification d'adresse et suppression reservees aux colis registered

Chaque operation reussie affiche une ligne de confirmation sur la sortie
standard. Les conditions sur le statut sont evaluees par l'instruction SQL
elle-meme ; une relecture n'a lieu qu'apres un refus, pour distinguer un
colis absent d'un colis au mauvais statut.
"""

from typing import Optional

from loguru import logger
from rich.console import Console

from src.core.entities.parcel import Parcel, ParcelStatus
from src.core.errors import PreconditionError
from src.core.ports.repositories import IParcelStore


class ParcelService:
    """
    Service metier des colis.

    Example:
        service = ParcelService(store=SQLModelParcelStore(session))
        parcel = service.register(1, "Lyon, 12 rue de la Republique")
        service.change_address(parcel.number, "Lille, 3 place du Theatre")
        service.next_status(parcel.number)
        service.print_client_parcels(1)
    """

    def __init__(self, store: IParcelStore, console: Optional[Console] = None) -> None:
        """
        Initialise le service.

        Args:
            store: Store de persistance des colis
            console: Console Rich recevant les confirmations (defaut: sortie standard)
        """
        self._store = store
        self._console = console or Console()

    def _emit(self, message: str) -> None:
        # Texte brut : une adresse peut contenir des crochets ou des deux-points
        self._console.print(
            message, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def register(self, client: int, address: str) -> Parcel:
        """
        Enregistre un nouveau colis pour un client.

        Args:
            client: Identifiant du client
            address: Adresse de livraison

        Returns:
            Le colis complete avec le numero attribue par le store
        """
        parcel = Parcel.register(client, address)
        parcel.number = self._store.add(parcel)

        logger.info("Colis enregistre", number=parcel.number, client=client)
        self._emit(
            f"Nouveau colis n° {parcel.number} à l'adresse {parcel.address} "
            f"du client {parcel.client} enregistré le {parcel.created_at}"
        )
        return parcel

    def get(self, number: int) -> Parcel:
        """Retourne le colis demande (NotFoundError si absent)."""
        return self._store.get(number)

    def print_client_parcels(self, client: int) -> None:
        """Affiche les colis d'un client, une ligne par colis, puis une ligne vide."""
        parcels = self._store.get_by_client(client)

        self._emit(f"Colis du client {client} :")
        for parcel in parcels:
            self._emit(
                f"Colis n° {parcel.number} à l'adresse {parcel.address} "
                f"du client {parcel.client} enregistré le {parcel.created_at}, "
                f"statut {parcel.status.value}"
            )
        self._emit("")

    def next_status(self, number: int) -> Optional[ParcelStatus]:
        """
        Fait avancer le colis au statut suivant.

        Au statut terminal (delivered), ne fait rien : aucune ecriture,
        aucun message.

        Returns:
            Le nouveau statut, ou None si le colis etait deja livre
        """
        parcel = self._store.get(number)

        next_status = parcel.status.next()
        if next_status is None:
            logger.debug("Statut terminal, rien a faire", number=number)
            return None

        self._store.set_status(number, next_status)
        logger.info(
            "Statut avance",
            number=number,
            previous=parcel.status.value,
            status=next_status.value,
        )
        self._emit(f"Le colis n° {number} a un nouveau statut : {next_status.value}")
        return next_status

    def change_address(self, number: int, address: str) -> None:
        """
        Change l'adresse de livraison d'un colis encore registered.

        Raises:
            NotFoundError: Aucun colis ne porte ce numero
            PreconditionError: Le colis n'est plus au statut registered
        """
        if not self._store.set_address(number, address):
            self._refuse(number, "modifier l'adresse")

        logger.info("Adresse modifiee", number=number)

    def delete(self, number: int) -> None:
        """
        Supprime un colis encore registered.

        Raises:
            NotFoundError: Aucun colis ne porte ce numero
            PreconditionError: Le colis n'est plus au statut registered
        """
        if not self._store.delete(number):
            self._refuse(number, "supprimer le colis")

        logger.info("Colis supprime", number=number)

    def _refuse(self, number: int, action: str) -> None:
        """
        Explique pourquoi une mutation conditionnelle n'a touche aucune ligne.

        La relecture leve NotFoundError si le colis n'existe pas ;
        sinon le statut courant est celui qui bloque l'operation.
        """
        parcel = self._store.get(number)
        logger.warning(
            "Operation refusee",
            number=number,
            action=action,
            status=parcel.status.value,
        )
        raise PreconditionError(number, parcel.status, action)
