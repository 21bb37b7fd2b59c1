"""
Interfaces ports pour les repositories.

Interface abstraite (port) definissant le contrat de persistance des colis.
L'implementation (adaptateur) fournit le mecanisme de stockage concret
(SQLite via SQLModel, en memoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod

from src.core.entities.parcel import Parcel, ParcelStatus


class IParcelStore(ABC):
    """
    Interface de stockage des colis.

    Chaque operation correspond a une seule instruction SQL. Le store
    n'interprete pas les erreurs : les echecs de la base sont remontes
    sous forme de StorageError.
    """

    @abstractmethod
    def add(self, parcel: Parcel) -> int:
        """Insere un colis et retourne le numero attribue par le stockage."""
        ...

    @abstractmethod
    def get(self, number: int) -> Parcel:
        """Recupere un colis par son numero. Leve NotFoundError si absent."""
        ...

    @abstractmethod
    def get_by_client(self, client: int) -> list[Parcel]:
        """Liste les colis d'un client, tries par numero. Liste vide si aucun."""
        ...

    @abstractmethod
    def set_status(self, number: int, status: ParcelStatus) -> None:
        """Met a jour le statut sans condition (transition deja validee)."""
        ...

    @abstractmethod
    def set_address(self, number: int, address: str) -> bool:
        """
        Met a jour l'adresse si le colis est au statut registered.

        Retourne :
            True si une ligne a ete modifiee, False sinon (colis absent
            ou statut different de registered)
        """
        ...

    @abstractmethod
    def delete(self, number: int) -> bool:
        """Supprime le colis s'il est au statut registered. Retourne True si supprime."""
        ...
