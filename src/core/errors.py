"""
Erreurs du domaine colis.

- NotFoundError : aucun colis ne porte le numero demande
- PreconditionError : mutation refusee par le statut courant du colis
- StorageError : echec de la couche de persistance (connexion, contrainte, I/O)
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.core.entities.parcel import ParcelStatus


class ParcelError(Exception):
    """Classe de base des erreurs previsibles du suivi de colis."""


class NotFoundError(ParcelError):
    """Levee quand aucun colis ne correspond au numero demande."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"colis n° {number} introuvable")


class PreconditionError(ParcelError):
    """
    Levee quand une mutation est tentee sur un colis qui n'est plus registered.

    Attributes:
        number: Numero du colis concerne
        status: Statut courant qui interdit l'operation
        action: Operation refusee ("modifier l'adresse", "supprimer le colis")
    """

    def __init__(self, number: int, status: "ParcelStatus", action: str) -> None:
        self.number = number
        self.status = status
        self.action = action
        super().__init__(
            f"impossible de {action} : le colis n° {number} est au statut {status.value}"
        )


class StorageError(ParcelError):
    """Levee quand la base de donnees echoue ; l'exception d'origine est chainee."""
