"""
Entité colis.

Un colis est enregistré par un client, puis avance d'un statut a la fois
(registered -> sent -> delivered). L'adresse ne peut changer, et le colis
ne peut etre supprime, que tant qu'il est au statut registered.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

# Horodatage RFC3339 en UTC, ex: 2024-03-01T08:15:00Z
CREATED_AT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class ParcelStatus(Enum):
    """Statut d'un colis dans son cycle de vie."""

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    def next(self) -> Optional["ParcelStatus"]:
        """Retourne le statut suivant, ou None si le statut est terminal."""
        return _TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        """Vrai si aucune transition ne part de ce statut."""
        return _TRANSITIONS[self] is None


# Table de transitions : une seule sortie par statut, delivered est terminal
_TRANSITIONS: dict[ParcelStatus, Optional[ParcelStatus]] = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
    ParcelStatus.DELIVERED: None,
}


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Formate un instant (defaut: maintenant) au format CREATED_AT_FORMAT en UTC."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime(CREATED_AT_FORMAT)


@dataclass
class Parcel:
    """
    Représente un colis suivi par le système.

    Attributs :
        number : Identifiant attribue par le stockage a l'insertion (None avant)
        client : Identifiant opaque du client proprietaire
        status : Statut courant dans le cycle de vie
        address : Adresse de livraison
        created_at : Date d'enregistrement (texte RFC3339 UTC), immuable
    """

    client: int
    address: str
    status: ParcelStatus = ParcelStatus.REGISTERED
    created_at: str = ""
    number: Optional[int] = None

    @classmethod
    def register(cls, client: int, address: str) -> "Parcel":
        """Construit un nouveau colis au statut registered, horodate maintenant."""
        return cls(
            client=client,
            address=address,
            status=ParcelStatus.REGISTERED,
            created_at=utc_timestamp(),
        )

    @property
    def is_mutable(self) -> bool:
        """Vrai tant que l'adresse peut changer et que le colis peut etre supprime."""
        return self.status is ParcelStatus.REGISTERED
