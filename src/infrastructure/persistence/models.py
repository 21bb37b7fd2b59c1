"""
Modeles SQLModel pour la base de donnees ParcelTrack.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- parcel: Colis suivis (numero, client, statut, adresse, date de creation)

Le statut est stocke en texte (valeur de ParcelStatus) et la date de
creation en texte RFC3339 UTC.
"""

from __future__ import annotations

from sqlmodel import Field, SQLModel


class ParcelModel(SQLModel, table=True):
    """
    Modele representant un colis dans la base de donnees.

    Le numero est attribue par le moteur a l'insertion (autoincrement).
    """

    __tablename__ = "parcel"
    # AUTOINCREMENT : un numero supprime n'est jamais reattribue
    __table_args__ = {"sqlite_autoincrement": True}

    number: int | None = Field(default=None, primary_key=True)
    client: int = Field(index=True)
    status: str = Field(default="registered")  # registered | sent | delivered
    address: str
    created_at: str  # ex: "2024-03-01T08:15:00Z"
