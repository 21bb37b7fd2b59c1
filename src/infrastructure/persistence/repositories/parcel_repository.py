"""
Implementation SQLModel du store de colis.

Implemente l'interface IParcelStore pour la persistance des colis
dans la base de donnees via SQLModel. Chaque operation emet une seule
instruction SQL parametree puis valide la transaction.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import Delete, Update, delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.parcel import Parcel, ParcelStatus
from src.core.errors import NotFoundError, StorageError
from src.core.ports.repositories import IParcelStore
from src.infrastructure.persistence.models import ParcelModel

_REGISTERED = ParcelStatus.REGISTERED.value


class SQLModelParcelStore(IParcelStore):
    """
    Store SQLModel pour les colis.

    Implemente IParcelStore avec conversion bidirectionnelle
    entre l'entite Parcel (domaine) et ParcelModel (persistance).

    Les conditions sur le statut (adresse, suppression) sont portees par
    la clause WHERE de l'instruction : la verification et l'ecriture sont
    atomiques. Le store ne leve pas d'erreur quand aucune ligne n'est
    touchee, il le signale par sa valeur de retour.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le store avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: ParcelModel) -> Parcel:
        """Convertit un modele DB en entite domaine."""
        return Parcel(
            number=model.number,
            client=model.client,
            status=ParcelStatus(model.status),
            address=model.address,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Parcel) -> ParcelModel:
        """Convertit une entite domaine en modele DB (sans numero, attribue par le moteur)."""
        return ParcelModel(
            client=entity.client,
            status=entity.status.value,
            address=entity.address,
            created_at=entity.created_at,
        )

    def _fail(self, operation: str, exc: SQLAlchemyError) -> StorageError:
        """Annule la transaction en cours et construit l'erreur de stockage."""
        self._session.rollback()
        logger.error("Echec base de donnees", operation=operation, error=str(exc))
        return StorageError(f"{operation} : {exc}")

    def add(self, parcel: Parcel) -> int:
        """Insere le colis et retourne le numero attribue."""
        model = self._to_model(parcel)
        try:
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        except SQLAlchemyError as exc:
            raise self._fail("insertion du colis", exc) from exc
        logger.debug("Colis insere", number=model.number, client=model.client)
        return model.number

    def get(self, number: int) -> Parcel:
        """Recupere un colis par son numero."""
        model = self._find(number)
        if model is None:
            raise NotFoundError(number)
        return self._to_entity(model)

    def _find(self, number: int) -> Optional[ParcelModel]:
        # UPDATE/DELETE passent par la connexion : relire la ligne, pas l'identity map
        statement = (
            select(ParcelModel)
            .where(ParcelModel.number == number)
            .execution_options(populate_existing=True)
        )
        try:
            model = self._session.exec(statement).first()
        except SQLAlchemyError as exc:
            raise self._fail(f"lecture du colis n° {number}", exc) from exc
        return model

    def get_by_client(self, client: int) -> list[Parcel]:
        """Liste les colis d'un client, tries par numero croissant."""
        statement = (
            select(ParcelModel)
            .where(ParcelModel.client == client)
            .order_by(ParcelModel.number)
            .execution_options(populate_existing=True)
        )
        try:
            models = self._session.exec(statement).all()
        except SQLAlchemyError as exc:
            raise self._fail(f"lecture des colis du client {client}", exc) from exc
        return [self._to_entity(model) for model in models]

    def set_status(self, number: int, status: ParcelStatus) -> None:
        """Met a jour le statut sans condition."""
        statement = (
            update(ParcelModel)
            .where(ParcelModel.number == number)
            .values(status=status.value)
        )
        self._execute(statement, f"mise a jour du statut du colis n° {number}")
        logger.debug("Statut mis a jour", number=number, status=status.value)

    def set_address(self, number: int, address: str) -> bool:
        """Met a jour l'adresse uniquement si le colis est au statut registered."""
        statement = (
            update(ParcelModel)
            .where(ParcelModel.number == number)
            .where(ParcelModel.status == _REGISTERED)
            .values(address=address)
        )
        changed = self._execute(statement, f"mise a jour de l'adresse du colis n° {number}")
        logger.debug("Adresse mise a jour", number=number, rows=changed)
        return changed > 0

    def delete(self, number: int) -> bool:
        """Supprime le colis uniquement s'il est au statut registered."""
        statement = (
            delete(ParcelModel)
            .where(ParcelModel.number == number)
            .where(ParcelModel.status == _REGISTERED)
        )
        removed = self._execute(statement, f"suppression du colis n° {number}")
        logger.debug("Colis supprime", number=number, rows=removed)
        return removed > 0

    def _execute(self, statement: Update | Delete, operation: str) -> int:
        """Execute une instruction UPDATE/DELETE, valide et retourne le nombre de lignes touchees."""
        try:
            result = self._session.connection().execute(statement)
            rowcount = result.rowcount
            self._session.commit()
        except SQLAlchemyError as exc:
            raise self._fail(operation, exc) from exc
        return rowcount
