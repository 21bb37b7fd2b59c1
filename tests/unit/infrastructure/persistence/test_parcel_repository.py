"""
Tests pour SQLModelParcelStore.

Tous les tests utilisent une base SQLite en memoire (fixture store).
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.core.entities.parcel import Parcel, ParcelStatus
from src.core.errors import NotFoundError, StorageError
from src.infrastructure.persistence.repositories import SQLModelParcelStore


def _parcel(client: int = 1, address: str = "Lyon, 12 rue de la Republique") -> Parcel:
    return Parcel(client=client, address=address, created_at="2024-03-01T08:15:00Z")


class TestAddAndGet:
    """Tests d'insertion et de lecture."""

    def test_add_returns_assigned_number(self, store):
        """add() retourne le numero attribue par le moteur."""
        assert store.add(_parcel()) == 1
        assert store.add(_parcel()) == 2

    def test_get_returns_stored_fields(self, store):
        """get() restitue tous les champs inseres."""
        number = store.add(_parcel(client=5, address="Lille, 3 place du Theatre"))

        parcel = store.get(number)

        assert parcel == Parcel(
            number=number,
            client=5,
            status=ParcelStatus.REGISTERED,
            address="Lille, 3 place du Theatre",
            created_at="2024-03-01T08:15:00Z",
        )

    def test_get_missing_raises_not_found(self, store):
        """get() leve NotFoundError pour un numero inconnu."""
        with pytest.raises(NotFoundError) as exc_info:
            store.get(99)
        assert exc_info.value.number == 99


class TestGetByClient:
    """Tests de lecture par client."""

    def test_returns_only_matching_client(self, store):
        """Seuls les colis du client demande sont retournes."""
        store.add(_parcel(client=1, address="A"))
        store.add(_parcel(client=2, address="B"))
        store.add(_parcel(client=1, address="C"))

        parcels = store.get_by_client(1)

        assert [parcel.address for parcel in parcels] == ["A", "C"]
        assert all(parcel.client == 1 for parcel in parcels)

    def test_ordered_by_number(self, store):
        """Les colis sont tries par numero croissant."""
        numbers = [store.add(_parcel(client=4)) for _ in range(3)]
        assert [parcel.number for parcel in store.get_by_client(4)] == numbers

    def test_unknown_client_returns_empty_list(self, store):
        """Un client sans colis donne une liste vide, pas une erreur."""
        assert store.get_by_client(123) == []


class TestSetStatus:
    """Tests de mise a jour du statut."""

    def test_updates_status(self, store):
        """set_status() ecrit le statut sans condition."""
        number = store.add(_parcel())

        store.set_status(number, ParcelStatus.SENT)
        assert store.get(number).status is ParcelStatus.SENT

        store.set_status(number, ParcelStatus.DELIVERED)
        assert store.get(number).status is ParcelStatus.DELIVERED


class TestSetAddress:
    """Tests de la mise a jour conditionnelle de l'adresse."""

    def test_updates_registered_parcel(self, store):
        """L'adresse d'un colis registered est modifiee."""
        number = store.add(_parcel(address="A"))

        assert store.set_address(number, "B") is True
        assert store.get(number).address == "B"

    @pytest.mark.parametrize("status", [ParcelStatus.SENT, ParcelStatus.DELIVERED])
    def test_ignores_non_registered_parcel(self, store, status):
        """Aucune ligne touchee si le colis n'est plus registered."""
        number = store.add(_parcel(address="A"))
        store.set_status(number, status)

        assert store.set_address(number, "B") is False
        assert store.get(number).address == "A"

    def test_missing_parcel_is_not_an_error(self, store):
        """Un numero inconnu donne False, sans exception."""
        assert store.set_address(42, "B") is False


class TestDelete:
    """Tests de la suppression conditionnelle."""

    def test_deletes_registered_parcel(self, store):
        """Un colis registered est supprime."""
        number = store.add(_parcel())

        assert store.delete(number) is True
        with pytest.raises(NotFoundError):
            store.get(number)

    @pytest.mark.parametrize("status", [ParcelStatus.SENT, ParcelStatus.DELIVERED])
    def test_keeps_non_registered_parcel(self, store, status):
        """Un colis qui n'est plus registered reste en base."""
        number = store.add(_parcel())
        store.set_status(number, status)

        assert store.delete(number) is False
        assert store.get(number).status is status

    def test_missing_parcel_is_not_an_error(self, store):
        """Un numero inconnu donne False, sans exception."""
        assert store.delete(42) is False


class TestStorageErrors:
    """Tests de l'encapsulation des erreurs de la base."""

    def test_wraps_database_error_and_rolls_back(self):
        """Une erreur SQLAlchemy devient StorageError, chainee, apres rollback."""
        session = MagicMock()
        failure = OperationalError("SELECT", {}, Exception("database is locked"))
        session.exec.side_effect = failure
        store = SQLModelParcelStore(session)

        with pytest.raises(StorageError) as exc_info:
            store.get(1)

        assert exc_info.value.__cause__ is failure
        session.rollback.assert_called_once()

    def test_missing_table_raises_storage_error(self):
        """Sans table parcel, les operations levent StorageError."""
        from sqlmodel import Session

        from src.infrastructure.persistence.database import create_db_engine

        bare_engine = create_db_engine("sqlite://")
        try:
            with Session(bare_engine) as bare_session:
                store = SQLModelParcelStore(bare_session)
                with pytest.raises(StorageError):
                    store.add(_parcel())
                with pytest.raises(StorageError):
                    store.set_status(1, ParcelStatus.SENT)
        finally:
            bare_engine.dispose()

    def test_conditional_write_failure_rolls_back(self):
        """Un UPDATE/DELETE conditionnel en echec devient StorageError sans commit."""
        session = MagicMock()
        failure = OperationalError("UPDATE", {}, Exception("disk I/O error"))
        session.connection.return_value.execute.side_effect = failure
        store = SQLModelParcelStore(session)

        with pytest.raises(StorageError) as exc_info:
            store.set_address(1, "B")
        with pytest.raises(StorageError):
            store.delete(1)

        assert exc_info.value.__cause__ is failure
        session.commit.assert_not_called()
        assert session.rollback.call_count == 2
