import pytest
from sqlalchemy.exc import OperationalError

from merchant_api.exceptions import NotFoundError, TransactionError, ValidationError
from merchant_api.models import Address
from sample_data import CPF_A, CPF_B, address_payload, customer_payload


def test_create_and_get_customer(customer_service):
    created = customer_service.create(customer_payload())

    assert created.id is not None
    assert created.tax_id == CPF_A
    assert created.address.street_line == "Avenida Brasil"
    assert customer_service.get_by_id(created.id) == created


def test_individual_tax_id_is_not_unique(customer_service):
    first = customer_service.create(customer_payload())
    second = customer_service.create(customer_payload(name="Maria S."))

    assert first.id != second.id
    assert len(customer_service.list_all()) == 2


def test_invalid_customer_persists_nothing(customer_service, db_session):
    with pytest.raises(ValidationError) as exc_info:
        customer_service.create(customer_payload(email="maria"))

    assert exc_info.value.fields == {"email"}
    assert customer_service.list_all() == []
    assert db_session.query(Address).count() == 0


def test_update_customer(customer_service):
    created = customer_service.create(customer_payload())

    updated = customer_service.update(created.id, customer_payload(
        tax_id=CPF_B, email="m@example.com", address=address_payload(number="7"),
    ))

    assert updated.id == created.id
    assert updated.tax_id == CPF_B
    assert updated.email == "m@example.com"
    assert updated.address.number == "7"


def test_update_missing_customer(customer_service):
    with pytest.raises(NotFoundError):
        customer_service.update(5, customer_payload())

    assert customer_service.list_all() == []


def test_delete_customer_removes_address(customer_service, db_session):
    created = customer_service.create(customer_payload())

    customer_service.delete(created.id)

    assert db_session.query(Address).count() == 0
    with pytest.raises(NotFoundError):
        customer_service.get_by_id(created.id)


def test_failed_update_rolls_back_customer_and_address(customer_service, monkeypatch):
    created = customer_service.create(customer_payload())

    def broken_save(obj):
        raise OperationalError("UPDATE addresses", {}, Exception("disk I/O error"))

    monkeypatch.setattr(customer_service.addresses, "save", broken_save)

    with pytest.raises(TransactionError):
        customer_service.update(created.id, customer_payload(
            name="Renamed", email="other@example.com", address=address_payload(city="Londrina"),
        ))

    current = customer_service.get_by_id(created.id)
    assert current == created
    assert current.address.city == "Curitiba"


def test_failed_delete_rolls_back_customer(customer_service, db_session, monkeypatch):
    created = customer_service.create(customer_payload())

    def broken_delete(obj):
        raise OperationalError("DELETE FROM addresses", {}, Exception("disk I/O error"))

    monkeypatch.setattr(customer_service.addresses, "delete", broken_delete)

    with pytest.raises(TransactionError):
        customer_service.delete(created.id)

    assert customer_service.get_by_id(created.id) == created
    assert db_session.query(Address).count() == 1


def test_out_of_range_customer_id_is_not_found(customer_service):
    with pytest.raises(NotFoundError):
        customer_service.get_by_id(2**70)
