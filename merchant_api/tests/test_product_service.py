from decimal import Decimal

import pytest

from merchant_api.exceptions import NotFoundError, ValidationError
from merchant_api.models import Product
from sample_data import CNPJ_A, CNPJ_B, product_payload, supplier_payload


@pytest.fixture
def supplier(supplier_service):
    return supplier_service.create(supplier_payload(CNPJ_A))


def test_create_product_for_existing_supplier(product_service, supplier):
    created = product_service.create(product_payload(supplier.id))

    assert created.id is not None
    assert created.supplier_id == supplier.id
    assert created.price == Decimal("9.99")
    assert product_service.get_by_id(created.id) == created


def test_unknown_supplier_inserts_nothing(product_service, db_session):
    with pytest.raises(NotFoundError) as exc_info:
        product_service.create(product_payload(999))

    assert exc_info.value.entity == "Supplier"
    assert exc_info.value.entity_id == 999
    assert db_session.query(Product).count() == 0


def test_validation_runs_before_supplier_lookup(product_service):
    with pytest.raises(ValidationError) as exc_info:
        product_service.create(product_payload(999, price=-1))

    assert exc_info.value.fields == {"price"}


def test_update_overwrites_fields(product_service, supplier_service, supplier):
    other = supplier_service.create(supplier_payload(CNPJ_B, name="Beta"))
    created = product_service.create(product_payload(supplier.id))

    updated = product_service.update(created.id, product_payload(
        other.id, name="Gadget", price="25.50", description=None, stockQuantity=0,
    ))

    assert updated.id == created.id
    assert updated.name == "Gadget"
    assert updated.price == Decimal("25.50")
    assert updated.description is None
    assert updated.stock_quantity == 0
    assert updated.supplier_id == other.id


def test_update_with_unknown_supplier_keeps_product(product_service, supplier):
    created = product_service.create(product_payload(supplier.id))

    with pytest.raises(NotFoundError):
        product_service.update(created.id, product_payload(999, name="Changed"))

    assert product_service.get_by_id(created.id) == created


def test_update_missing_product(product_service, supplier):
    with pytest.raises(NotFoundError) as exc_info:
        product_service.update(999, product_payload(supplier.id))

    assert exc_info.value.entity == "Product"


def test_delete_product(product_service, supplier):
    created = product_service.create(product_payload(supplier.id))

    product_service.delete(created.id)

    assert product_service.list_all() == []
    with pytest.raises(NotFoundError):
        product_service.delete(created.id)


def test_supplier_delete_leaves_dangling_reference(product_service, supplier_service, supplier):
    product = product_service.create(product_payload(supplier.id))

    supplier_service.delete(supplier.id)

    survivor = product_service.get_by_id(product.id)
    assert survivor.supplier_id == supplier.id
    with pytest.raises(NotFoundError):
        supplier_service.get_by_id(survivor.supplier_id)


def test_list_products_in_id_order(product_service, supplier):
    first = product_service.create(product_payload(supplier.id, name="A"))
    second = product_service.create(product_payload(supplier.id, name="B"))

    assert [p.id for p in product_service.list_all()] == [first.id, second.id]


def test_supplier_id_outside_integer_range(product_service, db_session):
    with pytest.raises(ValidationError) as exc_info:
        product_service.create(product_payload(2**70))
    assert [(v.field, v.constraint) for v in exc_info.value.violations] == [("supplierId", "max")]

    with pytest.raises(ValidationError) as exc_info:
        product_service.create(product_payload(0))
    assert [(v.field, v.constraint) for v in exc_info.value.violations] == [("supplierId", "min_exclusive")]

    assert db_session.query(Product).count() == 0


def test_largest_supplier_id_is_not_found(product_service):
    with pytest.raises(NotFoundError):
        product_service.create(product_payload(2**63 - 1))


def test_out_of_range_product_id_is_not_found(product_service):
    with pytest.raises(NotFoundError):
        product_service.get_by_id(2**70)
    with pytest.raises(NotFoundError):
        product_service.delete(2**70)
