import pytest

from sample_data import CNPJ_A, CNPJ_B, CPF_A, address_payload, customer_payload, product_payload, supplier_payload

ADMIN = ("root", "rootpass1")
USER = ("ana", "s3cretpass")


@pytest.fixture
def accounts(user_service):
    user_service.ensure_admin(*ADMIN)
    user_service.register({"username": USER[0], "password": USER[1]})


def create_supplier(client, tax_id=CNPJ_A, **overrides) -> dict:
    response = client.post("/suppliers", json=supplier_payload(tax_id, **overrides))
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_and_fetch_supplier(client):
    created = create_supplier(client)

    assert created["taxId"] == CNPJ_A
    assert created["type"] == "STANDARD"
    assert created["address"]["postalCode"] == "80010-000"
    assert created["createdAt"] == created["updatedAt"]

    fetched = client.get(f"/suppliers/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    listed = client.get("/suppliers")
    assert listed.json() == [created]


def test_server_assigned_fields_are_ignored_on_input(client):
    created = create_supplier(client, id=500, createdAt="2000-01-01T00:00:00")

    assert created["id"] != 500
    assert not created["createdAt"].startswith("2000")


def test_validation_errors_list_every_violation(client):
    response = client.post("/suppliers", json=supplier_payload(
        "12345678901234", name="", type="GOLD", address=address_payload(city=""),
    ))

    assert response.status_code == 422
    detail = response.json()["detail"]
    found = {v["field"]: v["constraint"] for v in detail["violations"]}
    assert found == {"name": "not_blank", "taxId": "cnpj", "type": "enum", "address.city": "not_blank"}


def test_duplicate_tax_id_conflict(client):
    create_supplier(client)

    response = client.post("/suppliers", json=supplier_payload(name="Clone"))

    assert response.status_code == 409
    assert response.json()["detail"]["field"] == "taxId"


def test_missing_supplier_is_404(client):
    assert client.get("/suppliers/999").status_code == 404
    assert client.delete("/suppliers/999").status_code == 404


def test_supplier_update_requires_credentials(client, accounts):
    created = create_supplier(client)
    body = supplier_payload(name="Renamed")

    anonymous = client.put(f"/suppliers/{created['id']}", json=body)
    assert anonymous.status_code == 401
    assert anonymous.headers["WWW-Authenticate"] == "Basic"

    wrong = client.put(f"/suppliers/{created['id']}", json=body, auth=(ADMIN[0], "bad-password"))
    assert wrong.status_code == 401

    forbidden = client.put(f"/suppliers/{created['id']}", json=body, auth=USER)
    assert forbidden.status_code == 403

    assert client.get(f"/suppliers/{created['id']}").json()["name"] == "Acme"


def test_admin_updates_supplier(client, accounts):
    created = create_supplier(client)

    response = client.put(
        f"/suppliers/{created['id']}",
        json=supplier_payload(CNPJ_B, name="Renamed", type="PREMIUM"),
        auth=ADMIN,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Renamed"
    assert body["type"] == "PREMIUM"
    assert body["taxId"] == CNPJ_A
    assert body["createdAt"] == created["createdAt"]


def test_admin_update_of_missing_supplier(client, accounts):
    response = client.put("/suppliers/999", json=supplier_payload(), auth=ADMIN)

    assert response.status_code == 404


def test_delete_supplier(client):
    created = create_supplier(client)

    response = client.delete(f"/suppliers/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/suppliers/{created['id']}").status_code == 404


def test_product_lifecycle(client):
    supplier = create_supplier(client)

    missing = client.post("/products", json=product_payload(999))
    assert missing.status_code == 404

    created = client.post("/products", json=product_payload(supplier["id"]))
    assert created.status_code == 201
    product = created.json()
    assert product["price"] == 9.99
    assert product["supplierId"] == supplier["id"]

    updated = client.put(f"/products/{product['id']}", json=product_payload(supplier["id"], stockQuantity=12))
    assert updated.status_code == 200
    assert updated.json()["stockQuantity"] == 12

    assert client.delete(f"/products/{product['id']}").status_code == 204
    assert client.get("/products").json() == []


def test_product_validation(client):
    supplier = create_supplier(client)

    response = client.post("/products", json=product_payload(supplier["id"], price=0, stockQuantity=-3))

    assert response.status_code == 422
    fields = {v["field"] for v in response.json()["detail"]["violations"]}
    assert fields == {"price", "stockQuantity"}


def test_customer_lifecycle(client):
    created = client.post("/customers", json=customer_payload())
    assert created.status_code == 201
    customer = created.json()
    assert customer["taxId"] == CPF_A

    updated = client.put(f"/customers/{customer['id']}", json=customer_payload(email="new@example.com"))
    assert updated.status_code == 200
    assert updated.json()["email"] == "new@example.com"

    assert client.delete(f"/customers/{customer['id']}").status_code == 204
    assert client.get(f"/customers/{customer['id']}").status_code == 404


def test_statistics(client):
    s1 = create_supplier(client, CNPJ_A)
    create_supplier(client, CNPJ_B)
    for name in ("A", "B", "C"):
        client.post("/products", json=product_payload(s1["id"], name=name))
    client.post("/customers", json=customer_payload())

    response = client.get("/statistics")

    assert response.status_code == 200
    assert response.json() == {"supplierCount": 2, "productCount": 3, "customerCount": 1}


def test_register_and_whoami(client):
    created = client.post("/users", json={"username": "bob", "password": "bobpass12"})
    assert created.status_code == 201
    assert created.json()["role"] == "USER"
    assert "password" not in created.json()
    assert "passwordHash" not in created.json()

    me = client.get("/users/me", auth=("bob", "bobpass12"))
    assert me.status_code == 200
    assert me.json()["username"] == "bob"

    again = client.post("/users", json={"username": "bob", "password": "bobpass12"})
    assert again.status_code == 409


def test_admin_registration_is_restricted(client, accounts):
    body = {"username": "eve", "password": "evepass12", "role": "ADMIN"}

    assert client.post("/users", json=body).status_code == 403
    assert client.post("/users", json=body, auth=USER).status_code == 403

    created = client.post("/users", json=body, auth=ADMIN)
    assert created.status_code == 201
    assert created.json()["role"] == "ADMIN"


def test_out_of_range_ids_are_404(client):
    huge = 2**70

    assert client.get(f"/suppliers/{huge}").status_code == 404
    assert client.delete(f"/products/{huge}").status_code == 404
    assert client.get(f"/customers/{huge}").status_code == 404

    supplier = create_supplier(client)
    response = client.post("/products", json=product_payload(supplier["id"], supplierId=huge))
    assert response.status_code == 422
    assert response.json()["detail"]["violations"][0]["field"] == "supplierId"
