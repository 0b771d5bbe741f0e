import pytest

from merchant_api.domain.value_objects import Role
from merchant_api.exceptions import AuthenticationError, ConflictError, PermissionDeniedError, ValidationError
from merchant_api.models import User
from merchant_api.services import PasswordHasher


def test_hasher_round_trip():
    hasher = PasswordHasher(rounds=4)
    hashed = hasher.hash("correct horse")

    assert hashed != "correct horse"
    assert hasher.verify("correct horse", hashed)
    assert not hasher.verify("wrong horse", hashed)


def test_hasher_rejects_malformed_hash():
    assert not PasswordHasher(rounds=4).verify("secret123", "not-a-bcrypt-hash")


def test_register_stores_hash_only(user_service, db_session):
    response = user_service.register({"username": "ana", "password": "s3cretpass", "email": "ana@example.com"})

    assert response.role is Role.USER
    stored = db_session.query(User).filter_by(username="ana").one()
    assert stored.password_hash != "s3cretpass"
    assert "password" not in response.model_dump()


def test_duplicate_username(user_service):
    user_service.register({"username": "ana", "password": "s3cretpass"})

    with pytest.raises(ConflictError):
        user_service.register({"username": "ana", "password": "otherpass"})


def test_register_validation(user_service):
    with pytest.raises(ValidationError) as exc_info:
        user_service.register({"username": "", "password": "s3cretpass", "email": "nope"})

    assert exc_info.value.fields == {"username", "email"}


def test_authenticate(user_service):
    user_service.register({"username": "ana", "password": "s3cretpass"})

    assert user_service.authenticate("ana", "s3cretpass").username == "ana"
    with pytest.raises(AuthenticationError):
        user_service.authenticate("ana", "wrongpass")
    with pytest.raises(AuthenticationError):
        user_service.authenticate("nobody", "s3cretpass")


def test_admin_account_needs_admin_grantor(user_service):
    user_service.ensure_admin("root", "rootpass1")
    plain = user_service.register({"username": "ana", "password": "s3cretpass"})
    ana = user_service.authenticate("ana", "s3cretpass")

    with pytest.raises(PermissionDeniedError):
        user_service.register({"username": "eve", "password": "s3cretpass", "role": "ADMIN"})
    with pytest.raises(PermissionDeniedError):
        user_service.register({"username": "eve", "password": "s3cretpass", "role": "ADMIN"}, granted_by=ana)

    root = user_service.authenticate("root", "rootpass1")
    created = user_service.register({"username": "eve", "password": "s3cretpass", "role": "ADMIN"}, granted_by=root)
    assert created.role is Role.ADMIN
    assert plain.role is Role.USER


def test_require_role(user_service):
    user_service.register({"username": "ana", "password": "s3cretpass"})
    ana = user_service.authenticate("ana", "s3cretpass")

    assert user_service.require_role(ana, Role.USER) is ana
    with pytest.raises(PermissionDeniedError):
        user_service.require_role(ana, Role.ADMIN)


def test_ensure_admin_is_idempotent(user_service, db_session):
    assert user_service.ensure_admin("root", "rootpass1", "root@example.com") is True
    assert user_service.ensure_admin("root", "another-pass") is False

    assert db_session.query(User).count() == 1
    assert user_service.authenticate("root", "rootpass1").role == "ADMIN"


def test_password_limit_counts_utf8_bytes(user_service):
    at_limit = "é" * 36          # 72 bytes
    over_limit = "é" * 36 + "a"  # 37 characters, 73 bytes

    user_service.register({"username": "ana", "password": at_limit})
    assert user_service.authenticate("ana", at_limit).username == "ana"

    with pytest.raises(ValidationError) as exc_info:
        user_service.register({"username": "bob", "password": over_limit})
    assert [(v.field, v.constraint) for v in exc_info.value.violations] == [("password", "max_length")]


def test_hasher_never_truncates():
    hasher = PasswordHasher(rounds=4)
    hashed = hasher.hash("a" * 72)

    assert not hasher.verify("a" * 72 + "b", hashed)
    with pytest.raises(ValueError):
        hasher.hash("a" * 73)
