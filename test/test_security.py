import pytest
from sqlalchemy.exc import IntegrityError

from backoffice.models import User, UserRole
from backoffice.utils.security import hash_password, verify_password, create_user


def test_hash_password_roundtrip():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_create_user_stores_hash(db):
    user = create_user(db, "admin", "s3cret", role="admin")

    assert user.role == UserRole.ADMIN
    assert user.password_hash != "s3cret"
    assert verify_password("s3cret", db.get(User, user.id).password_hash)


def test_create_user_default_role(db):
    assert create_user(db, "helpdesk", "pw").role == UserRole.SUPPORT


def test_create_user_duplicate_username(db):
    create_user(db, "admin", "one")
    with pytest.raises(IntegrityError):
        create_user(db, "admin", "two")
    assert db.query(User).count() == 1


def test_create_user_unknown_role(db):
    with pytest.raises(ValueError):
        create_user(db, "intern", "pw", role="intern")
