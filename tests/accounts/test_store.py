"""Tests for the SQLAlchemy-backed user store."""

import pytest

from extensions import db
from models import User
from modules.accounts.errors import StoreError, UsernameTakenError
from modules.accounts.store import UserStore


def test_insert_then_find(store) -> None:
    user_id = store.insert_user("ana_01", "hash", "a@b.com")

    user = store.find_by_username("ana_01")
    assert user is not None
    assert user.id == user_id
    assert user.email == "a@b.com"
    assert store.find_by_username("ANA_01") is None
    assert store.find_by_username("nobody") is None


def test_unique_constraint_reports_taken(store) -> None:
    store.insert_user("ana_01", "hash", "a@b.com")

    with pytest.raises(UsernameTakenError):
        store.insert_user("ana_01", "other", "c@d.com")

    assert User.query.filter_by(username="ana_01").count() == 1


def test_unreachable_table_raises_store_error(app) -> None:
    db.drop_all()
    store = UserStore()

    with pytest.raises(StoreError) as exc:
        store.find_by_username("ana_01")
    assert exc.value.message == "Something went wrong. Please try again later."

    with pytest.raises(StoreError):
        store.insert_user("ana_01", "hash", "a@b.com")


def test_find_by_id(store) -> None:
    user_id = store.insert_user("ana_01", "hash", "a@b.com")

    assert store.find_by_id(user_id).username == "ana_01"
    assert store.find_by_id(user_id + 1) is None


def test_find_by_id_store_down(app) -> None:
    db.drop_all()

    with pytest.raises(StoreError):
        UserStore().find_by_id(1)
