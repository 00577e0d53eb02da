# tests/conftest.py
import os
import sys
import pytest

# so that "from app import create_app" works when run from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from extensions import db
from modules.accounts.store import UserStore


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return UserStore()


@pytest.fixture()
def signup_data():
    return {
        "username": "ana_01",
        "email": "a@b.com",
        "password": "secret1",
        "confirm_password": "secret1",
    }
