import os

os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ["ENVIRONMENT"] = "development"

import mongomock
import pytest
from bson.objectid import ObjectId
from fastapi.testclient import TestClient

from app.config.security import SecurityConfig
from app.database import get_db
from app.utils.security import create_access_token
from main import app


@pytest.fixture
def db():
    return mongomock.MongoClient()["Employee_Management_test"]


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_user(db):
    """Insert a user document straight into the store and return it (with its ObjectId)"""

    def _add_user(email, role="employee", **fields):
        document = {
            "_id": ObjectId(),
            "userInfo": {"email": email, "name": email.split("@")[0].title(), "photoUrl": None},
            "role": role,
            "isVerified": False,
            "isFired": False,
            "bankAccountNo": None,
            "designation": None,
            "salary": None,
        }
        document.update(fields)
        db["user"].insert_one(document)
        return document

    return _add_user


@pytest.fixture
def login(client):
    """Attach a valid session cookie for `email` to the test client"""

    def _login(email, name=None):
        token = create_access_token({"email": email, "name": name})
        client.cookies.set(SecurityConfig.COOKIE['name'], token)
        return token

    return _login
