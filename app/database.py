from pymongo import MongoClient
from pymongo.database import Database
from bson.objectid import ObjectId
from bson.errors import InvalidId
from typing import Any, Dict, Optional
import os
from dotenv import load_dotenv

from app.models import payment as payment_model
from app.models import user as user_model
from app.utils.exceptions import NotFoundError

load_dotenv()


def build_database_url() -> str:
    """Resolve the Mongo URI from DATABASE_URL or the cluster credentials"""
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASS")
    host = os.getenv("DB_HOST")
    if user and password and host:
        return f"mongodb+srv://{user}:{password}@{host}/?retryWrites=true&w=majority"
    return "mongodb://localhost:27017"


DATABASE_URL = build_database_url()
DATABASE_NAME = os.getenv("DATABASE_NAME", "Employee_Management")

# MongoClient is thread-safe and connects lazily; one instance serves every request
client = MongoClient(DATABASE_URL)


# ✅ This is required to be imported wherever DB access is needed
def get_db() -> Database:
    return client[DATABASE_NAME]


def parse_object_id(value: str) -> ObjectId:
    """Turn a path parameter into an ObjectId; malformed ids can never match a record"""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise NotFoundError(f"No record with id '{value}'")


def serialize(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    if "_id" in document:
        document["_id"] = str(document["_id"])
    return document


def ensure_indexes(db: Database) -> None:
    """Back the application-level uniqueness checks with unique indexes"""
    db[user_model.COLLECTION].create_index(user_model.EMAIL_FIELD, unique=True)
    # Partial: settling an unknown id upserts a record without these fields
    db[payment_model.COLLECTION].create_index(
        [("employeeEmail", 1), ("monthAndYear", 1)],
        unique=True,
        partialFilterExpression={
            "employeeEmail": {"$exists": True},
            "monthAndYear": {"$exists": True},
        },
    )
