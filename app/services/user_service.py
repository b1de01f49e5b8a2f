from pymongo.database import Database
from pymongo import ReturnDocument
from typing import Any, Dict, List, Optional
import logging

from app.database import parse_object_id, serialize
from app.models import payment as payment_model
from app.models import user as user_model
from app.models.user import Role, ROLE_SWAP, EMAIL_FIELD
from app.schemas.user import UserCreate
from app.utils.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class UserService:
    @staticmethod
    def register(db: Database, user: UserCreate) -> Dict[str, Any]:
        """Store a new user; an email can only be registered once"""
        users = db[user_model.COLLECTION]
        email = user.userInfo.email
        if users.find_one({EMAIL_FIELD: email}, {"_id": 1}):
            raise ConflictError(f"A user with email '{email}' already exists")

        document = user.model_dump(mode="json")
        document.update({"isVerified": False, "isFired": False})
        result = users.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Registered {email} as {document['role']}")
        return serialize(document)

    @staticmethod
    def list_users(
        db: Database,
        is_verified: bool = False,
        fired_email: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        users = db[user_model.COLLECTION]
        if fired_email:
            if users.find_one({EMAIL_FIELD: fired_email, "isFired": True}, {"_id": 1}):
                raise ConflictError(f"User '{fired_email}' has been fired")
            query = {EMAIL_FIELD: fired_email}
        elif is_verified:
            query = {"isVerified": True}
        else:
            query = {}
        return [serialize(doc) for doc in users.find(query)]

    @staticmethod
    def list_employees(db: Database) -> List[Dict[str, Any]]:
        cursor = db[user_model.COLLECTION].find({"role": Role.EMPLOYEE.value})
        return [serialize(doc) for doc in cursor]

    @staticmethod
    def get_role(db: Database, email: str) -> str:
        user = db[user_model.COLLECTION].find_one({EMAIL_FIELD: email}, {"role": 1})
        if user is None:
            raise NotFoundError(f"No user with email '{email}'")
        return user.get("role")

    @staticmethod
    def toggle_verification(db: Database, user_id: str) -> Dict[str, Any]:
        users = db[user_model.COLLECTION]
        _id = parse_object_id(user_id)
        user = users.find_one({"_id": _id}, {"isVerified": 1})
        if user is None:
            raise NotFoundError(f"No user with id '{user_id}'")

        updated = users.find_one_and_update(
            {"_id": _id},
            {"$set": {"isVerified": not user.get("isVerified", False)}},
            return_document=ReturnDocument.AFTER,
        )
        logger.info(f"User {user_id} verification set to {updated['isVerified']}")
        return serialize(updated)

    @staticmethod
    def change_role(db: Database, email: str) -> Dict[str, Any]:
        """Swap employee and hr; any other role is returned unchanged"""
        users = db[user_model.COLLECTION]
        user = users.find_one({EMAIL_FIELD: email})
        if user is None:
            raise NotFoundError(f"No user with email '{email}'")

        new_role = ROLE_SWAP.get(user.get("role"))
        if new_role is None:
            logger.info(f"Role of {email} ({user.get('role')}) is not swappable, left as is")
            return serialize(user)

        updated = users.find_one_and_update(
            {"_id": user["_id"]},
            {"$set": {"role": new_role}},
            return_document=ReturnDocument.AFTER,
        )
        logger.info(f"Changed role of {email} from {user.get('role')} to {new_role}")
        return serialize(updated)

    @staticmethod
    def fire(db: Database, email: str) -> Dict[str, Any]:
        # Upserts: firing an unknown email leaves a shell record behind
        result = db[user_model.COLLECTION].update_one(
            {EMAIL_FIELD: email},
            {"$set": {"isFired": True}},
            upsert=True,
        )
        logger.info(f"Fired {email}")
        return {
            "matchedCount": result.matched_count,
            "modifiedCount": result.modified_count,
            "upsertedId": str(result.upserted_id) if result.upserted_id else None,
        }

    @staticmethod
    def update_salary(db: Database, user_id: str, salary: float) -> Dict[str, Any]:
        updated = db[user_model.COLLECTION].find_one_and_update(
            {"_id": parse_object_id(user_id)},
            {"$set": {"salary": salary}},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            raise NotFoundError(f"No user with id '{user_id}'")
        logger.info(f"Salary of user {user_id} set to {salary}")
        return serialize(updated)

    @staticmethod
    def get_details(db: Database, user_id: str) -> Dict[str, Any]:
        """User record joined with its settled payments, oldest period first"""
        user = db[user_model.COLLECTION].find_one({"_id": parse_object_id(user_id)})
        if user is None:
            raise NotFoundError(f"No user with id '{user_id}'")

        email = user.get("userInfo", {}).get("email")
        payments = db[payment_model.COLLECTION].find(
            {"employeeEmail": email, "isPaymentSuccess": True},
            {"_id": 0, "monthAndYear": 1, "salary": 1},
        ).sort("monthAndYear", 1)

        details = serialize(user)
        details["payments"] = list(payments)
        return details
