from pymongo.database import Database
from typing import Any, Dict, List
import logging

from app.database import parse_object_id, serialize
from app.models import user as user_model
from app.models import work_sheet as work_sheet_model
from app.models.work_sheet import period_of
from app.schemas.work_sheet import WorkSheetCreate, WorkSheetUpdate
from app.schemas.tokens import SessionUser
from app.utils.exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class WorkSheetService:
    @staticmethod
    def create(db: Database, session: SessionUser, entry: WorkSheetCreate) -> Dict[str, Any]:
        """Log work for the signed-in employee"""
        name = entry.name
        if not name:
            owner = db[user_model.COLLECTION].find_one(
                {user_model.EMAIL_FIELD: session.email},
                {"userInfo.name": 1},
            )
            name = (owner or {}).get("userInfo", {}).get("name") or session.name

        document = {
            "email": session.email,
            "name": name,
            "work": entry.work,
            "hours": entry.hours,
            "date": entry.date.isoformat(),
            "monthAndYear": entry.monthAndYear or period_of(entry.date),
        }
        result = db[work_sheet_model.COLLECTION].insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"{session.email} logged {entry.hours}h of '{entry.work}' on {document['date']}")
        return serialize(document)

    @staticmethod
    def list_by_email(db: Database, session: SessionUser, email: str) -> List[Dict[str, Any]]:
        if email != session.email:
            raise ForbiddenError("Employees can only read their own work sheet")
        cursor = db[work_sheet_model.COLLECTION].find({"email": email}).sort("date", -1)
        return [serialize(doc) for doc in cursor]

    @staticmethod
    def list_all(db: Database) -> List[Dict[str, Any]]:
        return [serialize(doc) for doc in db[work_sheet_model.COLLECTION].find()]

    @staticmethod
    def update(db: Database, session: SessionUser, entry_id: str, fields: WorkSheetUpdate) -> Dict[str, Any]:
        result = db[work_sheet_model.COLLECTION].update_one(
            {"_id": parse_object_id(entry_id), "email": session.email},
            {"$set": {
                "work": fields.work,
                "hours": fields.hours,
                "date": fields.date.isoformat(),
                "monthAndYear": period_of(fields.date),
            }},
        )
        if result.matched_count == 0:
            raise NotFoundError(f"No work sheet entry '{entry_id}' for {session.email}")
        logger.info(f"{session.email} updated work sheet entry {entry_id}")
        return {"matchedCount": result.matched_count, "modifiedCount": result.modified_count}

    @staticmethod
    def delete(db: Database, session: SessionUser, entry_id: str) -> Dict[str, Any]:
        result = db[work_sheet_model.COLLECTION].delete_one(
            {"_id": parse_object_id(entry_id), "email": session.email}
        )
        if result.deleted_count == 0:
            raise NotFoundError(f"No work sheet entry '{entry_id}' for {session.email}")
        logger.info(f"{session.email} deleted work sheet entry {entry_id}")
        return {"deletedCount": result.deleted_count}
