from pymongo.database import Database
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging
import secrets

from app.database import parse_object_id, serialize
from app.models import payment as payment_model
from app.models import user as user_model
from app.schemas.payment import PaymentRequestCreate
from app.utils.exceptions import ConflictError

logger = logging.getLogger(__name__)

TRANSACTION_ID_BYTES = 8


def generate_transaction_id() -> str:
    return secrets.token_hex(TRANSACTION_ID_BYTES)


class PayrollService:
    @staticmethod
    def submit_request(db: Database, request: PaymentRequestCreate) -> Dict[str, Any]:
        """Queue a salary payment; one request per employee and period"""
        payments = db[payment_model.COLLECTION]
        existing = payments.find_one(
            {"employeeEmail": request.employeeEmail, "monthAndYear": request.monthAndYear},
            {"_id": 1},
        )
        if existing:
            raise ConflictError(
                f"A payment request for {request.employeeEmail} in {request.monthAndYear} already exists"
            )

        document = request.model_dump(mode="json")
        document.update({"isPaymentSuccess": False, "paymentDate": None, "transactionId": None})
        result = payments.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Payment request for {request.employeeEmail} ({request.monthAndYear}) submitted")
        return serialize(document)

    @staticmethod
    def settle(db: Database, request_id: str, payment_date: Optional[datetime] = None) -> Dict[str, Any]:
        # Upserts: settling an unknown id creates a record holding only the settlement fields
        transaction_id = generate_transaction_id()
        result = db[payment_model.COLLECTION].update_one(
            {"_id": parse_object_id(request_id)},
            {"$set": {
                "isPaymentSuccess": True,
                "paymentDate": payment_date or datetime.now(timezone.utc),
                "transactionId": transaction_id,
            }},
            upsert=True,
        )
        logger.info(f"Payment request {request_id} settled with transaction {transaction_id}")
        return {
            "matchedCount": result.matched_count,
            "modifiedCount": result.modified_count,
            "upsertedId": str(result.upserted_id) if result.upserted_id else None,
            "transactionId": transaction_id,
        }

    @staticmethod
    def list_for_admin(db: Database) -> List[Dict[str, Any]]:
        """Payment requests of verified employees, with the bank details needed to pay them"""
        pipeline = [
            {"$lookup": {
                "from": user_model.COLLECTION,
                "localField": "employeeEmail",
                "foreignField": user_model.EMAIL_FIELD,
                "as": "employee",
            }},
            {"$unwind": "$employee"},
            {"$match": {"employee.isVerified": True}},
            {"$project": payment_model.ADMIN_LIST_PROJECTION},
        ]
        return [serialize(doc) for doc in db[payment_model.COLLECTION].aggregate(pipeline)]

    @staticmethod
    def history(db: Database, email: str, page: int, limit: int) -> Dict[str, Any]:
        """Settled payments of one employee.

        `firstPayment` is the latest payment overall; `payments` is page `page`
        of the same payments in chronological order.
        """
        payments = db[payment_model.COLLECTION]
        query = {"employeeEmail": email, "isPaymentSuccess": True}

        count = payments.count_documents(query)
        first_payment = payments.find_one(query, sort=[("paymentDate", -1)])

        skip = (page - 1) * limit
        cursor = payments.find(query).sort("paymentDate", 1).skip(skip).limit(limit)
        return {
            "count": count,
            "firstPayment": serialize(first_payment),
            "payments": [serialize(doc) for doc in cursor],
        }
