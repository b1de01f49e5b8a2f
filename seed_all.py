"""
Master Database Seeding Script
Creates indexes and populates the database with demo data
"""

from datetime import datetime
import logging
import secrets

from pymongo.database import Database

from app.database import get_db, ensure_indexes
from app.models import payment as payment_model
from app.models import user as user_model
from app.models import work_sheet as work_sheet_model
from app.models.user import EMAIL_FIELD

# Import demo data
from demo_users import DEMO_USERS, DEMO_WORK_SHEETS, DEMO_PAYMENTS

logger = logging.getLogger(__name__)


def seed_users(db: Database) -> int:
    """Insert demo users that are not there yet; returns how many were added"""
    created = 0
    for user in DEMO_USERS:
        email = user["userInfo"]["email"]
        if db[user_model.COLLECTION].find_one({EMAIL_FIELD: email}, {"_id": 1}):
            logger.info(f"User {email} already exists, skipping")
            continue
        db[user_model.COLLECTION].insert_one({**user, "isFired": False})
        created += 1
    return created


def seed_work_sheets(db: Database) -> int:
    """Upsert demo entries keyed on owner, day and work; returns how many were added"""
    names = {u["userInfo"]["email"]: u["userInfo"]["name"] for u in DEMO_USERS}
    created = 0
    for email, sheet in DEMO_WORK_SHEETS.items():
        for work, hours, day in sheet:
            result = db[work_sheet_model.COLLECTION].update_one(
                {"email": email, "date": day, "work": work},
                {"$setOnInsert": {
                    "name": names.get(email),
                    "hours": hours,
                    "monthAndYear": day[:7],
                }},
                upsert=True,
            )
            if result.upserted_id is not None:
                created += 1
    return created


def seed_payments(db: Database) -> int:
    users = {u["userInfo"]["email"]: u for u in DEMO_USERS}
    created = 0
    for email, periods in DEMO_PAYMENTS.items():
        user = users[email]
        for period in periods:
            year, month = (int(part) for part in period.split("-"))
            result = db[payment_model.COLLECTION].update_one(
                {"employeeEmail": email, "monthAndYear": period},
                {"$setOnInsert": {
                    "employeeName": user["userInfo"]["name"],
                    "salary": user["salary"],
                    "designation": user["designation"],
                    "isPaymentSuccess": True,
                    "paymentDate": datetime(year, month, 28),
                    "transactionId": secrets.token_hex(8),
                }},
                upsert=True,
            )
            if result.upserted_id is not None:
                created += 1
    return created


def seed_all(db: Database) -> dict:
    ensure_indexes(db)
    summary = {
        "users": seed_users(db),
        "work_sheets": seed_work_sheets(db),
        "payments": seed_payments(db),
    }
    logger.info(f"Seeding finished: {summary}")
    return summary


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_all(get_db())
