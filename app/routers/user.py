# app/routers/user.py
from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
from typing import Any, Dict, List, Optional

from app.database import get_db
from app.schemas.user import UserCreate, SalaryUpdate
from app.services.user_service import UserService
from app.schemas.tokens import SessionUser
from app.utils.auth import get_current_session, hr_only, admin_only

router = APIRouter()


@router.post("/setUser", status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, db: Database = Depends(get_db)):
    """Register a new user - 409 if the email is already taken"""
    return UserService.register(db, user)


@router.get("/allUser", response_model=List[Dict[str, Any]])
def get_all_users(
    is_verify: bool = Query(False, alias="isVerify"),
    is_fired_email: Optional[str] = Query(None, alias="isFiredEmail"),
    db: Database = Depends(get_db),
):
    """All users, only verified ones, or a fired-check on one email"""
    return UserService.list_users(db, is_verified=is_verify, fired_email=is_fired_email)


@router.get("/details/{user_id}")
def get_user_details(
    user_id: str,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(get_current_session),
):
    """User profile with the salary paid per period"""
    return UserService.get_details(db, user_id)


@router.get("/onlyEmployee", response_model=List[Dict[str, Any]])
def get_employees(db: Database = Depends(get_db), session: SessionUser = Depends(hr_only)):
    return UserService.list_employees(db)


@router.patch("/verifyChange/{user_id}")
def toggle_verification(
    user_id: str,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(hr_only),
):
    return UserService.toggle_verification(db, user_id)


@router.patch("/fire/{email}")
def fire_user(email: str, db: Database = Depends(get_db), session: SessionUser = Depends(admin_only)):
    return UserService.fire(db, email)


@router.patch("/change/role/{email}")
def change_role(email: str, db: Database = Depends(get_db), session: SessionUser = Depends(admin_only)):
    """Promote an employee to HR or demote HR to employee"""
    return UserService.change_role(db, email)


@router.patch("/user/update/{user_id}")
def update_salary(
    user_id: str,
    update: SalaryUpdate,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(admin_only),
):
    return UserService.update_salary(db, user_id, update.salary)
