from fastapi import APIRouter, Depends, status
from pymongo.database import Database
from typing import Any, Dict, List

from app.database import get_db
from app.schemas.work_sheet import WorkSheetCreate, WorkSheetUpdate
from app.services.work_sheet_service import WorkSheetService
from app.schemas.tokens import SessionUser
from app.utils.auth import employee_only, hr_only

router = APIRouter()


@router.post("/work-sheet", status_code=status.HTTP_201_CREATED)
def create_entry(
    entry: WorkSheetCreate,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(employee_only),
):
    return WorkSheetService.create(db, session, entry)


@router.get("/work-sheet", response_model=List[Dict[str, Any]])
def get_all_entries(db: Database = Depends(get_db), session: SessionUser = Depends(hr_only)):
    return WorkSheetService.list_all(db)


@router.get("/work-sheet/{email}", response_model=List[Dict[str, Any]])
def get_entries_for_employee(
    email: str,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(employee_only),
):
    """Newest entries first"""
    return WorkSheetService.list_by_email(db, session, email)


@router.patch("/work-sheet/update/{entry_id}")
def update_entry(
    entry_id: str,
    fields: WorkSheetUpdate,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(employee_only),
):
    return WorkSheetService.update(db, session, entry_id, fields)


@router.delete("/work-sheet/{entry_id}")
def delete_entry(
    entry_id: str,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(employee_only),
):
    return WorkSheetService.delete(db, session, entry_id)
