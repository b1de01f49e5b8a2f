from fastapi import APIRouter, Depends, Query
from pymongo.database import Database
from typing import Any, Dict, List

from app.database import get_db
from app.services.progress_service import ProgressService
from app.schemas.tokens import SessionUser
from app.utils.auth import hr_only

router = APIRouter()


@router.get("/progress", response_model=List[Dict[str, Any]])
def get_progress(
    filter_name: str = Query("all", alias="filterName"),
    filter_date: str = Query("all", alias="filterDate", description="Period as YYYY-MM, or 'all'"),
    db: Database = Depends(get_db),
    session: SessionUser = Depends(hr_only),
):
    return ProgressService.progress(db, filter_name, filter_date)
