from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
from typing import Any, Dict, List, Optional

from app.database import get_db
from app.schemas.payment import PaymentRequestCreate, PaymentSettle, PaymentHistory
from app.services.payroll_service import PayrollService
from app.schemas.tokens import SessionUser
from app.utils.auth import get_current_session, hr_only, admin_only

router = APIRouter()


@router.post("/payRequest", status_code=status.HTTP_201_CREATED)
def submit_payment_request(
    request: PaymentRequestCreate,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(hr_only),
):
    """HR asks for an employee to be paid for one period - 409 on a repeated period"""
    return PayrollService.submit_request(db, request)


@router.get("/payRequest", response_model=List[Dict[str, Any]])
def get_payment_requests(db: Database = Depends(get_db), session: SessionUser = Depends(admin_only)):
    return PayrollService.list_for_admin(db)


@router.patch("/payment-update/{request_id}")
def settle_payment(
    request_id: str,
    settlement: Optional[PaymentSettle] = None,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(admin_only),
):
    payment_date = settlement.paymentDate if settlement else None
    return PayrollService.settle(db, request_id, payment_date)


@router.get("/payment/history/{email}", response_model=PaymentHistory)
def get_payment_history(
    email: str,
    page: int = Query(1, ge=1),
    limit: int = Query(5, ge=1, le=100),
    db: Database = Depends(get_db),
    session: SessionUser = Depends(get_current_session),
):
    return PayrollService.history(db, email, page, limit)
