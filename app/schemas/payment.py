from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.models.payment import PERIOD_PATTERN


class PaymentRequestCreate(BaseModel):
    employeeEmail: EmailStr
    employeeName: str
    salary: float = Field(..., ge=0)
    monthAndYear: str = Field(..., pattern=PERIOD_PATTERN, description="Payroll period, YYYY-MM")
    designation: Optional[str] = None


class PaymentSettle(BaseModel):
    paymentDate: Optional[datetime] = None


class PaymentHistory(BaseModel):
    count: int
    firstPayment: Optional[Dict[str, Any]] = None
    payments: List[Dict[str, Any]]
