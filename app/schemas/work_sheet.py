from pydantic import BaseModel, Field, model_validator
from datetime import date
from typing import Optional

from app.models.payment import PERIOD_PATTERN
from app.models.work_sheet import period_of


class WorkSheetCreate(BaseModel):
    work: str = Field(..., min_length=1)
    hours: float = Field(..., gt=0, le=24)
    date: date
    name: Optional[str] = None
    monthAndYear: Optional[str] = Field(default=None, pattern=PERIOD_PATTERN)

    @model_validator(mode="after")
    def period_must_match_date(self):
        if self.monthAndYear is not None and self.monthAndYear != period_of(self.date):
            raise ValueError(f"monthAndYear must be {period_of(self.date)} for date {self.date}")
        return self


class WorkSheetUpdate(BaseModel):
    work: str = Field(..., min_length=1)
    hours: float = Field(..., gt=0, le=24)
    date: date
