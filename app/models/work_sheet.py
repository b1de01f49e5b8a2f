# app/models/work_sheet.py
from datetime import date

COLLECTION = "work_sheet"


def period_of(day: date) -> str:
    """Payroll period (YYYY-MM) a calendar day falls in"""
    return day.strftime("%Y-%m")
