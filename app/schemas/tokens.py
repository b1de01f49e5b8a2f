# app/schemas/tokens.py
from pydantic import BaseModel, EmailStr
from typing import Optional


class TokenRequest(BaseModel):
    email: EmailStr
    name: Optional[str] = None

    model_config = {
        "extra": "allow"
    }


class TokenResponse(BaseModel):
    success: bool


class SessionUser(BaseModel):
    """Identity carried by a verified session cookie"""
    email: str
    name: Optional[str] = None

    model_config = {
        "frozen": True
    }
