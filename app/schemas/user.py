from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional

from app.models.user import Role


class UserInfo(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    photoUrl: Optional[str] = None

    # Profile data from the identity provider is stored as sent
    model_config = {
        "extra": "allow"
    }


class UserCreate(BaseModel):
    userInfo: UserInfo
    role: Role = Role.EMPLOYEE
    bankAccountNo: Optional[str] = None
    designation: Optional[str] = None
    salary: Optional[float] = Field(default=None, ge=0)

    @field_validator("role")
    @classmethod
    def role_must_be_self_assignable(cls, v):
        if v == Role.ADMIN:
            raise ValueError("Admin accounts cannot be self-registered")
        return v


class SalaryUpdate(BaseModel):
    salary: float = Field(..., ge=0)
