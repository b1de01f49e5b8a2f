# app/utils/auth.py
from fastapi import Depends, HTTPException, Request, status
from jose import JWTError
from pymongo.database import Database
import logging

from app.config.security import SecurityConfig
from app.database import get_db
from app.models import user as user_model
from app.models.user import Role
from app.schemas.tokens import SessionUser
from app.utils.security import decode_access_token

logger = logging.getLogger(__name__)


def get_current_session(request: Request) -> SessionUser:
    token = request.cookies.get(SecurityConfig.COOKIE['name'])
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized access",
        )
    try:
        payload = decode_access_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden access",
        )

    email = payload.get("email")
    if not email:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden access",
        )
    return SessionUser(email=email, name=payload.get("name"))


def require_role(role: Role):
    """Build a dependency that lets through only callers whose stored role is `role`"""

    def role_checker(
        session: SessionUser = Depends(get_current_session),
        db: Database = Depends(get_db),
    ) -> SessionUser:
        user = db[user_model.COLLECTION].find_one(
            {user_model.EMAIL_FIELD: session.email},
            {"role": 1},
        )
        if user is None or user.get("role") != role.value:
            logger.warning(f"Denied {session.email}: {role.value} role required")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden access",
            )
        return session

    role_checker.__name__ = f"require_{role.value}"
    return role_checker


employee_only = require_role(Role.EMPLOYEE)
hr_only = require_role(Role.HR)
admin_only = require_role(Role.ADMIN)
