# app/utils/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt

from app.config.security import SecurityConfig


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign the given claims; tokens expire after an hour unless told otherwise"""
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=SecurityConfig.TOKEN['expire_minutes'])
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(
        to_encode,
        SecurityConfig.TOKEN['secret_key'],
        algorithm=SecurityConfig.TOKEN['algorithm'],
    )


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry; raises jose.JWTError on failure"""
    return jwt.decode(
        token,
        SecurityConfig.TOKEN['secret_key'],
        algorithms=[SecurityConfig.TOKEN['algorithm']],
    )
