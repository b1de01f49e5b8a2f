from fastapi import APIRouter, Depends, Response
from pymongo.database import Database
import logging

from app.config.security import SecurityConfig
from app.database import get_db
from app.schemas.tokens import TokenRequest, TokenResponse
from app.services.user_service import UserService
from app.schemas.tokens import SessionUser
from app.utils.auth import get_current_session
from app.utils.security import create_access_token

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/jwt-sign", response_model=TokenResponse)
def sign_token(user_info: TokenRequest, response: Response):
    """Issue the session cookie for a signed-in user"""
    token = create_access_token(data=user_info.model_dump(mode="json"))
    response.set_cookie(
        key=SecurityConfig.COOKIE['name'],
        value=token,
        max_age=SecurityConfig.TOKEN['expire_minutes'] * 60,
        **SecurityConfig.cookie_options(),
    )
    logger.info(f"Session issued for {user_info.email}")
    return {"success": True}


@router.post("/jwt-logout", response_model=TokenResponse)
def logout(response: Response):
    """Clear the session cookie"""
    response.delete_cookie(
        key=SecurityConfig.COOKIE['name'],
        **SecurityConfig.cookie_options(),
    )
    return {"success": True}


@router.get("/checkRole/{email}")
def check_role(
    email: str,
    db: Database = Depends(get_db),
    session: SessionUser = Depends(get_current_session),
):
    return {"role": UserService.get_role(db, email)}
