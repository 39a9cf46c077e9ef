from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional
from ..core.database import get_db
from ..core.exceptions import AuthenticationError
from ..core.security import decode_access_token, JWTError
from ..user.models import User
import logging

# Bearer scheme, tự xử lý trường hợp thiếu header để trả về 401 thay vì 403
bearer_scheme = HTTPBearer(auto_error=False)

logger = logging.getLogger(__name__)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """
    Lấy và giải mã JWT từ header Authorization: Bearer <token>

    Returns:
        dict: Payload đã giải mã

    Raises:
        AuthenticationError: Nếu thiếu token, token sai chữ ký hoặc đã hết hạn
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token provided")

    try:
        return decode_access_token(credentials.credentials)
    except JWTError as e:
        logger.info(f"Rejected bearer token: {str(e)}")
        raise AuthenticationError("Invalid or expired token")


def get_current_user(
    payload: dict = Depends(get_token_payload),
    db: Session = Depends(get_db),
) -> User:
    """
    Lấy thông tin người dùng hiện tại từ token JWT

    Raises:
        AuthenticationError: Nếu payload không có user_id hoặc người dùng không còn tồn tại
    """
    user_id = payload.get("user_id")
    if user_id is None:
        raise AuthenticationError()

    user = db.query(User).filter(User.user_id == user_id).first()
    if user is None:
        raise AuthenticationError()
    return user
