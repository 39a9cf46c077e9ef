from datetime import datetime, timedelta, timezone
from typing import Optional
from passlib.context import CryptContext
from jose import JWTError, jwt
from . import config

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Tạo JWT access token.

    Args:
        data: Payload cần mã hóa (ví dụ: {"sub": "1", "user_id": 1})
        expires_delta: Thời gian sống của token, mặc định lấy từ ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        str: Token đã ký bằng SECRET_KEY
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Giải mã và kiểm tra chữ ký, thời hạn của token.

    Raises:
        JWTError: Nếu token không hợp lệ hoặc đã hết hạn
    """
    return jwt.decode(token, config.SECRET_KEY, algorithms=[config.JWT_ALGORITHM])


__all__ = ["hash_password", "verify_password", "create_access_token", "decode_access_token", "JWTError"]
