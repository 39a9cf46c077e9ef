from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..core.database import get_db
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError, internal_error
from ..core.security import create_access_token, verify_password
from ..user.crud import get_user_by_email, create_user
from ..user.models import User
from ..user.schemas import UserCreate, Login, LoginResponse
from ..user.schemas import User as UserSchema
from .authentication import get_token_payload, get_current_user
import logging

router = APIRouter(prefix="/auth", tags=["Authentication"])

logger = logging.getLogger(__name__)

# Cùng một thông báo cho sai email và sai mật khẩu để không lộ email nào đã đăng ký
INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/login", response_model=LoginResponse)
def login(login_data: Login, db: Session = Depends(get_db)):
    try:
        user = get_user_by_email(db, login_data.mail)
        if not user or not verify_password(login_data.password, user.password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        access_token = create_access_token({"sub": str(user.user_id), "user_id": user.user_id})

        logger.info(f"User {user.user_id} logged in")
        return {
            "user_id": user.user_id,
            "username": user.username,
            "mail": user.mail,
            "access_token": access_token,
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login error: {str(e)}")
        raise internal_error()


@router.post("/register")
def register(user: UserCreate, db: Session = Depends(get_db)):
    if len(user.password) < 6:
        raise ValidationError("Password must be at least 6 characters")

    try:
        if get_user_by_email(db, user.email):
            raise ConflictError("Email already registered")

        new_user = create_user(db, user)
        logger.info(f"Registered user {new_user.user_id}")
        return {"message": "User registered successfully"}
    except HTTPException:
        raise
    except IntegrityError:
        # Hai request đăng ký cùng email chạy song song: ràng buộc unique chặn bản ghi thứ hai
        db.rollback()
        raise ConflictError("Email already registered")
    except Exception as e:
        db.rollback()
        logger.error(f"Register error: {str(e)}")
        raise internal_error()


@router.get("/verify")
def verify_token(payload: dict = Depends(get_token_payload)):
    """
    Xác minh JWT token và trả về payload đã giải mã.
    """
    return payload


@router.get("/me", response_model=UserSchema)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    return current_user
