from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Optional
from .models import User, Role
from .schemas import UserCreate
from ..core.security import hash_password


def get_user(db: Session, user_id: int) -> Optional[User]:
    """
    Tên Function: get_user

    1. Mô tả ngắn gọn:
    Lấy thông tin người dùng theo ID.

    2. Các tham số đầu vào:
    - db (Session): Phiên làm việc với database
    - user_id (int): ID của người dùng cần tìm

    3. Giá trị trả về:
    - Optional[User]: Đối tượng User nếu tìm thấy, None nếu không tìm thấy
    """
    return db.query(User).filter(User.user_id == user_id).first()


def get_user_by_email(db: Session, mail: str) -> Optional[User]:
    """
    Tên Function: get_user_by_email

    1. Mô tả ngắn gọn:
    Tìm kiếm người dùng theo địa chỉ email.

    2. Mô tả công dụng:
    Dùng khi đăng nhập và khi đăng ký để kiểm tra email đã tồn tại hay chưa.
    So sánh không phân biệt hoa thường: EmailStr chuẩn hóa phần domain lúc đăng ký.
    """
    return db.query(User).filter(func.lower(User.mail) == mail.strip().lower()).first()


def create_user(db: Session, user: UserCreate) -> User:
    """
    Tên Function: create_user

    1. Mô tả ngắn gọn:
    Tạo người dùng mới với vai trò mặc định CUSTOMER.

    2. Mô tả công dụng:
    Mã hóa mật khẩu trước khi lưu. Không bắt IntegrityError ở đây,
    route đăng ký sẽ xử lý trường hợp trùng email.
    """
    db_user = User(
        username=user.username,
        mail=user.email,
        phone_number=user.phone,
        password=hash_password(user.password),
        role=Role.CUSTOMER,
        address=user.address,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
