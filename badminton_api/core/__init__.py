# Import các module cơ bản
from .database import get_db, Base, engine, SessionLocal
from .security import hash_password, verify_password, create_access_token, decode_access_token

# Export các thành phần cần thiết từ modules core
__all__ = [
    'Base', 'engine', 'get_db', 'SessionLocal',
    'verify_password', 'hash_password',
    'create_access_token', 'decode_access_token'
]
