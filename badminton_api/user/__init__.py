# Import models và schemas cho user
from .models import User, Role
from .schemas import UserCreate, Login

# Export crud functions
from .crud import (
    get_user,
    get_user_by_email,
    create_user
)
