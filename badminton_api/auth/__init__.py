"""
Auth module cho hệ thống
"""

# Import router từ routes.py
from .routes import router

# Xuất authentication
from . import authentication

__all__ = ["router", "authentication"]
