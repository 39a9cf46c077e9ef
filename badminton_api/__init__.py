"""
Badminton shop backend: xác thực người dùng, danh mục sản phẩm và giỏ hàng.
"""

__version__ = "1.0.0"
