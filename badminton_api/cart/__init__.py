# Import models và schemas trước
from .models import ShoppingCart, CartItem
from .schemas import AddCartItem, CartResponse, CartItemResponse

# Import router sau các import khác để tránh circular import
from .routes import router
