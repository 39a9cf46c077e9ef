from sqlalchemy import Column, Integer, ForeignKey, TIMESTAMP, UniqueConstraint, CheckConstraint, text
from sqlalchemy.orm import relationship
from ..core.database import Base

# Import models từ các module cần thiết
from ..user.models import User
from ..catalog.models import Product


class ShoppingCart(Base):
    __tablename__ = "shopping_carts"
    cart_id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), unique=True, nullable=False)
    created_at = Column(TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"))

    customer = relationship("User")
    cart_items = relationship(
        "CartItem",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItem.item_id",
    )


class CartItem(Base):
    __tablename__ = "cart_items"
    # Mỗi sản phẩm chỉ có tối đa một dòng trong một giỏ hàng
    __table_args__ = (
        UniqueConstraint("cart_id", "product_id", name="uq_cart_items_cart_product"),
        CheckConstraint("quantity > 0", name="ck_cart_items_quantity_positive"),
    )
    item_id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Integer, ForeignKey("shopping_carts.cart_id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    added_at = Column(TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"))

    cart = relationship("ShoppingCart", back_populates="cart_items")
    product = relationship("Product")
