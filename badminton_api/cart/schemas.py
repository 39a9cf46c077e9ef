# Đây là file schemas.py cho module cart

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from ..catalog.pricing import to_display_price


class AddCartItem(BaseModel):
    quantity: Optional[int] = Field(None, ge=1)


class CartProduct(BaseModel):
    id: int
    product_name: str
    price: float
    image_url: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def display_price(cls, value):
        return to_display_price(value)

    class Config:
        from_attributes = True


class CartItemResponse(BaseModel):
    item_id: int
    cart_id: int
    product_id: int
    quantity: int
    added_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CartItemDetail(CartItemResponse):
    product: CartProduct

    class Config:
        from_attributes = True


class CartResponse(BaseModel):
    cart_id: int
    customer_id: int
    created_at: Optional[datetime] = None
    cart_items: List[CartItemDetail] = []

    class Config:
        from_attributes = True
