# Đây là file schemas.py cho module catalog
# Schema *Create nhận giá VND (số nguyên), schema *Response trả giá USD đã quy đổi

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from .models import Brand, Balance, Stiffness, ProductType
from .filters import normalize_enum_token, normalize_size_value
from .pricing import to_display_price


class ProductCreateBase(BaseModel):
    product_name: str = Field(..., min_length=1, max_length=255)
    image_url: Optional[str] = None
    price: int = Field(..., ge=0)
    brand: Brand
    description: Optional[str] = None
    status: Optional[str] = "AVAILABLE"
    sales: int = Field(0, ge=0)
    stock: int = Field(0, ge=0)
    available_location: List[str] = []

    @field_validator("brand", mode="before")
    @classmethod
    def normalize_brand(cls, value):
        if isinstance(value, str):
            return normalize_enum_token(value)
        return value


class RacketDetailCreate(BaseModel):
    balance: Balance
    stiffness: Stiffness
    weight: Optional[str] = None
    length: Optional[str] = None
    player_level: Optional[str] = None
    playing_style: Optional[str] = None
    line: Optional[str] = None
    technology: Optional[str] = None
    max_tension: Optional[str] = None

    @field_validator("balance", "stiffness", mode="before")
    @classmethod
    def normalize_enums(cls, value):
        if isinstance(value, str):
            return normalize_enum_token(value)
        return value


class ShoesDetailCreate(BaseModel):
    color: Optional[str] = None
    size: List[str] = []
    available_size: List[str] = []
    technology: Optional[str] = None

    @field_validator("size", "available_size", mode="before")
    @classmethod
    def normalize_sizes(cls, value):
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError("must be a list of sizes")
        return [normalize_size_value(v) for v in value]


class ShuttlecockDetailCreate(BaseModel):
    shuttle_type: Optional[str] = None
    speed: Optional[int] = None
    no_per_tube: Optional[int] = Field(None, ge=1)


class RacketCreate(ProductCreateBase):
    racket: RacketDetailCreate


class ShoesCreate(ProductCreateBase):
    shoes: ShoesDetailCreate


class ShuttlecockCreate(ProductCreateBase):
    shuttlecock: ShuttlecockDetailCreate


class ProductResponse(BaseModel):
    id: int
    product_name: str
    image_url: Optional[str] = None
    price: float
    brand: Brand
    status: Optional[str] = None
    sales: Optional[int] = None
    stock: Optional[int] = None
    available_location: Optional[List[str]] = None
    description: Optional[str] = None
    product_type: ProductType
    created_at: Optional[datetime] = None

    @field_validator("price", mode="before")
    @classmethod
    def display_price(cls, value):
        return to_display_price(value)

    class Config:
        from_attributes = True


class ProductSummary(BaseModel):
    id: int
    product_name: str
    image_url: Optional[str] = None
    price: float
    product_type: ProductType

    @field_validator("price", mode="before")
    @classmethod
    def display_price(cls, value):
        return to_display_price(value)

    class Config:
        from_attributes = True


class RacketResponse(BaseModel):
    id: int
    product_id: int
    balance: Balance
    stiffness: Stiffness
    weight: Optional[str] = None
    length: Optional[str] = None
    player_level: Optional[str] = None
    playing_style: Optional[str] = None
    line: Optional[str] = None
    technology: Optional[str] = None
    max_tension: Optional[str] = None
    product: ProductResponse

    class Config:
        from_attributes = True


class ShoesResponse(BaseModel):
    id: int
    product_id: int
    color: Optional[str] = None
    size: List[str] = []
    available_size: List[str] = []
    technology: Optional[str] = None
    product: ProductResponse

    class Config:
        from_attributes = True


class ShuttlecockResponse(BaseModel):
    id: int
    product_id: int
    shuttle_type: Optional[str] = None
    speed: Optional[int] = None
    no_per_tube: Optional[int] = None
    product: ProductResponse

    class Config:
        from_attributes = True


class RacketListResponse(BaseModel):
    total: int
    data: List[RacketResponse]


class ShoesListResponse(BaseModel):
    total: int
    data: List[ShoesResponse]


class ShuttlecockListResponse(BaseModel):
    total: int
    data: List[ShuttlecockResponse]
