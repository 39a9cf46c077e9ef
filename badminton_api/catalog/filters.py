"""
Chuyển query parameters của các API danh mục thành điều kiện lọc SQLAlchemy.

Quy ước chung:
- Giá trị nhiều lựa chọn truyền dạng "a,b,c"; mỗi phần tử được strip, phần tử rỗng bị bỏ qua
- Các giá trị trong cùng một trường kết hợp bằng OR, các trường khác nhau kết hợp bằng AND
- Giá trị không hợp lệ (enum lạ, số sai định dạng) bị từ chối bằng ValidationError (400)

Tất cả điều kiện đều được đẩy xuống database, kể cả lọc theo size giày
(EXISTS trên bảng shoe_sizes), nên total luôn khớp với tập đã lọc.
"""
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Optional, Type
from sqlalchemy import and_, or_
from ..core.exceptions import ValidationError
from .models import (
    Product, Racket, Shoes, ShoeSize, Shuttlecock, Brand, Balance, Stiffness, SizeKind, SIZE_VALUE_LENGTH,
)

_WHITESPACE = re.compile(r"\s+")


def split_csv(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def normalize_enum_token(value: str) -> str:
    # "head heavy " -> "HEADHEAVY", "head_heavy" -> "HEAD_HEAVY"
    return _WHITESPACE.sub("", value).upper()


def _format_number(number: Decimal) -> str:
    if number == number.to_integral_value():
        return str(int(number))
    return format(number.normalize(), "f")


def normalize_size_value(value) -> str:
    """
    Chuẩn hóa một giá trị size về dạng chuỗi để so sánh nhất quán.

    40 -> "40", 40.5 -> "40.5", "41.0" -> "41", "US 9" -> "US 9"
    Kết quả dài quá SIZE_VALUE_LENGTH ký tự bị từ chối bằng ValueError.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError("size must be a number or a string")
    if isinstance(value, (int, float)):
        text = _format_number(Decimal(str(value)))
    else:
        text = str(value).strip()
        if not text:
            raise ValueError("size must not be empty")
        try:
            number = Decimal(text)
        except InvalidOperation:
            number = None
        if number is not None and number.is_finite():
            text = _format_number(number)
    if len(text) > SIZE_VALUE_LENGTH:
        raise ValueError(f"size must be at most {SIZE_VALUE_LENGTH} characters")
    return text


def parse_enum_values(raw: Optional[str], enum_cls: Type[Enum], field: str) -> list:
    values = []
    for token in split_csv(raw):
        normalized = normalize_enum_token(token)
        try:
            values.append(enum_cls(normalized))
        except ValueError:
            raise ValidationError(f"Invalid {field}: {token}")
    return values


def parse_int_values(raw: Optional[str], field: str) -> List[int]:
    values = []
    for token in split_csv(raw):
        try:
            values.append(int(token))
        except ValueError:
            raise ValidationError(f"Invalid {field}: {token}")
    return values


def parse_positive_int(raw: Optional[str], field: str, default: Optional[int] = None) -> Optional[int]:
    if raw is None or not str(raw).strip():
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise ValidationError(f"Invalid {field}: {raw}")
    if value < 1:
        raise ValidationError(f"{field} must be a positive integer")
    return value


def parse_price_order(raw: Optional[str]) -> Optional[str]:
    """'asc' -> tăng dần, mọi giá trị khác -> giảm dần, không truyền -> không sắp xếp theo giá."""
    if not raw:
        return None
    return "asc" if raw.strip().lower() == "asc" else "desc"


def brand_conditions(brand: Optional[str]) -> list:
    brands = parse_enum_values(brand, Brand, "brand")
    if not brands:
        return []
    return [Product.brand.in_(brands)]


def product_search_conditions(search: Optional[str]) -> list:
    if not search or not search.strip():
        return []
    return [Product.product_name.icontains(search.strip(), autoescape=True)]


def racket_conditions(
    brand: Optional[str] = None,
    weight: Optional[str] = None,
    balance: Optional[str] = None,
    stiffness: Optional[str] = None,
) -> list:
    conditions = brand_conditions(brand)

    weights = split_csv(weight)
    if weights:
        conditions.append(or_(*[Racket.weight.icontains(w, autoescape=True) for w in weights]))

    balances = parse_enum_values(balance, Balance, "balance")
    if balances:
        conditions.append(Racket.balance.in_(balances))

    stiffness_values = parse_enum_values(stiffness, Stiffness, "stiffness")
    if stiffness_values:
        conditions.append(Racket.stiffness.in_(stiffness_values))

    return conditions


def _size_membership(kind: SizeKind, raw: Optional[str]):
    values = []
    for token in split_csv(raw):
        try:
            values.append(normalize_size_value(token))
        except ValueError:
            raise ValidationError(f"Invalid size: {token}")
    if not values:
        return None
    return Shoes.sizes.any(and_(ShoeSize.kind == kind, ShoeSize.value.in_(values)))


def shoes_conditions(
    brand: Optional[str] = None,
    size: Optional[str] = None,
    available_size: Optional[str] = None,
) -> list:
    conditions = brand_conditions(brand)

    for kind, raw in ((SizeKind.SIZE, size), (SizeKind.AVAILABLE, available_size)):
        membership = _size_membership(kind, raw)
        if membership is not None:
            conditions.append(membership)

    return conditions


def shuttlecock_conditions(
    brand: Optional[str] = None,
    shuttle_type: Optional[str] = None,
    speed: Optional[str] = None,
) -> list:
    conditions = brand_conditions(brand)

    types = split_csv(shuttle_type)
    if types:
        conditions.append(or_(*[Shuttlecock.shuttle_type.icontains(t, autoescape=True) for t in types]))

    speeds = parse_int_values(speed, "speed")
    if speeds:
        conditions.append(Shuttlecock.speed.in_(speeds))

    return conditions
