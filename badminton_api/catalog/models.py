import enum
from sqlalchemy import (
    Column, Integer, BigInteger, String, Text, TIMESTAMP, JSON, Enum, ForeignKey,
    UniqueConstraint, text
)
from sqlalchemy.orm import relationship
from ..core.database import Base


class Brand(str, enum.Enum):
    YONEX = "YONEX"
    VICTOR = "VICTOR"
    LINING = "LINING"
    MIZUNO = "MIZUNO"
    KUMPOO = "KUMPOO"
    APACS = "APACS"
    KAWASAKI = "KAWASAKI"
    FELET = "FELET"
    VS = "VS"
    OTHER = "OTHER"


class Balance(str, enum.Enum):
    HEAD_HEAVY = "HEAD_HEAVY"
    EVEN = "EVEN"
    HEAD_LIGHT = "HEAD_LIGHT"


class Stiffness(str, enum.Enum):
    FLEXIBLE = "FLEXIBLE"
    MEDIUM = "MEDIUM"
    STIFF = "STIFF"
    EXTRA_STIFF = "EXTRA_STIFF"


class ProductType(str, enum.Enum):
    """Loại sản phẩm, ghi cùng lúc với bản ghi chi tiết khi tạo sản phẩm."""
    RACKET = "racket"
    SHOES = "shoes"
    SHUTTLECOCK = "shuttlecock"
    UNKNOWN = "unknown"


class SizeKind(str, enum.Enum):
    SIZE = "size"
    AVAILABLE = "available"


class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True)
    product_name = Column(String(255), nullable=False, index=True)
    image_url = Column(String(500))
    # Giá lưu bằng VND (số nguyên), chỉ quy đổi sang USD khi trả về client
    price = Column(BigInteger, nullable=False)
    brand = Column(Enum(Brand, name="brand"), nullable=False, index=True)
    status = Column(String(50), default="AVAILABLE")
    sales = Column(Integer, default=0)
    stock = Column(Integer, default=0)
    available_location = Column(JSON, default=list)
    description = Column(Text)
    product_type = Column(Enum(ProductType, name="product_type"), nullable=False, default=ProductType.UNKNOWN)
    created_at = Column(TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"))

    racket = relationship("Racket", back_populates="product", uselist=False, cascade="all, delete-orphan")
    shoes = relationship("Shoes", back_populates="product", uselist=False, cascade="all, delete-orphan")
    shuttlecock = relationship("Shuttlecock", back_populates="product", uselist=False, cascade="all, delete-orphan")


class Racket(Base):
    __tablename__ = "rackets"
    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), unique=True, nullable=False)
    balance = Column(Enum(Balance, name="racket_balance"), nullable=False)
    stiffness = Column(Enum(Stiffness, name="racket_stiffness"), nullable=False)
    weight = Column(String(20))
    length = Column(String(50))
    player_level = Column(String(100))
    playing_style = Column(String(100))
    line = Column(String(100))
    technology = Column(Text)
    max_tension = Column(String(50))

    product = relationship("Product", back_populates="racket")


class Shoes(Base):
    __tablename__ = "shoes"
    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), unique=True, nullable=False)
    color = Column(String(100))
    technology = Column(Text)

    product = relationship("Product", back_populates="shoes")
    sizes = relationship(
        "ShoeSize",
        back_populates="shoes",
        cascade="all, delete-orphan",
        order_by="ShoeSize.id",
    )

    @property
    def size(self):
        return [s.value for s in self.sizes if s.kind == SizeKind.SIZE]

    @property
    def available_size(self):
        return [s.value for s in self.sizes if s.kind == SizeKind.AVAILABLE]


SIZE_VALUE_LENGTH = 10


class ShoeSize(Base):
    """Một giá trị trong danh sách size của giày, tách bảng để lọc được bằng SQL."""
    __tablename__ = "shoe_sizes"
    __table_args__ = (
        UniqueConstraint("shoes_id", "kind", "value", name="uq_shoe_sizes_shoes_kind_value"),
    )
    id = Column(Integer, primary_key=True, index=True)
    shoes_id = Column(Integer, ForeignKey("shoes.id", ondelete="CASCADE"), nullable=False, index=True)
    kind = Column(Enum(SizeKind, name="shoe_size_kind"), nullable=False)
    value = Column(String(SIZE_VALUE_LENGTH), nullable=False)

    shoes = relationship("Shoes", back_populates="sizes")


class Shuttlecock(Base):
    __tablename__ = "shuttlecocks"
    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), unique=True, nullable=False)
    shuttle_type = Column(String(100))
    speed = Column(Integer)
    no_per_tube = Column(Integer)

    product = relationship("Product", back_populates="shuttlecock")
