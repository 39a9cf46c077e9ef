from sqlalchemy.orm import Session, contains_eager, joinedload, selectinload
from typing import Optional, List, Tuple, Sequence
from .models import Product, Racket, Shoes, ShoeSize, Shuttlecock, ProductType, SizeKind
from .schemas import ProductCreateBase, RacketCreate, ShoesCreate, ShuttlecockCreate
import logging

logger = logging.getLogger(__name__)


def get_skip(limit: Optional[int], page: int = 1) -> Optional[int]:
    """
    Tính offset cho phân trang: chỉ phân trang khi có limit.
    """
    if limit is None:
        return None
    return (page - 1) * limit


def list_details(
    db: Session,
    model,
    conditions: Sequence,
    price_order: Optional[str] = None,
    limit: Optional[int] = None,
    page: int = 1,
    options: Sequence = (),
) -> Tuple[int, list]:
    """
    Tên Function: list_details

    1. Mô tả ngắn gọn:
    Lọc, đếm và phân trang danh sách sản phẩm chi tiết (vợt, giày, cầu).

    2. Mô tả công dụng:
    Dùng chung cho cả ba loại sản phẩm. Bảng chi tiết được join với bảng
    products để lọc theo brand và sắp xếp theo giá. Tổng số bản ghi được
    đếm trên cùng điều kiện lọc nhưng trước khi phân trang.

    3. Các tham số đầu vào:
    - db (Session): Phiên làm việc với database
    - model: Racket, Shoes hoặc Shuttlecock
    - conditions: Danh sách điều kiện SQLAlchemy (kết hợp bằng AND)
    - price_order ("asc" | "desc" | None): Sắp xếp theo giá sản phẩm
    - limit (int, optional): Số bản ghi mỗi trang, None = lấy toàn bộ
    - page (int): Trang hiện tại, bắt đầu từ 1
    - options: Loader options bổ sung (ví dụ: selectinload cho size giày)

    4. Giá trị trả về:
    - Tuple[int, list]: (tổng số bản ghi khớp điều kiện, danh sách bản ghi của trang)
    """
    query = db.query(model).join(model.product).filter(*conditions)

    total = query.count()

    if price_order == "asc":
        order_by = [Product.price.asc(), model.id.asc()]
    elif price_order == "desc":
        order_by = [Product.price.desc(), model.id.asc()]
    else:
        order_by = [model.id.asc()]

    query = query.options(contains_eager(model.product), *options).order_by(*order_by)

    skip = get_skip(limit, page)
    if skip is not None:
        query = query.offset(skip).limit(limit)

    return total, query.all()


def list_products(db: Session, conditions: Sequence, limit: Optional[int] = None) -> List[Product]:
    query = db.query(Product).filter(*conditions).order_by(Product.id.asc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_product(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


def get_racket(db: Session, racket_id: int) -> Optional[Racket]:
    return (
        db.query(Racket)
        .options(joinedload(Racket.product))
        .filter(Racket.id == racket_id)
        .first()
    )


def get_shoes(db: Session, shoes_id: int) -> Optional[Shoes]:
    return (
        db.query(Shoes)
        .options(joinedload(Shoes.product), selectinload(Shoes.sizes))
        .filter(Shoes.id == shoes_id)
        .first()
    )


def get_shuttlecock(db: Session, shuttlecock_id: int) -> Optional[Shuttlecock]:
    return (
        db.query(Shuttlecock)
        .options(joinedload(Shuttlecock.product))
        .filter(Shuttlecock.id == shuttlecock_id)
        .first()
    )


def _build_product(data: ProductCreateBase, product_type: ProductType) -> Product:
    # Loại sản phẩm được ghi ngay lúc tạo, không suy ra khi đọc
    fields = data.model_dump(exclude={"racket", "shoes", "shuttlecock"})
    return Product(**fields, product_type=product_type)


def build_racket(data: RacketCreate) -> Racket:
    return Racket(**data.racket.model_dump(), product=_build_product(data, ProductType.RACKET))


def build_shoes(data: ShoesCreate) -> Shoes:
    detail = data.shoes
    # Bỏ giá trị trùng nhưng giữ nguyên thứ tự
    sizes = [ShoeSize(kind=SizeKind.SIZE, value=v) for v in dict.fromkeys(detail.size)]
    sizes += [ShoeSize(kind=SizeKind.AVAILABLE, value=v) for v in dict.fromkeys(detail.available_size)]
    return Shoes(
        color=detail.color,
        technology=detail.technology,
        sizes=sizes,
        product=_build_product(data, ProductType.SHOES),
    )


def build_shuttlecock(data: ShuttlecockCreate) -> Shuttlecock:
    return Shuttlecock(**data.shuttlecock.model_dump(), product=_build_product(data, ProductType.SHUTTLECOCK))


def create_records(db: Session, records: list) -> list:
    """
    Tên Function: create_records

    1. Mô tả ngắn gọn:
    Lưu một hoặc nhiều sản phẩm (kèm bản ghi chi tiết) trong cùng một transaction.

    2. Mô tả công dụng:
    Dùng cho cả API tạo đơn lẻ và API tạo hàng loạt (bulk). Chỉ commit một
    lần: nếu một bản ghi lỗi thì không bản ghi nào được lưu. Việc rollback
    do route gọi hàm này đảm nhận.
    """
    db.add_all(records)
    db.commit()
    for record in records:
        db.refresh(record)
    logger.info(f"Created {len(records)} catalog record(s)")
    return records
