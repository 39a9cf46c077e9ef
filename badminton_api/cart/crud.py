from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload
from typing import Optional, Tuple
from .models import ShoppingCart, CartItem
import logging

logger = logging.getLogger(__name__)


def get_cart_by_customer(db: Session, customer_id: int, with_items: bool = False) -> Optional[ShoppingCart]:
    """
    Lấy giỏ hàng của khách hàng, None nếu khách hàng chưa có giỏ hàng.
    """
    query = db.query(ShoppingCart).filter(ShoppingCart.customer_id == customer_id)
    if with_items:
        query = query.options(selectinload(ShoppingCart.cart_items).selectinload(CartItem.product))
    return query.first()


def get_cart_item(db: Session, cart_id: int, product_id: int) -> Optional[CartItem]:
    return (
        db.query(CartItem)
        .filter(CartItem.cart_id == cart_id, CartItem.product_id == product_id)
        .first()
    )


def get_or_create_cart(db: Session, customer_id: int) -> ShoppingCart:
    """
    Tên Function: get_or_create_cart

    1. Mô tả ngắn gọn:
    Lấy giỏ hàng của khách hàng, tạo mới nếu chưa có.

    2. Mô tả công dụng:
    Giỏ hàng không bao giờ được client tạo trực tiếp mà được tạo khi thêm
    sản phẩm đầu tiên. customer_id là unique nên nếu hai request cùng tạo
    giỏ hàng, request thứ hai nhận IntegrityError và đọc lại giỏ hàng đã có.
    """
    cart = get_cart_by_customer(db, customer_id)
    if cart:
        return cart

    cart = ShoppingCart(customer_id=customer_id)
    db.add(cart)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        cart = get_cart_by_customer(db, customer_id)
        if cart is None:
            raise
        return cart

    db.refresh(cart)
    logger.info(f"Created shopping cart {cart.cart_id} for customer {customer_id}")
    return cart


def _lock_cart(db: Session, cart_id: int) -> None:
    # SELECT ... FOR UPDATE: các thao tác thêm sản phẩm trên cùng giỏ hàng chạy tuần tự
    db.query(ShoppingCart).filter(ShoppingCart.cart_id == cart_id).with_for_update().one()


def _increment_quantity(db: Session, cart_id: int, product_id: int, quantity: int) -> int:
    # Cộng dồn ngay trong câu UPDATE, không đọc-rồi-ghi
    return (
        db.query(CartItem)
        .filter(CartItem.cart_id == cart_id, CartItem.product_id == product_id)
        .update({CartItem.quantity: CartItem.quantity + quantity}, synchronize_session=False)
    )


def add_item(db: Session, customer_id: int, product_id: int, quantity: int = 1) -> Tuple[CartItem, bool]:
    """
    Tên Function: add_item

    1. Mô tả ngắn gọn:
    Thêm sản phẩm vào giỏ hàng hoặc cộng dồn số lượng nếu sản phẩm đã có.

    2. Mô tả công dụng:
    Khóa dòng giỏ hàng, thử cộng dồn số lượng bằng một câu UPDATE; nếu chưa
    có dòng nào thì thêm mới. Ràng buộc unique (cart_id, product_id) chặn
    trường hợp hai request cùng thêm mới; khi đó request thua sẽ chuyển sang
    cộng dồn, nên mỗi sản phẩm chỉ có một dòng trong giỏ hàng.

    3. Các tham số đầu vào:
    - db (Session): Phiên làm việc với database
    - customer_id (int): ID khách hàng (đã được kiểm tra tồn tại)
    - product_id (int): ID sản phẩm (đã được kiểm tra tồn tại)
    - quantity (int): Số lượng cần thêm, mặc định 1

    4. Giá trị trả về:
    - Tuple[CartItem, bool]: (dòng sản phẩm trong giỏ, True nếu vừa được tạo mới)
    """
    cart = get_or_create_cart(db, customer_id)
    cart_id = cart.cart_id

    _lock_cart(db, cart_id)
    if _increment_quantity(db, cart_id, product_id, quantity):
        db.commit()
        return get_cart_item(db, cart_id, product_id), False

    item = CartItem(cart_id=cart_id, product_id=product_id, quantity=quantity)
    db.add(item)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Concurrent insert of product {product_id} into cart {cart_id}, incrementing instead")
        if not _increment_quantity(db, cart_id, product_id, quantity):
            raise
        db.commit()
        return get_cart_item(db, cart_id, product_id), False

    db.refresh(item)
    return item, True


def set_item_quantity(db: Session, item: CartItem, quantity: int) -> CartItem:
    item.quantity = quantity
    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, item: CartItem) -> None:
    db.delete(item)
    db.commit()


def clear_cart(db: Session, cart: ShoppingCart) -> int:
    """
    Xóa toàn bộ sản phẩm trong giỏ hàng, giữ lại bản ghi giỏ hàng.

    Returns:
        int: Số dòng đã xóa
    """
    deleted = (
        db.query(CartItem)
        .filter(CartItem.cart_id == cart.cart_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
