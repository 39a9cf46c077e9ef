from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import Optional
from ..core.database import get_db
from ..core.exceptions import NotFoundError, internal_error
from ..catalog.crud import get_product
from ..catalog.filters import parse_positive_int
from ..user.crud import get_user
from .schemas import AddCartItem, CartItemResponse, CartResponse
from . import crud
import logging

router = APIRouter(prefix="/shoppingcart", tags=["Shopping Cart"])

# Cấu hình logging
logger = logging.getLogger(__name__)


def _require_cart(db: Session, customer_id: int):
    cart = crud.get_cart_by_customer(db, customer_id)
    if not cart:
        raise NotFoundError("Shopping cart not found")
    return cart


def _require_cart_item(db: Session, customer_id: int, product_id: int):
    cart = _require_cart(db, customer_id)
    item = crud.get_cart_item(db, cart.cart_id, product_id)
    if not item:
        raise NotFoundError("Product not found in cart")
    return item


@router.get("/{customer_id}", response_model=Optional[CartResponse])
def get_cart(customer_id: int, db: Session = Depends(get_db)):
    """
    Lấy giỏ hàng của khách hàng.
    Trả về null (200) nếu khách hàng chưa có giỏ hàng, để phân biệt với lỗi.
    """
    try:
        return crud.get_cart_by_customer(db, customer_id, with_items=True)
    except Exception as e:
        logger.error(f"Get cart error: {str(e)}")
        raise internal_error()


@router.post("/{customer_id}/{product_id}", response_model=CartItemResponse)
def add_to_cart(
    customer_id: int,
    product_id: int,
    response: Response,
    item: Optional[AddCartItem] = Body(None),
    db: Session = Depends(get_db),
):
    quantity = item.quantity if item and item.quantity is not None else 1

    try:
        if not get_user(db, customer_id):
            raise NotFoundError("Customer not found")
        if not get_product(db, product_id):
            raise NotFoundError("Product not found")

        cart_item, created = crud.add_item(db, customer_id, product_id, quantity)
        response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
        return cart_item
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Add to cart error: {str(e)}")
        raise internal_error()


@router.post("/{customer_id}/{product_id}/{quantity}", response_model=CartItemResponse)
def change_quantity(customer_id: int, product_id: int, quantity: str, db: Session = Depends(get_db)):
    qty = parse_positive_int(quantity, "quantity")

    try:
        cart_item = _require_cart_item(db, customer_id, product_id)
        return crud.set_item_quantity(db, cart_item, qty)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Change quantity error: {str(e)}")
        raise internal_error()


@router.delete("/{customer_id}/{product_id}")
def remove_from_cart(customer_id: int, product_id: int, db: Session = Depends(get_db)):
    try:
        cart_item = _require_cart_item(db, customer_id, product_id)
        crud.delete_item(db, cart_item)
        return {"message": "Product removed from cart"}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Remove from cart error: {str(e)}")
        raise internal_error()


@router.delete("/{customer_id}")
def clear_cart(customer_id: int, db: Session = Depends(get_db)):
    try:
        cart = _require_cart(db, customer_id)
        deleted = crud.clear_cart(db, cart)
        logger.info(f"Cleared {deleted} item(s) from cart {cart.cart_id}")
        return {"message": "Cart cleared successfully"}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Clear cart error: {str(e)}")
        raise internal_error()
