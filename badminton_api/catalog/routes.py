from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from ..core.database import get_db
from ..core.exceptions import NotFoundError, internal_error
from .models import Racket, Shoes, Shuttlecock
from .schemas import (
    ProductSummary,
    RacketCreate, RacketResponse, RacketListResponse,
    ShoesCreate, ShoesResponse, ShoesListResponse,
    ShuttlecockCreate, ShuttlecockResponse, ShuttlecockListResponse,
)
from .filters import (
    parse_positive_int, parse_price_order,
    product_search_conditions, racket_conditions, shoes_conditions, shuttlecock_conditions,
)
from . import crud
import logging

# Tạo logger
logger = logging.getLogger(__name__)

products_router = APIRouter(prefix="/products", tags=["Products"])
rackets_router = APIRouter(prefix="/rackets", tags=["Rackets"])
shoes_router = APIRouter(prefix="/shoes", tags=["Shoes"])
shuttlecocks_router = APIRouter(prefix="/shuttlecocks", tags=["Shuttlecocks"])


def _save(db: Session, records: list, label: str) -> list:
    try:
        return crud.create_records(db, records)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Create {label} error: {str(e)}")
        raise internal_error()


@products_router.get("", response_model=List[ProductSummary])
def get_products(
    search: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Lấy danh sách sản phẩm (tìm theo tên, không phân biệt hoa thường).
    """
    conditions = product_search_conditions(search)
    take = parse_positive_int(limit, "limit")
    try:
        return crud.list_products(db, conditions, take)
    except Exception as e:
        logger.error(f"Get products error: {str(e)}")
        raise internal_error()


# ---------------------------------------------------------------- Rackets

@rackets_router.post("", response_model=RacketResponse, status_code=status.HTTP_201_CREATED)
def create_racket(payload: RacketCreate, db: Session = Depends(get_db)):
    return _save(db, [crud.build_racket(payload)], "racket")[0]


@rackets_router.post("/bulk", response_model=List[RacketResponse], status_code=status.HTTP_201_CREATED)
def bulk_create_rackets(payload: List[RacketCreate], db: Session = Depends(get_db)):
    return _save(db, [crud.build_racket(entry) for entry in payload], "rackets")


@rackets_router.get("", response_model=RacketListResponse)
def get_rackets(
    brand: Optional[str] = None,
    weight: Optional[str] = None,
    balance: Optional[str] = None,
    stiffness: Optional[str] = None,
    price: Optional[str] = None,
    limit: Optional[str] = None,
    page: Optional[str] = None,
    db: Session = Depends(get_db),
):
    conditions = racket_conditions(brand=brand, weight=weight, balance=balance, stiffness=stiffness)
    take = parse_positive_int(limit, "limit")
    current_page = parse_positive_int(page, "page", default=1)
    try:
        total, rackets = crud.list_details(
            db, Racket, conditions, parse_price_order(price), take, current_page
        )
        return {"total": total, "data": rackets}
    except Exception as e:
        logger.error(f"Get rackets error: {str(e)}")
        raise internal_error()


@rackets_router.get("/{racket_id}", response_model=RacketResponse)
def get_racket(racket_id: int, db: Session = Depends(get_db)):
    racket = crud.get_racket(db, racket_id)
    if not racket:
        raise NotFoundError("Racket not found")
    return racket


# ---------------------------------------------------------------- Shoes

@shoes_router.post("", response_model=ShoesResponse, status_code=status.HTTP_201_CREATED)
def create_shoes(payload: ShoesCreate, db: Session = Depends(get_db)):
    return _save(db, [crud.build_shoes(payload)], "shoes")[0]


@shoes_router.post("/bulk", response_model=List[ShoesResponse], status_code=status.HTTP_201_CREATED)
def bulk_create_shoes(payload: List[ShoesCreate], db: Session = Depends(get_db)):
    return _save(db, [crud.build_shoes(entry) for entry in payload], "shoes")


@shoes_router.get("", response_model=ShoesListResponse)
def get_shoes_list(
    brand: Optional[str] = None,
    size: Optional[str] = None,
    available_size: Optional[str] = None,
    price: Optional[str] = None,
    limit: Optional[str] = None,
    page: Optional[str] = None,
    db: Session = Depends(get_db),
):
    # Lọc size bằng EXISTS trên bảng shoe_sizes, phân trang sau khi lọc như các loại khác
    conditions = shoes_conditions(brand=brand, size=size, available_size=available_size)
    take = parse_positive_int(limit, "limit")
    current_page = parse_positive_int(page, "page", default=1)
    try:
        total, shoes = crud.list_details(
            db, Shoes, conditions, parse_price_order(price), take, current_page,
            options=[selectinload(Shoes.sizes)],
        )
        return {"total": total, "data": shoes}
    except Exception as e:
        logger.error(f"Get shoes error: {str(e)}")
        raise internal_error()


@shoes_router.get("/{shoes_id}", response_model=ShoesResponse)
def get_shoes(shoes_id: int, db: Session = Depends(get_db)):
    shoes = crud.get_shoes(db, shoes_id)
    if not shoes:
        raise NotFoundError("Shoe not found")
    return shoes


# ---------------------------------------------------------------- Shuttlecocks

@shuttlecocks_router.post("", response_model=ShuttlecockResponse, status_code=status.HTTP_201_CREATED)
def create_shuttlecock(payload: ShuttlecockCreate, db: Session = Depends(get_db)):
    return _save(db, [crud.build_shuttlecock(payload)], "shuttlecock")[0]


@shuttlecocks_router.post("/bulk", response_model=List[ShuttlecockResponse], status_code=status.HTTP_201_CREATED)
def bulk_create_shuttlecocks(payload: List[ShuttlecockCreate], db: Session = Depends(get_db)):
    return _save(db, [crud.build_shuttlecock(entry) for entry in payload], "shuttlecocks")


@shuttlecocks_router.get("", response_model=ShuttlecockListResponse)
def get_shuttlecocks(
    brand: Optional[str] = None,
    shuttle_type: Optional[str] = None,
    speed: Optional[str] = None,
    price: Optional[str] = None,
    limit: Optional[str] = None,
    page: Optional[str] = None,
    db: Session = Depends(get_db),
):
    conditions = shuttlecock_conditions(brand=brand, shuttle_type=shuttle_type, speed=speed)
    take = parse_positive_int(limit, "limit")
    current_page = parse_positive_int(page, "page", default=1)
    try:
        total, shuttlecocks = crud.list_details(
            db, Shuttlecock, conditions, parse_price_order(price), take, current_page
        )
        return {"total": total, "data": shuttlecocks}
    except Exception as e:
        logger.error(f"Get shuttlecocks error: {str(e)}")
        raise internal_error()


@shuttlecocks_router.get("/{shuttlecock_id}", response_model=ShuttlecockResponse)
def get_shuttlecock(shuttlecock_id: int, db: Session = Depends(get_db)):
    shuttlecock = crud.get_shuttlecock(db, shuttlecock_id)
    if not shuttlecock:
        raise NotFoundError("Shuttlecock not found")
    return shuttlecock
