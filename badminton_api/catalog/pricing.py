from decimal import Decimal, ROUND_HALF_UP
from ..core.config import VND_PER_USD

_CENT = Decimal("0.01")


def to_display_price(price_vnd) -> float:
    """
    Quy đổi giá lưu trong DB (VND) sang giá hiển thị (USD, làm tròn 2 chữ số).

    Ví dụ: 240000 -> 10.0
    """
    usd = Decimal(int(price_vnd)) / Decimal(VND_PER_USD)
    return float(usd.quantize(_CENT, rounding=ROUND_HALF_UP))
