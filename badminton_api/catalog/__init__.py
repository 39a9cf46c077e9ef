# Import models và schemas trước
from .models import Product, Racket, Shoes, ShoeSize, Shuttlecock, Brand, Balance, Stiffness, ProductType

# Import router sau các import khác để tránh circular import
from .routes import products_router, rackets_router, shoes_router, shuttlecocks_router
