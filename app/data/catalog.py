# app/data/catalog.py
from app.domain.schemas import ProductOut

# katalog budowany raz przy starcie procesu, tylko do odczytu
PRODUCTS = (
    ProductOut(
        name="ProTech Racket",
        description="The best racket on the market today! Never miss a shot.",
        price=3750.00,
    ),
    ProductOut(
        name="Yellow Spheres",
        description="Performance tennis balls with fantastic durability.",
        price=395.00,
    ),
    ProductOut(
        name="Go-faster Shorts",
        description="Never be late to the ball again with our patented go-faster fabric technology.",
        price=1150.00,
    ),
)
