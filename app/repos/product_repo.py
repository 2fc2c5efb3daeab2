from typing import Iterable, Tuple
from app.data.catalog import PRODUCTS
from app.domain.schemas import ProductOut


class ProductRepo:
    def __init__(self, products: Iterable[ProductOut] = PRODUCTS):
        self.products = tuple(products)

    def list_products(self) -> Tuple[ProductOut, ...]:
        return self.products
