from app.domain.schemas import ProductsOut
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Query only: katalog jest statyczny, nie ma komend modyfikujacych stan
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    def list_products(self) -> ProductsOut:
        products = self.repo.list_products()
        logger.debug(f"Listing {len(products)} products")
        return ProductsOut(products=products)
