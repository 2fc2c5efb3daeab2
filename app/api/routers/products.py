# app/api/routers/products.py
from fastapi import APIRouter, Depends

from app.data.catalog import PRODUCTS
from app.domain.schemas import ProductsOut
from app.repos.product_repo import ProductRepo
from app.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])

_repo = ProductRepo(PRODUCTS)


def get_service() -> ProductService:
    return ProductService(repo=_repo)


@router.get("", response_model=ProductsOut)
def list_products(svc: ProductService = Depends(get_service)):
    return svc.list_products()
