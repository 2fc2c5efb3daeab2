# app/domain/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import Tuple


class ProductOut(BaseModel):
    """Schema dla produktu w katalogu (response)."""

    name: str
    description: str
    price: float

    model_config = ConfigDict(frozen=True)


class ProductsOut(BaseModel):
    """Schema dla listy produktow (response)."""

    products: Tuple[ProductOut, ...]

    model_config = ConfigDict(frozen=True)
