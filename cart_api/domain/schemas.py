# cart_api/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class CartItemIn(BaseModel):
    """
    Schema dla dodawania produktu do koszyka. id i cart_id z body sa ignorowane.
    Brakujace pola dostaja wartosci zerowe, zly typ to blad walidacji.
    """

    sku: str = Field("", description="SKU produktu")
    product_name: str = Field("", description="Nazwa produktu")
    quantity: int = Field(
        0,
        strict=True,
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Ilosc dodawana do koszyka (zakres kolumny INTEGER)",
    )


class CartItemOut(BaseModel):
    """Schema dla pozycji w koszyku (response)."""

    id: str
    cart_id: str
    sku: str
    product_name: str
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: str
    total: int
    items: List[CartItemOut] = []

    model_config = ConfigDict(from_attributes=True)


class CartEnvelope(BaseModel):
    cart: CartOut


class CartsEnvelope(BaseModel):
    carts: List[CartOut]


class ResultOut(BaseModel):
    result: str = "success"


class ErrorOut(BaseModel):
    error: str
