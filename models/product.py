from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """An inventory record: identifier, name, unit price and units in stock."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)

    @classmethod
    def from_tuple(cls, row: Sequence) -> "Product":
        # (id, name, price, quantity)
        product_id, name, price, quantity = row
        return cls(id=product_id, name=name, price=price, quantity=quantity)

    def as_tuple(self) -> tuple[int, str, float, int]:
        return (self.id, self.name, self.price, self.quantity)

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0
