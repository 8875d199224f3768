from enum import Enum
from typing import Optional


class LookupFailureKind(str, Enum):
    NOT_FOUND    = "NOT_FOUND"
    OUT_OF_STOCK = "OUT_OF_STOCK"


class ProductLookupError(Exception):
    """
    Raised by ProductFinder when a lookup cannot return a product.

    One error type for every failure; callers branch on ``kind``.
    ``product_id`` is set for NOT_FOUND, ``product_name`` for OUT_OF_STOCK.
    """

    def __init__(
        self,
        kind: LookupFailureKind,
        message: str,
        product_id: Optional[int] = None,
        product_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind         = kind
        self.message      = message
        self.product_id   = product_id
        self.product_name = product_name

    @classmethod
    def not_found(cls, product_id: int) -> "ProductLookupError":
        return cls(
            LookupFailureKind.NOT_FOUND,
            f"Product with id: {product_id} not found.",
            product_id=product_id,
        )

    @classmethod
    def out_of_stock(cls, product_name: str) -> "ProductLookupError":
        return cls(
            LookupFailureKind.OUT_OF_STOCK,
            f"Product {product_name} is out of stock.",
            product_name=product_name,
        )

    def __repr__(self) -> str:
        return f"ProductLookupError(kind={self.kind.value}, message={self.message!r})"
