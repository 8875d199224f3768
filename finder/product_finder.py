from typing import Iterable, Union

from core.errors import ProductLookupError
from core.logger import LogOptions, SearchLogger, Severity
from models.product import Product

InventoryRow = Union[Product, tuple]

_FILE_LOGGING = LogOptions(log_to_file=True)


def _as_product(row: InventoryRow) -> Product:
    return row if isinstance(row, Product) else Product.from_tuple(row)


class ProductFinder:
    """Looks products up by id and records every outcome through a SearchLogger."""

    def __init__(self, search_logger: SearchLogger) -> None:
        self.logger = search_logger

    def find(self, inventory: Iterable[InventoryRow], product_id: int) -> Product:
        """
        Return the first product in ``inventory`` whose id is ``product_id``.

        Every call writes exactly one line, to the console and the log file:
        SUCCESS on a hit, WARNING when the product has no stock, ERROR when
        nothing matches. The two failures raise ProductLookupError after
        logging.

        Tuple rows are turned into Products first, so a row with a negative
        price or quantity raises pydantic's ValidationError before any
        search or logging happens.
        """
        product = next(
            (p for p in map(_as_product, inventory) if p.id == product_id),
            None,
        )

        if product is None:
            error = ProductLookupError.not_found(product_id)
            self.logger.log_search(Severity.ERROR, error.message, _FILE_LOGGING, product_id=product_id)
            raise error

        if not product.in_stock:
            error = ProductLookupError.out_of_stock(product.name)
            self.logger.log_search(Severity.WARNING, error.message, _FILE_LOGGING, product_id=product_id)
            raise error

        self.logger.log_search(
            Severity.SUCCESS,
            f"Product found: {product.name}",
            _FILE_LOGGING,
            product_id=product_id,
        )
        return product
