import locale
from typing import Iterable, Sequence

from colorama import just_fix_windows_console

from core.errors import ProductLookupError
from core.logger import SearchLogger, Severity
from finder.product_finder import ProductFinder
from models.product import Product

INVENTORY: list[Product] = [
    Product(id=1, name="Laptop",   price=999.99, quantity=10),
    Product(id=2, name="Mouse",    price=19.99,  quantity=0),
    Product(id=3, name="Keyboard", price=49.99,  quantity=5),
]

DEMO_IDS = (1, 2, 3, 4)


def run(
    finder: ProductFinder,
    inventory: Sequence[Product] = INVENTORY,
    ids: Iterable[int] = DEMO_IDS,
) -> list[Product]:
    """Look up each id in turn, printing hits and ignoring lookup failures."""

    found: list[Product] = []
    for product_id in ids:
        try:
            product = finder.find(inventory, product_id)
        except ProductLookupError:
            # Already logged by the finder.
            continue
        print(product.as_tuple())
        found.append(product)
    return found


def _use_host_time_locale(search_logger: SearchLogger) -> None:
    """Render log timestamps with the user's date and time conventions."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        search_logger.log_search(Severity.WARNING, f"Host locale unavailable, using C: {exc}")


def main() -> None:
    just_fix_windows_console()
    search_logger = SearchLogger()
    try:
        _use_host_time_locale(search_logger)
        run(ProductFinder(search_logger))
    finally:
        search_logger.close()


if __name__ == "__main__":
    main()
