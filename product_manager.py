# product_manager.py
import logging

logger = logging.getLogger(__name__)


class ProductNotFoundError(LookupError):
    def __init__(self, name):
        super().__init__(f"Product not found: {name!r}")
        self.name = name


class ProductManager:
    """Name -> product lookup for one session.

    Products are added when they are constructed and are never removed while
    the session runs; ``clear()`` is for tearing the session down.
    """

    def __init__(self):
        self._products = {}

    def add_product(self, product) -> bool:
        if product.name in self._products:
            logger.warning(f"Product '{product.name}' already registered, keeping the existing one")
            return False
        self._products[product.name] = product
        logger.debug(f"Product added: {product.name}")
        return True

    def get_product_by_name(self, name):
        try:
            return self._products[name]
        except KeyError:
            raise ProductNotFoundError(name) from None

    def product_names(self):
        return list(self._products)

    def clear(self):
        self._products.clear()

    def __contains__(self, name):
        return name in self._products

    def __len__(self):
        return len(self._products)
