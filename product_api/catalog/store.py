"""
==============================================================================
Product Store Module
==============================================================================

In-memory product store owning an ordered collection of products.

Features:
---------
- Ordered collection (insertion order, updates replace in place)
- Store-assigned identifiers (max existing id + 1)
- Linear lookup by id
- Single re-entrant lock guarding the collection

The store does not validate products; callers validate before adding or
updating.

==============================================================================
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from product_api.core import exceptions
from .models import Product


# Module logger
logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = [
    {
        "id": 1,
        "name": "Latte",
        "description": "Frothy milky coffee",
        "price": 2.45,
        "sku": "abc323",
    },
    {
        "id": 2,
        "name": "Espresso",
        "description": "Short and strong coffee without milk",
        "price": 1.99,
        "sku": "xyz323",
    },
]


class ProductStore:
    """
    Owner of the in-memory product collection.

    Example:
        >>> store = ProductStore()
        >>> store.seed_sample_products()
        >>> store.get_product_by_id(2).name
        'Espresso'
        >>> store.add_product(Product(name="Mocha", price=2.8, sku="abc-def-ghi")).id
        3
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        """
        Initialize the store.

        Args:
            products: Initial products, kept in the given order
        """
        self._products: List[Product] = list(products or [])
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._products)

    # =========================================================================
    # LOADING
    # =========================================================================

    def seed_sample_products(self) -> None:
        """Replace the collection with the sample coffee products."""
        with self._lock:
            self._products.clear()
            for item in SAMPLE_PRODUCTS:
                product = Product.model_validate(item).stamp("created", "updated")
                self._products.append(product)

        logger.info(f"✅ Seeded {len(self._products)} sample products")

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def _find(self, product_id: int) -> Tuple[Product, int]:
        """
        Locate a product and its position.

        Raises:
            ProductNotFoundError: If no product has the id
        """
        for position, product in enumerate(self._products):
            if product.id == product_id:
                return product, position

        logger.warning(f"Product {product_id} not found")
        raise exceptions.product_not_found(product_id)

    def _next_id(self) -> int:
        if not self._products:
            return 1
        return max(p.id for p in self._products) + 1

    def get_products(self) -> List[Product]:
        """
        Get all products in collection order.

        Returns the live list, not a copy.
        """
        return self._products

    def get_product_by_id(self, product_id: int) -> Product:
        """
        Get a single product by id.

        Raises:
            ProductNotFoundError: If no product has the id
        """
        with self._lock:
            product, _ = self._find(product_id)
            return product

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_product(self, product: Product) -> Product:
        """
        Append a product with a newly assigned id.

        Any id already set on the product is overwritten.

        Returns:
            The stored product
        """
        with self._lock:
            product.id = self._next_id()
            product.stamp("created", "updated")
            self._products.append(product)

        logger.info(f"Added product {product.id} ({product.name})")
        return product

    def update_product(self, product_id: int, product: Product) -> None:
        """
        Replace the product with the given id.

        The supplied product takes the id and the position of the existing
        record; no fields are merged.

        Raises:
            ProductNotFoundError: If no product has the id
        """
        with self._lock:
            existing, position = self._find(product_id)
            product.id = product_id
            product.stamp("updated")
            self._products[position] = product

        logger.info(f"Updated product {product_id} ({existing.name} → {product.name})")

    def delete_product(self, product_id: int) -> None:
        """
        Remove the product with the given id.

        Remaining products keep their relative order.

        Raises:
            ProductNotFoundError: If no product has the id
        """
        with self._lock:
            product, position = self._find(product_id)
            del self._products[position]
            product.stamp("deleted")
            remaining = [p.id for p in self._products]

        logger.info(f"Deleted product {product_id}")
        logger.debug(f"Remaining products: {remaining}")
