"""
==============================================================================
Product Catalog Endpoints
==============================================================================

CRUD endpoints for the in-memory product catalog.

Error Mapping:
-------------
- ProductDecodeError     → 400
- ProductNotFoundError   → 404
- ProductValidationError → 422
- Non-numeric id         → 404 (route does not match)

==============================================================================
"""

import io
import logging
from typing import Sequence, Union

from fastapi import APIRouter, Depends, Response, status

from product_api.catalog import Product, ProductStore, to_json
from product_api.core.dependencies import get_product_store, get_validated_product


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, store: ProductStore):
        self._store = store

    @staticmethod
    def _json_response(
        value: Union[Product, Sequence[Product]],
        status_code: int = status.HTTP_200_OK
    ) -> Response:
        """Serialize products into a JSON response."""
        buffer = io.StringIO()
        to_json(value, buffer)
        return Response(
            content=buffer.getvalue(),
            status_code=status_code,
            media_type="application/json"
        )

    def list_products(self) -> Response:
        """List all products in store order."""
        logger.debug("Handle GET products")
        return self._json_response(self._store.get_products())

    def get_product(self, product_id: int) -> Response:
        """Get a single product."""
        logger.debug(f"Handle GET product {product_id}")
        return self._json_response(self._store.get_product_by_id(product_id))

    def create_product(self, product: Product) -> Response:
        """Add a validated product."""
        logger.debug(f"Handle POST product {product.name}")
        created = self._store.add_product(product)
        return self._json_response(created, status.HTTP_201_CREATED)

    def update_product(self, product_id: int, product: Product) -> Response:
        """Replace a product with validated data."""
        logger.debug(f"Handle PUT product {product_id}")
        self._store.update_product(product_id, product)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def delete_product(self, product_id: int) -> Response:
        """Remove a product."""
        logger.debug(f"Handle DELETE product {product_id}")
        self._store.delete_product(product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("")
async def list_products(store: ProductStore = Depends(get_product_store)):
    """List all products."""
    controller = ProductController(store)
    return controller.list_products()


@router.get("/{product_id:int}")
async def get_product(product_id: int, store: ProductStore = Depends(get_product_store)):
    """Get product by id."""
    controller = ProductController(store)
    return controller.get_product(product_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    product: Product = Depends(get_validated_product),
    store: ProductStore = Depends(get_product_store)
):
    """Create a product; the id is assigned by the store."""
    controller = ProductController(store)
    return controller.create_product(product)


@router.put("/{product_id:int}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: int,
    product: Product = Depends(get_validated_product),
    store: ProductStore = Depends(get_product_store)
):
    """Replace the product with the given id."""
    controller = ProductController(store)
    return controller.update_product(product_id, product)


@router.delete("/{product_id:int}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, store: ProductStore = Depends(get_product_store)):
    """Delete the product with the given id."""
    controller = ProductController(store)
    return controller.delete_product(product_id)
