"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the product store and product request bodies.

Dependency Hierarchy:
--------------------
    ┌──────────────────────┐      ┌─────────────────────┐
    │ get_product_store()  │      │ get_product_body()  │
    └──────────────────────┘      └──────────┬──────────┘
                                             │
                                  ┌──────────▼──────────┐
                                  │get_validated_product│
                                  └─────────────────────┘

Usage Examples:
--------------
    @router.get("/{product_id}")
    async def get_product(
        product_id: int,
        store: ProductStore = Depends(get_product_store),
    ):
        ...

    @router.post("")
    async def create_product(
        product: Product = Depends(get_validated_product),
        store: ProductStore = Depends(get_product_store),
    ):
        ...

==============================================================================
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from product_api.catalog import Product, ProductStore
from product_api.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_product_store(request: Request) -> ProductStore:
    """
    Get the store owned by the running application.

    The store is created once at application construction and kept on
    app.state, so every request of one app shares it.
    """
    return request.app.state.product_store


async def get_product_body(request: Request) -> Product:
    """
    Decode the request body into a Product.

    Raises:
        ProductDecodeError: On an empty or malformed body
    """
    body = await request.body()
    if not body:
        raise exceptions.invalid_payload("Request body is empty")

    return Product.from_json(body)


async def get_validated_product(
    product: Product = Depends(get_product_body)
) -> Product:
    """
    Decode and validate the request body.

    Raises:
        ProductDecodeError: On an empty or malformed body
        ProductValidationError: If any field rule fails
    """
    try:
        product.validate_fields()
    except exceptions.ProductValidationError as e:
        logger.warning(f"Rejected product payload: {e.fields}")
        raise

    return product
