"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog with field validation.

Classes:
--------
- Product: Pydantic model for products
- ProductStore: Owner of the ordered product collection

==============================================================================
"""

from .models import Product, Products, to_json
from .store import ProductStore, SAMPLE_PRODUCTS

__all__ = [
    "Product",
    "Products",
    "to_json",
    "ProductStore",
    "SAMPLE_PRODUCTS",
]
