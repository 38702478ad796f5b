"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- Product error types (not found, decode, validation, encode)
- FastAPI dependencies for store access and request payloads

Modules:
--------
- exceptions: AppException class, product errors and factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from product_api.core import AppException, ProductNotFoundError

    # Or use exception factory functions via module
    from product_api.core import exceptions
    raise exceptions.product_not_found(42)

==============================================================================
"""

from .exceptions import (
    AppException,
    ProductDecodeError,
    ProductEncodeError,
    ProductNotFoundError,
    ProductValidationError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "ProductDecodeError",
    "ProductEncodeError",
    "ProductNotFoundError",
    "ProductValidationError",
    "register_exception_handlers",
]
