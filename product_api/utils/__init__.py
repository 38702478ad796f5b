"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Product field validators and the field rule table

==============================================================================
"""

from .validators import (
    FIELD_RULES,
    GreaterThanValidator,
    RequiredValidator,
    SKUValidator,
)

__all__ = [
    "FIELD_RULES",
    "GreaterThanValidator",
    "RequiredValidator",
    "SKUValidator",
]
