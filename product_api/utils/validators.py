"""
==============================================================================
Validation Utilities Module
==============================================================================

Field-level validators for product records.

This module implements:
- RequiredValidator: Rejects zero values (empty string, 0, None)
- GreaterThanValidator: Numeric lower bound (exclusive)
- SKUValidator: Stock keeping unit format check
- FIELD_RULES: Fixed table binding product fields to their validators

Validation Rules for SKUs:
-------------------------
- Three groups of lowercase letters joined by hyphens
- Example: abc-def-ghi
- The whole value must be a single match (no surrounding characters)

==============================================================================
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple


class RequiredValidator:
    """
    Validator for mandatory fields.

    A value is missing when it is None, an empty string, or zero.
    """

    tag = "required"

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate that a value is present.

        Args:
            value: Field value to check

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            return False, "Field is required"

        if isinstance(value, str) and value == "":
            return False, "Field is required"

        if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
            return False, "Field is required"

        return True, None

    def is_valid(self, value: Any) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(value)
        return is_valid


class GreaterThanValidator:
    """
    Validator for numeric lower bounds.

    Example:
        >>> GreaterThanValidator(0).validate(-1.5)
        (False, 'Must be greater than 0')
    """

    def __init__(self, bound: float = 0) -> None:
        self.bound = bound
        self.tag = "gt"

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate a number is strictly greater than the bound.

        Args:
            value: Number to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
            return False, "Must be a number"

        # NaN compares false against everything
        if not value > self.bound:
            return False, f"Must be greater than {self.bound:g}"

        return True, None

    def is_valid(self, value: Any) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(value)
        return is_valid


class SKUValidator:
    """
    Validator for product SKU codes.

    Example:
        >>> validator = SKUValidator()
        >>> validator.is_valid("abc-def-ghi")
        True
        >>> validator.is_valid("abc123")
        False
    """

    tag = "sku"

    PATTERN = re.compile(r"[a-z]+-[a-z]+-[a-z]+")

    def validate(self, sku: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate a SKU code.

        Args:
            sku: SKU string to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not isinstance(sku, str):
            return False, "SKU must be a string"

        # Anchored: the single match must span the whole value
        if not self.PATTERN.fullmatch(sku):
            return False, "SKU must look like abc-def-ghi"

        return True, None

    def is_valid(self, sku: Any) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(sku)
        return is_valid


# =============================================================================
# FIELD RULES
# =============================================================================

# Evaluated in order per field; the first failing rule is reported.
FIELD_RULES: Dict[str, List[Any]] = {
    "name": [RequiredValidator()],
    "price": [GreaterThanValidator(0)],
    "sku": [RequiredValidator(), SKUValidator()],
}
