"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog products plus JSON encode/decode helpers.

Decoding only checks JSON syntax and field types; field constraints are
checked separately by Product.validate_fields() so callers can report
every violated rule at once.

==============================================================================
"""

from __future__ import annotations

import io
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    TypeAdapter,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticSerializationError

from product_api.core.exceptions import (
    ProductDecodeError,
    ProductEncodeError,
    ProductValidationError,
)
from product_api.utils.validators import FIELD_RULES


# Module logger
logger = logging.getLogger(__name__)


class Product(BaseModel):
    """
    Product model for catalog items.

    Attributes:
        id: Identifier assigned by the store
        name: Product display name (required)
        description: Free-form description
        price: Unit price, must be greater than zero
        sku: Stock keeping unit, e.g. "abc-def-ghi"

    The created/updated/deleted timestamps are private attributes: they are
    never read from input JSON and never serialized.
    """

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    id: int = Field(default=0, description="Product identifier")
    name: str = Field(default="", description="Product name")
    description: str = Field(default="", description="Product description")
    price: float = Field(default=0.0, description="Unit price")
    sku: str = Field(default="", description="Stock keeping unit")

    # Runtime bookkeeping (not serialized)
    _created_on: str = PrivateAttr(default="")
    _updated_on: str = PrivateAttr(default="")
    _deleted_on: str = PrivateAttr(default="")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null leaves the field at its zero value
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    # =========================================================================
    # TIMESTAMPS
    # =========================================================================

    @property
    def created_on(self) -> str:
        return self._created_on

    @property
    def updated_on(self) -> str:
        return self._updated_on

    @property
    def deleted_on(self) -> str:
        return self._deleted_on

    def stamp(self, *events: str) -> "Product":
        """
        Set one or more timestamps to the current UTC time.

        Args:
            events: Any of "created", "updated", "deleted"

        Returns:
            self, for chaining
        """
        now = datetime.now(timezone.utc).isoformat()
        for event in events:
            if event not in ("created", "updated", "deleted"):
                raise ValueError(f"Unknown timestamp: {event}")
            setattr(self, f"_{event}_on", now)
        return self

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def collect_violations(self) -> List[Dict[str, str]]:
        """
        Run every field rule and collect the failures.

        Rules for a single field run in order and stop at the first failure,
        so each field appears at most once in the result.
        """
        violations = []
        for field, rules in FIELD_RULES.items():
            value = getattr(self, field)
            for rule in rules:
                is_valid, message = rule.validate(value)
                if not is_valid:
                    violations.append({
                        "field": field,
                        "rule": rule.tag,
                        "message": message,
                    })
                    break
        return violations

    def validate_fields(self) -> None:
        """
        Validate the product against its field constraints.

        Raises:
            ProductValidationError: If any field rule fails
        """
        violations = self.collect_violations()
        if violations:
            logger.debug(f"Product {self.id} failed validation: {violations}")
            raise ProductValidationError(violations)

    # =========================================================================
    # JSON
    # =========================================================================

    @classmethod
    def from_json(cls, stream: Union[bytes, str, Any]) -> "Product":
        """
        Decode a product from a JSON document.

        Args:
            stream: JSON bytes/str, or a file-like object with read()

        Returns:
            Decoded (unvalidated) Product

        Raises:
            ProductDecodeError: On malformed JSON or mismatched field types
        """
        if hasattr(stream, "read"):
            try:
                stream = stream.read()
            except OSError as e:
                raise ProductDecodeError(str(e)) from e

        try:
            return cls.model_validate_json(stream)
        except ValidationError as e:
            errors = [
                {
                    "field": ".".join(str(part) for part in err["loc"]) or "body",
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
            raise ProductDecodeError("Malformed product JSON", errors) from e

    def to_json(self, writer: Any) -> None:
        """Write this product as JSON to the given writer."""
        to_json(self, writer)


Products = List[Product]

_products_adapter = TypeAdapter(Products)


def to_json(value: Union[Product, Sequence[Product]], writer: Any) -> None:
    """
    Serialize a product or a sequence of products to a writer.

    Output is a single JSON document followed by a newline. Text writers
    receive str, binary writers receive UTF-8 bytes.

    Args:
        value: Product or sequence of products
        writer: Object with a write() method

    Raises:
        ProductEncodeError: If serialization or the write fails
    """
    try:
        if isinstance(value, Product):
            payload = value.model_dump_json().encode("utf-8")
        else:
            payload = _products_adapter.dump_json(list(value))
        payload += b"\n"

        if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
            writer.write(payload)
        else:
            writer.write(payload.decode("utf-8"))
    except (PydanticSerializationError, TypeError, ValueError, OSError) as e:
        logger.error(f"Failed to encode products: {e}")
        raise ProductEncodeError(str(e)) from e
