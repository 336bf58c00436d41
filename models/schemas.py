"""
Pydantic schemas for raw form input.

The add/edit form hands over whatever the user typed. ItemDraft turns that
into a clean (name, price) pair or fails with a pydantic ValidationError,
which the store converts to its own error type.

Pass `context={"allow_negative": True}` to model_validate to accept
prices below zero.
"""

import math

from pydantic import BaseModel, ValidationInfo, field_validator


class ItemDraft(BaseModel):
    """Candidate item data from the add/edit form."""
    name: str
    price: float

    @field_validator("name", mode="before")
    @classmethod
    def _clean_name(cls, value):
        if value is None:
            raise ValueError("Name is required")
        if not isinstance(value, str):
            raise ValueError("Name must be text")
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value):
        if isinstance(value, bool) or value is None:
            raise ValueError("Price must be a number")
        if isinstance(value, str):
            value = value.strip()
            # A blank price field counts as zero
            if not value:
                return 0.0
        try:
            price = float(value)
        except (TypeError, ValueError, OverflowError):
            raise ValueError("Price must be a number")
        if not math.isfinite(price):
            raise ValueError("Price must be a finite number")
        return price

    @field_validator("price")
    @classmethod
    def _check_sign(cls, value: float, info: ValidationInfo) -> float:
        allow_negative = bool(info.context and info.context.get("allow_negative"))
        if value < 0 and not allow_negative:
            raise ValueError("Price cannot be negative")
        return value
