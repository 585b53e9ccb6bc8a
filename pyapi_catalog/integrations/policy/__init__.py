"""
Normalization policy for catalog data.

Clients hand raw upstream/form values to these helpers and only ever pass
the sanitized result on.
"""

from .sanitizers import (
    coerce_bool,
    coerce_float,
    sanitize_product,
    sanitize_product_input,
    sanitize_rich_text,
    sanitize_slug,
    sanitize_text,
    sanitize_url,
    validate_product_payload,
)

__all__ = [
    "coerce_bool", "coerce_float", "sanitize_product", "sanitize_product_input",
    "sanitize_rich_text", "sanitize_slug", "sanitize_text", "sanitize_url",
    "validate_product_payload",
]
