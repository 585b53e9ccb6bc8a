from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Product models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Product:
    """Canonical catalog item. Built only through sanitize_product()."""
    id: str = ""
    name: str = ""
    slug: str = ""
    price_eur: float = 0.0
    description: str = ""                # allowlisted HTML subset
    image: str = ""                      # http(s) URL or empty
    category: str = ""
    in_stock: bool = False
    rating: float = 0.0

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProductInput:
    """Record submitted for creation; validated by the client before sending."""
    name: Any = ""
    price_eur: Any = 0
    slug: Any = ""
    description: Any = ""
    image: Any = ""
    category: Any = ""
    in_stock: Any = False
    rating: Any = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CreatedProduct:
    product_id: str
    record: Dict[str, Any] = field(default_factory=dict)


# Wire field order used by both list items and the add payload.
PRODUCT_FIELDS = ("id", "name", "slug", "price_eur", "description", "image", "category", "in_stock", "rating")
INPUT_FIELDS = tuple(f for f in PRODUCT_FIELDS if f != "id")


def extract_product_id(record: Any) -> Optional[str]:
    """Find the created record's identifier in an add-product response body."""
    if not isinstance(record, dict):
        return None
    candidates = [record.get("product_id"), record.get("id")]
    nested = record.get("product")
    if isinstance(nested, dict):
        candidates.append(nested.get("id"))
    for value in candidates:
        if value is None or isinstance(value, (dict, list, bool)):
            continue
        text = str(value).strip()
        if text:
            return text
    return None
