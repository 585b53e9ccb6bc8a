"""
Field sanitation for catalog records.

Every value coming from the Catalog API or from a submitted form goes
through these helpers before it reaches a Product. Each helper is a fixed
point: sanitizing an already sanitized value returns it unchanged.
"""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Any, Dict, Mapping, Union
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

from pyapi_catalog.integrations.contracts.products import INPUT_FIELDS, Product, ProductInput

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0e-\x1f\x7f]")
_SCRIPT_STYLE_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_SLUG_INVALID_RE = re.compile(r"[^a-z0-9_]+")
# "host:8080/..." is a port, not a scheme.
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):(?!\d)")
_URL_UNSAFE_RE = re.compile(r"[\x00-\x1f\x7f]")

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_ALLOWED_SCHEMES = frozenset({"http", "https"})

# Tags removed together with everything inside them.
_REMOVED_WITH_CONTENT = ["script", "style", "iframe", "object", "embed", "noscript", "template", "form"]

ALLOWED_TAGS: Dict[str, frozenset] = {
    "a": frozenset({"href", "title", "target"}),
    "abbr": frozenset({"title"}),
    "b": frozenset(),
    "blockquote": frozenset({"cite"}),
    "br": frozenset(),
    "code": frozenset(),
    "del": frozenset(),
    "em": frozenset(),
    "h2": frozenset(),
    "h3": frozenset(),
    "h4": frozenset(),
    "h5": frozenset(),
    "h6": frozenset(),
    "hr": frozenset(),
    "i": frozenset(),
    "img": frozenset({"src", "alt", "width", "height"}),
    "li": frozenset(),
    "ol": frozenset(),
    "p": frozenset(),
    "pre": frozenset(),
    "s": frozenset(),
    "span": frozenset(),
    "strong": frozenset(),
    "table": frozenset(),
    "tbody": frozenset(),
    "td": frozenset(),
    "th": frozenset(),
    "thead": frozenset(),
    "tr": frozenset(),
    "u": frozenset(),
    "ul": frozenset(),
}
_URL_ATTRIBUTES = frozenset({"href", "src", "cite"})


def _safe_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def sanitize_text(value: Any) -> str:
    """Plain single-line text: tags stripped, whitespace collapsed."""
    text = _CONTROL_RE.sub("", _safe_text(value))
    previous = None
    while previous != text:
        previous = text
        text = _SCRIPT_STYLE_RE.sub("", text)
        text = _TAG_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def sanitize_slug(value: Any) -> str:
    """URL-safe identifier: ascii, lowercase, dash separated."""
    text = sanitize_text(value)
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii").lower()
    return _SLUG_INVALID_RE.sub("-", text).strip("-")


def sanitize_url(value: Any) -> str:
    """Absolute http(s) URL, or "" when the value cannot be one."""
    if not isinstance(value, str):
        return ""
    url = _URL_UNSAFE_RE.sub("", value.strip()).replace(" ", "%20")
    if not url:
        return ""
    if url.startswith("//"):
        url = "http:" + url
    elif not _SCHEME_RE.match(url):
        if url.startswith(("/", "?", "#")):
            return ""
        url = "http://" + url
    try:
        parts = urlsplit(url)
    except ValueError:
        return ""
    if parts.scheme.lower() not in _ALLOWED_SCHEMES or not parts.netloc:
        return ""
    return url


def sanitize_rich_text(value: Any) -> str:
    """HTML restricted to ALLOWED_TAGS and their allowed attributes."""
    text = _CONTROL_RE.sub("", _safe_text(value))
    if not text.strip():
        return ""

    soup = BeautifulSoup(text, "html.parser")

    for node in soup.find_all(string=lambda s: isinstance(s, (Comment, CData, Declaration, Doctype, ProcessingInstruction))):
        node.extract()

    tag = soup.find(_REMOVED_WITH_CONTENT)
    while tag is not None:
        tag.decompose()
        tag = soup.find(_REMOVED_WITH_CONTENT)

    for tag in soup.find_all(True):
        allowed = ALLOWED_TAGS.get(tag.name)
        if allowed is None:
            tag.unwrap()
            continue
        attrs = {}
        for name, attr_value in tag.attrs.items():
            if name not in allowed:
                continue
            if isinstance(attr_value, list):
                attr_value = " ".join(attr_value)
            if name in _URL_ATTRIBUTES:
                attr_value = sanitize_url(attr_value)
                if not attr_value:
                    continue
            attrs[name] = attr_value
        tag.attrs = attrs

    return str(soup).strip()


def coerce_float(value: Any) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return 0.0
    except (ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False


def sanitize_product(raw: Mapping[str, Any]) -> Product:
    """Build a canonical Product from an untrusted mapping."""
    name = sanitize_text(raw.get("name"))
    return Product(
        id=sanitize_text(raw.get("id")),
        name=name,
        slug=sanitize_slug(raw.get("slug")) or sanitize_slug(name),
        price_eur=coerce_float(raw.get("price_eur")),
        description=sanitize_rich_text(raw.get("description")),
        image=sanitize_url(raw.get("image")),
        category=sanitize_text(raw.get("category")),
        in_stock=coerce_bool(raw.get("in_stock")),
        rating=coerce_float(raw.get("rating")),
    )


def sanitize_product_input(product_input: Union[ProductInput, Mapping[str, Any]]) -> Dict[str, Any]:
    """Sanitized add-product payload in wire field order."""
    raw = product_input.to_dict() if isinstance(product_input, ProductInput) else dict(product_input)
    raw.pop("id", None)
    payload = sanitize_product(raw).to_payload()
    return {key: payload[key] for key in INPUT_FIELDS}


def validate_product_payload(payload: Mapping[str, Any]) -> Dict[str, str]:
    """Field errors for a sanitized add-product payload; empty when valid."""
    errors: Dict[str, str] = {}
    if not payload.get("name"):
        errors["name"] = "Name is required."
    if payload.get("price_eur", 0) <= 0:
        errors["price_eur"] = "Price must be greater than 0."
    return errors
