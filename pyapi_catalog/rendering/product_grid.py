"""
Public product listing markup.

Pure functions only: products in, HTML string out. No network access and no
sanitation here; every value is escaped on output, including upstream
error messages.
"""

from __future__ import annotations

import html
import re
from typing import List, Sequence

from pyapi_catalog.integrations.contracts.errors import CatalogResult
from pyapi_catalog.integrations.contracts.products import Product

DEFAULT_LIMIT = 12
DESCRIPTION_WORDS = 20

_TAG_RE = re.compile(r"<[^>]*>")


def trim_words(text: str, num_words: int = DESCRIPTION_WORDS, more: str = "...") -> str:
    """Plain-text excerpt of at most `num_words` words."""
    words = html.unescape(_TAG_RE.sub(" ", text or "")).split()
    if len(words) <= num_words:
        return " ".join(words)
    return " ".join(words[:num_words]) + more


def _render_card(product: Product) -> str:
    esc = html.escape
    if product.image:
        image = f'<img src="{esc(product.image)}" alt="{esc(product.name)}" class="pyapi-product-image">'
    else:
        image = '<div class="pyapi-product-image-placeholder">No image available</div>'

    stock_class = "pyapi-product-in-stock" if product.in_stock else "pyapi-product-out-of-stock"
    stock_text = "In Stock" if product.in_stock else "Out of Stock"

    return (
        '<div class="pyapi-product-card">'
        f"{image}"
        '<div class="pyapi-product-content">'
        f'<div class="pyapi-product-category">{esc(product.category)}</div>'
        f'<h3 class="pyapi-product-title">{esc(product.name)}</h3>'
        f'<p class="pyapi-product-description">{esc(trim_words(product.description))}</p>'
        f'<div class="pyapi-product-stock {stock_class}">{stock_text}</div>'
        '<div class="pyapi-product-meta">'
        f'<div class="pyapi-product-price">{product.price_eur:,.2f} <span>EUR</span></div>'
        '<div class="pyapi-product-rating">'
        '<span class="pyapi-product-rating-star">&#9733;</span>'
        f'<span class="pyapi-product-rating-number">{product.rating:.1f}</span>'
        "</div>"
        "</div>"
        "</div>"
        "</div>"
    )


def render_product_grid(products: Sequence[Product], limit: int = DEFAULT_LIMIT) -> str:
    if limit <= 0:
        limit = DEFAULT_LIMIT
    cards: List[str] = [_render_card(p) for p in list(products)[:limit]]
    return '<div class="pyapi-products-grid">' + "".join(cards) + "</div>"


def render_error(message: str) -> str:
    return f'<div class="pyapi-products-error">Error fetching products: {html.escape(message)}</div>'


def render_product_listing(result: CatalogResult[List[Product]], limit: int = DEFAULT_LIMIT) -> str:
    """Error state, empty state, or the product grid for a list result."""
    if not result.ok:
        return render_error(result.error.message)
    if not result.value:
        return '<div class="pyapi-products-empty">No products available at the moment.</div>'
    return render_product_grid(result.value, limit=limit)
