from .product_grid import render_error, render_product_grid, render_product_listing, trim_words

__all__ = ["render_error", "render_product_grid", "render_product_listing", "trim_words"]
