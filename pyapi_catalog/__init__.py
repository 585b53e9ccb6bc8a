"""
Python API Catalog: client, cache and presentation helpers for a remote
product Catalog API.
"""

__version__ = "0.1.0"
