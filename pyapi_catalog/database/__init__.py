"""
Catalog caches.
"""
