"""
Catalog Backends - where destination data lives
"""
from .base import CatalogBackend, BackendError
from .mock import MockBackend
from .supabase import SupabaseBackend

__all__ = [
    "CatalogBackend",
    "BackendError",
    "MockBackend",
    "SupabaseBackend",
]
