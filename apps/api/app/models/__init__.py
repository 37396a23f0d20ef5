"""Expose ORM models."""
from .base import Base
from .listing import Listing

__all__ = [
    "Base",
    "Listing",
]
