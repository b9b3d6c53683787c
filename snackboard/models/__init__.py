"""Snackboard Database Models."""

from snackboard.models.catalog import Category, Snack
from snackboard.models.family import Family, ROLE_ADMIN, ROLE_FAMILY
from snackboard.models.selection import Selection

__all__ = [
    "Category",
    "Snack",
    "Family",
    "ROLE_ADMIN",
    "ROLE_FAMILY",
    "Selection",
]
