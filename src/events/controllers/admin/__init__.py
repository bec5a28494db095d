"""Site administration controllers (staff only)."""

from .categories import AdminCategoriesController
from .events import AdminEventsController

ADMIN_CONTROLLERS: list[type] = [
    AdminEventsController,
    AdminCategoriesController,
]

__all__ = [
    "AdminCategoriesController",
    "AdminEventsController",
    "ADMIN_CONTROLLERS",
]
