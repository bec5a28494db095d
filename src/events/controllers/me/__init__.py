"""Controllers acting on behalf of the authenticated user."""

from .events import MyEventsController
from .ratings import MyRatingsController
from .requests import MyRequestsController

ME_CONTROLLERS: list[type] = [
    MyEventsController,
    MyRequestsController,
    MyRatingsController,
]

__all__ = [
    "MyEventsController",
    "MyRatingsController",
    "MyRequestsController",
    "ME_CONTROLLERS",
]
