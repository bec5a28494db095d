from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.http import HttpRequest
from ninja_extra import NinjaExtraAPI
from ninja_jwt.controller import NinjaJWTDefaultController

from accounts.controllers.account import AccountController
from accounts.controllers.admin import AdminUsersController
from common.schema import ResponseOk, VersionResponse
from common.throttling import AnonDefaultThrottle, UserDefaultThrottle
from events.controllers.admin import ADMIN_CONTROLLERS
from events.controllers.categories import CategoryController
from events.controllers.events import EventController
from events.controllers.me import ME_CONTROLLERS
from events.controllers.ratings import RatingController
from events.exceptions import EventDomainError

from .exception_handlers import (
    handle_django_validation_error,
    handle_event_domain_error,
    handle_general_exception,
    handle_integrity_error,
)

api = NinjaExtraAPI(
    title="Explore With Me API",
    docs_url="/docs",
    version=settings.VERSION,
    description=f"Explore With Me API {settings.VERSION}",
    app_name=f"ewm-api-{settings.VERSION}",
    urls_namespace="api",
    servers=[
        {"url": settings.SERVICE_URL, "description": settings.SERVICE_DESCRIPTION},
    ],
    throttle=[AnonDefaultThrottle(), UserDefaultThrottle()],
)


@api.get("/version", tags=["Version"], response={200: VersionResponse})
def version(request: HttpRequest) -> tuple[int, VersionResponse]:
    """Get the API version.

    Args:
        request: The incoming HTTP request.

    Returns:
        The response status code and message.
    """
    return 200, VersionResponse(version=settings.VERSION)


@api.get("/healthcheck", tags=["Healthcheck"], response={200: ResponseOk})
def healthcheck(request: HttpRequest) -> tuple[int, ResponseOk]:
    """Check the health of the API.

    Args:
        request: The incoming HTTP request.

    Returns:
        The response status code and message.
    """
    return 200, ResponseOk()


api.register_controllers(
    # Auth/Account controllers
    NinjaJWTDefaultController,
    AccountController,
    # Public controllers
    EventController,
    CategoryController,
    RatingController,
    # Authenticated user controllers
    *ME_CONTROLLERS,
    # Admin controllers
    AdminUsersController,
    *ADMIN_CONTROLLERS,
)

EXCEPTION_HANDLERS = {
    Exception: handle_general_exception,
    ValidationError: handle_django_validation_error,
    IntegrityError: handle_integrity_error,
    EventDomainError: handle_event_domain_error,
}

for exc, handler in EXCEPTION_HANDLERS.items():
    api.add_exception_handler(exc, handler)
