"""This module contains the controllers for the accounts app."""

from ninja_extra import api_controller, route
from ninja_jwt.authentication import JWTAuth

from accounts.models import EwmUser
from accounts.schema import EwmUserSchema
from common.controllers import UserAwareController


@api_controller("/account", tags=["Account"], auth=JWTAuth())
class AccountController(UserAwareController):
    @route.get("/me", response=EwmUserSchema, url_name="me")
    def me(self) -> EwmUser:
        """Retrieve the authenticated user's profile, including their organizer rating."""
        return self.user()
