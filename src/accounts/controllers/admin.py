from uuid import UUID

from django.db.models import QuerySet
from ninja import Query
from ninja_extra import api_controller, route
from ninja_extra.pagination import PageNumberPaginationExtra, PaginatedResponseSchema, paginate
from ninja_extra.permissions import IsAdminUser
from ninja_jwt.authentication import JWTAuth

from accounts.filters import AdminUserFilterSchema
from accounts.models import EwmUser
from accounts.schema import AdminUserCreateSchema, EwmUserSchema
from accounts.service import user_admin
from common.controllers import UserAwareController
from common.throttling import WriteThrottle


@api_controller(
    "/admin/users",
    auth=JWTAuth(),
    permissions=[IsAdminUser],
    tags=["Admin: Users"],
    throttle=WriteThrottle(),
)
class AdminUsersController(UserAwareController):
    @route.post("/", url_name="admin_create_user", response={201: EwmUserSchema})
    def create_user(self, payload: AdminUserCreateSchema) -> tuple[int, EwmUser]:
        """Create a user account. The email is also the login name and must be unique."""
        return 201, user_admin.create_user(payload)

    @route.get("/", url_name="admin_list_users", response=PaginatedResponseSchema[EwmUserSchema])
    @paginate(PageNumberPaginationExtra, page_size=20)
    def list_users(
        self,
        params: AdminUserFilterSchema = Query(...),  # type: ignore[type-arg]
    ) -> QuerySet[EwmUser]:
        """List users by username, optionally restricted to the given `ids`."""
        return user_admin.list_users(params)

    @route.delete("/{user_id}", url_name="admin_delete_user", response={204: None})
    def delete_user(self, user_id: UUID) -> tuple[int, None]:
        """Delete a user with their events, requests and ratings.

        Seats they held on other events are freed and the averages their ratings fed into are
        recomputed.
        """
        user_admin.delete_user(user_id)
        return 204, None
