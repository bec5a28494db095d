from uuid import UUID

from ninja_extra import api_controller, route
from ninja_extra.permissions import IsAdminUser
from ninja_jwt.authentication import JWTAuth

from common.controllers import UserAwareController
from common.throttling import WriteThrottle
from events import models, schema
from events.service import category_service


@api_controller(
    "/admin/categories",
    auth=JWTAuth(),
    permissions=[IsAdminUser],
    tags=["Admin: Categories"],
    throttle=WriteThrottle(),
)
class AdminCategoriesController(UserAwareController):
    @route.post("/", url_name="admin_create_category", response={201: schema.CategorySchema})
    def create_category(self, payload: schema.CategoryEditSchema) -> tuple[int, models.Category]:
        """Create a category. Names are unique."""
        return 201, category_service.create_category(payload)

    @route.patch("/{category_id}", url_name="admin_update_category", response=schema.CategorySchema)
    def update_category(self, category_id: UUID, payload: schema.CategoryEditSchema) -> models.Category:
        """Rename a category."""
        return category_service.update_category(category_id, payload)

    @route.delete("/{category_id}", url_name="admin_delete_category", response={204: None})
    def delete_category(self, category_id: UUID) -> tuple[int, None]:
        """Delete a category. Categories still used by events cannot be deleted."""
        category_service.delete_category(category_id)
        return 204, None
