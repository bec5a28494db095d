from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import ControllerBase, api_controller, route
from ninja_extra.pagination import PageNumberPaginationExtra, PaginatedResponseSchema, paginate

from events import models, schema
from events.service import category_service


@api_controller("/categories", tags=["Categories"])
class CategoryController(ControllerBase):
    @route.get("/", url_name="list_categories", response=PaginatedResponseSchema[schema.CategorySchema])
    @paginate(PageNumberPaginationExtra, page_size=20)
    def list_categories(self) -> QuerySet[models.Category]:
        """List all event categories alphabetically."""
        return models.Category.objects.all()

    @route.get("/{category_id}", url_name="get_category", response=schema.CategorySchema)
    def get_category(self, category_id: UUID) -> models.Category:
        """Retrieve a single category."""
        return category_service.get_category(category_id)
