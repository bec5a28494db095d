from uuid import UUID

import structlog
from django.db import transaction

from events.exceptions import CategoryInUseError, DuplicateCategoryError, NotFoundError
from events.models import Category
from events.schema import CategoryEditSchema

logger = structlog.get_logger(__name__)


def get_category(category_id: UUID) -> Category:
    """Resolve a category id.

    Raises:
        NotFoundError: if the category does not exist.
    """
    try:
        return Category.objects.get(pk=category_id)
    except Category.DoesNotExist:
        raise NotFoundError(f"Category with id={category_id} was not found")


def _ensure_name_available(name: str, exclude_id: UUID | None = None) -> None:
    qs = Category.objects.filter(name=name)
    if exclude_id is not None:
        qs = qs.exclude(pk=exclude_id)
    if qs.exists():
        raise DuplicateCategoryError(f"Category '{name}' already exists")


@transaction.atomic
def create_category(payload: CategoryEditSchema) -> Category:
    _ensure_name_available(payload.name)
    category = Category.objects.create(name=payload.name)
    logger.info("category_created", category_id=str(category.pk), name=category.name)
    return category


@transaction.atomic
def update_category(category_id: UUID, payload: CategoryEditSchema) -> Category:
    category = get_category(category_id)
    _ensure_name_available(payload.name, exclude_id=category.pk)
    category.name = payload.name
    category.save(update_fields=["name", "updated_at"])
    logger.info("category_updated", category_id=str(category.pk), name=category.name)
    return category


@transaction.atomic
def delete_category(category_id: UUID) -> None:
    """Delete a category that no event refers to."""
    category = get_category(category_id)
    if category.events.exists():
        raise CategoryInUseError(f"Category with id={category_id} still has events")
    category.delete()
    logger.info("category_deleted", category_id=str(category_id))
