import uuid

import pytest

from events.exceptions import CategoryInUseError, DuplicateCategoryError, NotFoundError
from events.models import Category, Event
from events.schema import CategoryEditSchema
from events.service import category_service

pytestmark = pytest.mark.django_db


def test_create_category() -> None:
    category = category_service.create_category(CategoryEditSchema(name="Sports"))
    assert Category.objects.get(pk=category.pk).name == "Sports"


def test_create_duplicate_category(category: Category) -> None:
    with pytest.raises(DuplicateCategoryError):
        category_service.create_category(CategoryEditSchema(name=category.name))


def test_update_category(category: Category) -> None:
    updated = category_service.update_category(category.pk, CategoryEditSchema(name="Live music"))
    assert updated.name == "Live music"


def test_update_category_keeps_own_name(category: Category) -> None:
    updated = category_service.update_category(category.pk, CategoryEditSchema(name=category.name))
    assert updated.name == category.name


def test_update_category_to_taken_name(category: Category) -> None:
    other = Category.objects.create(name="Theatre")
    with pytest.raises(DuplicateCategoryError):
        category_service.update_category(other.pk, CategoryEditSchema(name=category.name))


def test_delete_unused_category(category: Category) -> None:
    category_service.delete_category(category.pk)
    assert not Category.objects.filter(pk=category.pk).exists()


def test_delete_category_in_use(event: Event) -> None:
    with pytest.raises(CategoryInUseError):
        category_service.delete_category(event.category_id)
    assert Category.objects.filter(pk=event.category_id).exists()


def test_unknown_category() -> None:
    with pytest.raises(NotFoundError):
        category_service.get_category(uuid.uuid4())
    with pytest.raises(NotFoundError):
        category_service.delete_category(uuid.uuid4())
