"""Category schemas."""

import typing as t
from uuid import UUID

from ninja import ModelSchema, Schema
from pydantic import StringConstraints

from events.models import Category

CategoryName = t.Annotated[str, StringConstraints(min_length=1, max_length=50, strip_whitespace=True)]


class CategorySchema(ModelSchema):
    id: UUID

    class Meta:
        model = Category
        fields = ["id", "name"]


class CategoryEditSchema(Schema):
    name: CategoryName
