from uuid import UUID

from ninja import Field, FilterSchema


class AdminUserFilterSchema(FilterSchema):
    ids: list[UUID] | None = Field(None, q="pk__in")  # type: ignore[call-overload]
