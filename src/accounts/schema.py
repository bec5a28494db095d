import typing as t
from uuid import UUID

from ninja import ModelSchema, Schema
from pydantic import EmailStr, Field, StringConstraints

from accounts.models import EwmUser

Name = t.Annotated[str, StringConstraints(max_length=150, strip_whitespace=True)]


class EwmUserSchema(ModelSchema):
    display_name: str

    class Meta:
        model = EwmUser
        fields = ["id", "username", "email", "first_name", "last_name", "rating"]


class UserShortSchema(Schema):
    id: UUID
    display_name: str
    rating: float | None = None


class AdminUserCreateSchema(Schema):
    """Account created by an admin. The email doubles as the username."""

    email: EmailStr
    first_name: Name = ""
    last_name: Name = ""
    password: str | None = Field(None, min_length=8, max_length=150)
