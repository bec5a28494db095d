import orjson
import pytest
from django.shortcuts import reverse  # type: ignore[attr-defined]
from django.test.client import Client
from ninja_jwt.tokens import RefreshToken

from accounts.models import EwmUser
from conftest import EwmUserFactory

pytestmark = pytest.mark.django_db


@pytest.fixture
def admin_client(superuser: EwmUser) -> Client:
    refresh = RefreshToken.for_user(superuser)
    return Client(HTTP_AUTHORIZATION=f"Bearer {str(refresh.access_token)}")  # type: ignore[attr-defined]


@pytest.fixture
def user_client(user: EwmUser) -> Client:
    refresh = RefreshToken.for_user(user)
    return Client(HTTP_AUTHORIZATION=f"Bearer {str(refresh.access_token)}")  # type: ignore[attr-defined]


def test_create_user(admin_client: Client) -> None:
    response = admin_client.post(
        reverse("api:admin_create_user"),
        data=orjson.dumps({"email": "ada@example.com", "first_name": "Ada", "last_name": "Lovelace"}),
        content_type="application/json",
    )

    assert response.status_code == 201, response.content
    data = response.json()
    assert data["username"] == "ada@example.com"
    assert data["display_name"] == "Ada Lovelace"
    assert data["rating"] is None
    assert EwmUser.objects.filter(pk=data["id"]).exists()


def test_create_user_duplicate(admin_client: Client, user_factory: EwmUserFactory) -> None:
    user_factory(username="taken@example.com")

    response = admin_client.post(
        reverse("api:admin_create_user"),
        data=orjson.dumps({"email": "taken@example.com"}),
        content_type="application/json",
    )

    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_USER"


def test_create_user_invalid_email(admin_client: Client) -> None:
    response = admin_client.post(
        reverse("api:admin_create_user"),
        data=orjson.dumps({"email": "not-an-email"}),
        content_type="application/json",
    )

    assert response.status_code == 422


def test_list_users_by_ids(admin_client: Client, user_factory: EwmUserFactory) -> None:
    wanted = user_factory(username="wanted@user.test")
    user_factory(username="other@user.test")

    response = admin_client.get(reverse("api:admin_list_users"), {"ids": [str(wanted.pk)]})

    assert response.status_code == 200
    assert response.json()["count"] == 1
    assert [u["id"] for u in response.json()["results"]] == [str(wanted.pk)]


def test_list_users_paginated(admin_client: Client, user_factory: EwmUserFactory) -> None:
    for _ in range(24):
        user_factory()

    response = admin_client.get(reverse("api:admin_list_users"), {"page": 2})

    assert response.status_code == 200
    # 24 created plus the admin
    assert response.json()["count"] == 25
    assert len(response.json()["results"]) == 5


def test_delete_user(admin_client: Client, user: EwmUser) -> None:
    url = reverse("api:admin_delete_user", kwargs={"user_id": user.pk})

    assert admin_client.delete(url).status_code == 204
    assert not EwmUser.objects.filter(pk=user.pk).exists()
    assert admin_client.delete(url).status_code == 404


def test_admin_only(user_client: Client, superuser: EwmUser) -> None:
    assert user_client.get(reverse("api:admin_list_users")).status_code == 403
    response = user_client.delete(reverse("api:admin_delete_user", kwargs={"user_id": superuser.pk}))
    assert response.status_code == 403
    assert EwmUser.objects.filter(pk=superuser.pk).exists()
