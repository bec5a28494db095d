import pytest
from django.shortcuts import reverse  # type: ignore[attr-defined]
from django.test.client import Client
from ninja_jwt.tokens import RefreshToken

from accounts.models import EwmUser

pytestmark = pytest.mark.django_db


def test_me(user: EwmUser) -> None:
    refresh = RefreshToken.for_user(user)
    client = Client(HTTP_AUTHORIZATION=f"Bearer {str(refresh.access_token)}")  # type: ignore[attr-defined]

    response = client.get(reverse("api:me"))

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(user.pk)
    assert data["username"] == "participant@user.test"
    assert data["rating"] is None


def test_me_anonymous(client: Client) -> None:
    assert client.get(reverse("api:me")).status_code == 401


def test_obtain_token(client: Client, user: EwmUser) -> None:
    response = client.post(
        reverse("api:token_obtain_pair"),
        data={"username": user.username, "password": "password"},
        content_type="application/json",
    )

    assert response.status_code == 200
    assert "access" in response.json()
