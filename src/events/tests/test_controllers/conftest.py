import pytest
from django.test.client import Client
from ninja_jwt.tokens import RefreshToken

from accounts.models import EwmUser


def _jwt_client(user: EwmUser) -> Client:
    refresh = RefreshToken.for_user(user)
    return Client(HTTP_AUTHORIZATION=f"Bearer {str(refresh.access_token)}")  # type: ignore[attr-defined]


@pytest.fixture
def organizer_client(organizer: EwmUser) -> Client:
    """API client for the initiator of the event fixtures."""
    return _jwt_client(organizer)


@pytest.fixture
def user_client(user: EwmUser) -> Client:
    return _jwt_client(user)


@pytest.fixture
def superuser_client(superuser: EwmUser) -> Client:
    return _jwt_client(superuser)
