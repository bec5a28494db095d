import typing as t
import uuid

import pytest

from accounts.models import EwmUser
from accounts.service.account import get_user
from events.exceptions import NotFoundError

pytestmark = pytest.mark.django_db


def test_get_user(user: EwmUser) -> None:
    assert get_user(user.pk) == user


def test_get_unknown_user() -> None:
    with pytest.raises(NotFoundError):
        get_user(uuid.uuid4())


def test_display_name(user_factory: t.Any) -> None:
    named = user_factory(username="ada@user.test", first_name="Ada", last_name="Lovelace")
    anonymous = user_factory(username="nameless@user.test", first_name="", last_name="")

    assert named.display_name == "Ada Lovelace"
    assert anonymous.display_name == "nameless@user.test"
