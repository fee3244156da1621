from pressroom.users.models import User
from pressroom.users.tests.factories import UserFactory


def test_user_str_prefers_name(user: User):
    user.name = "Ada Lovelace"
    assert str(user) == "Ada Lovelace"


def test_user_str_falls_back_to_username(db):
    user = UserFactory(username="ada", name="")
    assert str(user) == "ada"


def test_factory_sets_usable_password(db):
    user = UserFactory(password="s3cret-pass")
    user.refresh_from_db()
    assert user.check_password("s3cret-pass")
