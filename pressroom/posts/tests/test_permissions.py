import pytest
from django.contrib.auth.models import AnonymousUser

from pressroom.posts.constants import PostCapability
from pressroom.posts.permissions import can
from pressroom.posts.tests.factories import PostFactory


@pytest.mark.django_db
class TestCan:
    @pytest.mark.parametrize("capability", list(PostCapability))
    def test_owner_is_granted(self, user, capability):
        post = PostFactory(user=user)

        assert can(user, post, capability) is True

    @pytest.mark.parametrize("capability", list(PostCapability))
    def test_other_user_is_denied(self, user, other_user, capability):
        post = PostFactory(user=user)

        assert can(other_user, post, capability) is False

    def test_capability_may_be_given_as_string(self, user):
        post = PostFactory(user=user)

        assert can(user, post, "delete") is True

    def test_unknown_capability_is_denied(self, user):
        post = PostFactory(user=user)

        assert can(user, post, "publish") is False

    def test_anonymous_is_denied(self, user):
        post = PostFactory(user=user)

        assert can(AnonymousUser(), post, PostCapability.UPDATE) is False
        assert can(None, post, PostCapability.UPDATE) is False
