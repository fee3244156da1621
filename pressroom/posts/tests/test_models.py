from datetime import timedelta

import pytest
from django.utils import timezone

from pressroom.posts.constants import PostState
from pressroom.posts.models import Post
from pressroom.posts.tests.factories import PostFactory


@pytest.mark.django_db
class TestPostState:
    def test_draft_wins_over_publish_time(self):
        post = PostFactory(is_draft=True, published_at=timezone.now() - timedelta(days=3))

        assert post.get_state() == PostState.DRAFT
        assert post.is_visible() is False

    def test_future_publish_time_is_scheduled(self):
        post = PostFactory(scheduled=True)

        assert post.get_state() == PostState.SCHEDULED
        assert post.is_visible() is False

    def test_past_publish_time_is_live(self):
        post = PostFactory()

        assert post.state == PostState.LIVE
        assert post.is_visible() is True

    def test_non_draft_without_publish_time_is_unscheduled(self):
        post = PostFactory(unscheduled=True)

        assert post.get_state() == PostState.UNSCHEDULED
        assert post.is_visible() is False

    def test_scheduled_post_goes_live_once_time_passes(self):
        post = PostFactory(scheduled=True)
        later = post.published_at + timedelta(seconds=1)

        assert post.get_state(now=later) == PostState.LIVE
        assert post.is_visible(now=later) is True

    def test_publish_instant_itself_counts_as_live(self):
        post = PostFactory()

        assert post.is_visible(now=post.published_at) is True


@pytest.mark.django_db
class TestVisibleQuerySet:
    def test_only_live_posts_are_returned(self):
        live = PostFactory()
        PostFactory(draft=True)
        PostFactory(scheduled=True)
        PostFactory(unscheduled=True)
        PostFactory(is_draft=True, published_at=timezone.now() - timedelta(days=1))

        assert list(Post.objects.visible()) == [live]

    def test_orders_by_most_recently_published(self):
        now = timezone.now()
        oldest = PostFactory(published_at=now - timedelta(days=10))
        newest = PostFactory(published_at=now - timedelta(hours=1))
        middle = PostFactory(published_at=now - timedelta(days=2))

        assert list(Post.objects.visible()) == [newest, middle, oldest]

    def test_excludes_post_scheduled_an_hour_ahead(self):
        now = timezone.now()
        PostFactory(published_at=now + timedelta(hours=1))

        assert not Post.objects.visible(now=now).exists()
        assert Post.objects.visible(now=now + timedelta(hours=2)).count() == 1


def test_str_is_title():
    assert str(Post(title="Hello")) == "Hello"
