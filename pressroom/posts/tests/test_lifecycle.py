from datetime import UTC
from datetime import datetime
from datetime import timedelta

from django.utils import timezone

from pressroom.posts import lifecycle
from pressroom.posts.models import Post


def _post(**kwargs) -> Post:
    # Rules only look at in-memory state, no database needed.
    return Post(pk=1, title="t", content="c", **kwargs)


class TestPrepareCreate:
    def test_draft_discards_publish_time(self):
        data = {
            "title": "t",
            "content": "c",
            "is_draft": True,
            "published_at": datetime(2099, 1, 1, tzinfo=UTC),
        }

        prepared = lifecycle.prepare_create(data)

        assert prepared["published_at"] is None
        # caller's dict is left alone
        assert data["published_at"] is not None

    def test_draft_without_publish_time_gets_explicit_null(self):
        prepared = lifecycle.prepare_create({"is_draft": True})

        assert prepared == {"is_draft": True, "published_at": None}

    def test_published_post_keeps_publish_time(self):
        when = datetime(2099, 1, 1, tzinfo=UTC)

        prepared = lifecycle.prepare_create({"is_draft": False, "published_at": when})

        assert prepared["published_at"] == when


class TestPrepareUpdate:
    now = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)

    def test_live_post_ignores_earlier_publish_time(self):
        post = _post(is_draft=False, published_at=datetime(2024, 1, 1, tzinfo=UTC))

        prepared = lifecycle.prepare_update(
            post,
            {"published_at": datetime(2023, 1, 1, tzinfo=UTC), "title": "new"},
            now=self.now,
        )

        assert prepared == {"title": "new"}

    def test_live_post_accepts_later_publish_time(self):
        post = _post(is_draft=False, published_at=datetime(2024, 1, 1, tzinfo=UTC))
        later = datetime(2024, 3, 1, tzinfo=UTC)

        prepared = lifecycle.prepare_update(
            post,
            {"published_at": later},
            now=self.now,
        )

        assert prepared == {"published_at": later}

    def test_live_post_accepts_same_publish_time(self):
        current = datetime(2024, 1, 1, tzinfo=UTC)
        post = _post(is_draft=False, published_at=current)

        prepared = lifecycle.prepare_update(post, {"published_at": current}, now=self.now)

        assert prepared == {"published_at": current}

    def test_live_post_ignores_cleared_publish_time(self):
        post = _post(is_draft=False, published_at=datetime(2024, 1, 1, tzinfo=UTC))

        prepared = lifecycle.prepare_update(post, {"published_at": None}, now=self.now)

        assert prepared == {}

    def test_scheduled_post_can_be_moved_earlier(self):
        post = _post(is_draft=False, published_at=self.now + timedelta(days=7))
        earlier = self.now + timedelta(days=1)

        prepared = lifecycle.prepare_update(post, {"published_at": earlier}, now=self.now)

        assert prepared == {"published_at": earlier}

    def test_non_draft_ignores_is_draft(self):
        post = _post(is_draft=False, published_at=self.now + timedelta(days=7))

        prepared = lifecycle.prepare_update(
            post,
            {"is_draft": True, "content": "edited"},
            now=self.now,
        )

        assert prepared == {"content": "edited"}

    def test_draft_can_be_published(self):
        post = _post(is_draft=True, published_at=None)
        when = self.now - timedelta(minutes=5)

        prepared = lifecycle.prepare_update(
            post,
            {"is_draft": False, "published_at": when},
            now=self.now,
        )

        assert prepared == {"is_draft": False, "published_at": when}

    def test_defaults_to_current_time(self):
        post = _post(is_draft=False, published_at=timezone.now() - timedelta(days=1))

        prepared = lifecycle.prepare_update(
            post,
            {"published_at": timezone.now() - timedelta(days=30)},
        )

        assert "published_at" not in prepared
