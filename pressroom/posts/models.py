from __future__ import annotations

from datetime import datetime

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from model_utils.models import TimeStampedModel

from pressroom.posts.constants import PostState


class PostQuerySet(models.QuerySet):
    def visible(self, now: datetime | None = None) -> PostQuerySet:
        """
        Posts the public may see at ``now``, most recently published first.

        A post is visible when it is not a draft and its publish time is set
        and not in the future.
        """
        now = now or timezone.now()
        return self.filter(
            is_draft=False,
            published_at__isnull=False,
            published_at__lte=now,
        ).order_by("-published_at", "-pk")


class Post(TimeStampedModel):
    """
    A blog post owned by a single user.

    ``created`` and ``modified`` come from ``TimeStampedModel``.
    """

    title = models.CharField(_("Title"), max_length=255)

    content = models.TextField(_("Content"))

    is_draft = models.BooleanField(_("Draft"), default=True)

    published_at = models.DateTimeField(
        _("Published at"),
        null=True,
        blank=True,
        help_text=_("Posts surface publicly once this time has passed."),
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
    )

    objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ["-published_at", "-pk"]
        indexes = [
            models.Index(
                fields=["is_draft", "published_at"],
                name="posts_visibility_idx",
            ),
        ]

    def __str__(self):
        return self.title

    def has_reached_publish_time(self, now: datetime | None = None) -> bool:
        now = now or timezone.now()
        return self.published_at is not None and self.published_at <= now

    def is_visible(self, now: datetime | None = None) -> bool:
        return not self.is_draft and self.has_reached_publish_time(now)

    def get_state(self, now: datetime | None = None) -> PostState:
        if self.is_draft:
            return PostState.DRAFT
        if self.published_at is None:
            return PostState.UNSCHEDULED
        if self.has_reached_publish_time(now):
            return PostState.LIVE
        return PostState.SCHEDULED

    @property
    def state(self) -> PostState:
        return self.get_state()
