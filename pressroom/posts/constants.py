"""Post-level constants shared across models, rules, and the API."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class PostState(models.TextChoices):
    """
    Publication states for posts.

    The state is never stored. It is derived from ``is_draft`` and
    ``published_at`` against the current time on every read, so a scheduled
    post becomes live without anything having to flip it.
    """

    DRAFT = "draft", _("Draft")
    # Not a draft, but without a publish time it can never surface.
    UNSCHEDULED = "unscheduled", _("Unscheduled")
    SCHEDULED = "scheduled", _("Scheduled")
    LIVE = "live", _("Live")


class PostCapability(models.TextChoices):
    """Capabilities checked against a post before a write."""

    UPDATE = "update", _("Update")
    DELETE = "delete", _("Delete")


# Fields a client may send when creating or updating a post. Anything else in
# the payload (``user``, ``id``, timestamps) is ignored.
POST_WRITABLE_FIELDS = ("title", "content", "is_draft", "published_at")
