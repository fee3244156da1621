"""
Publication rules applied to validated post payloads before they are saved.

Rules that protect a published post (no back-dating, no return to draft)
drop the offending field from the payload instead of rejecting the request.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING
from typing import Any

from django.utils import timezone

if TYPE_CHECKING:
    from pressroom.posts.models import Post

logger = logging.getLogger(__name__)


def prepare_create(data: dict[str, Any]) -> dict[str, Any]:
    """Drafts never carry a publish time, whatever the caller sent."""
    prepared = dict(data)
    if prepared.get("is_draft") is True:
        prepared["published_at"] = None
    return prepared


def prepare_update(
    post: Post,
    data: dict[str, Any],
    *,
    now: datetime | None = None,
) -> dict[str, Any]:
    """
    Return the subset of ``data`` that may be applied to ``post``.

    Once a post's publish time has passed, ``published_at`` can only move
    forward. Once a post is not a draft, ``is_draft`` is ignored.
    """
    now = now or timezone.now()
    prepared = dict(data)

    if "published_at" in prepared and post.has_reached_publish_time(now):
        requested = prepared["published_at"]
        # Clearing counts as moving earlier; a live post keeps its publish time.
        if requested is None or requested < post.published_at:
            logger.info(
                "Ignoring published_at %s for post %s: already published at %s",
                requested,
                post.pk,
                post.published_at,
            )
            del prepared["published_at"]

    if "is_draft" in prepared and not post.is_draft:
        if prepared["is_draft"]:
            logger.info("Ignoring request to return post %s to draft", post.pk)
        del prepared["is_draft"]

    return prepared
