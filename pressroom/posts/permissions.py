from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from django.utils.translation import gettext_lazy as _
from rest_framework import permissions

from pressroom.posts.constants import PostCapability

if TYPE_CHECKING:
    from pressroom.posts.models import Post


def can(actor: Any, post: Post, capability: PostCapability | str) -> bool:
    """
    Return True when ``actor`` may exercise ``capability`` on ``post``.

    Only the post's owner may update or delete it. Anonymous actors and
    unknown capabilities are always denied.
    """
    try:
        PostCapability(capability)
    except ValueError:
        return False
    if actor is None or not getattr(actor, "is_authenticated", False):
        return False
    return actor.pk == post.user_id


class IsPostOwner(permissions.BasePermission):
    """
    Object-level check for write actions on a post.

    Read actions never reach this check on hidden posts: the viewset filters
    them out of the queryset first, which reports 404 instead of 403.
    """

    message = _("You do not have permission to modify this post.")

    action_capabilities = {
        "update": PostCapability.UPDATE,
        "partial_update": PostCapability.UPDATE,
        "destroy": PostCapability.DELETE,
    }

    def has_object_permission(self, request, view, obj) -> bool:
        capability = self.action_capabilities.get(getattr(view, "action", None))
        if capability is None:
            return True
        return can(request.user, obj, capability)
