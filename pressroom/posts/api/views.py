from __future__ import annotations

import logging

from django.http import Http404
from django.utils.translation import gettext_lazy as _
from rest_framework import permissions
from rest_framework import status
from rest_framework import viewsets

from pressroom.core.api.exceptions import AuthorizationError
from pressroom.core.api.exceptions import NotFoundError
from pressroom.core.api.pagination import PostPagination
from pressroom.core.api.responses import envelope
from pressroom.posts.api.serializers import PostCreateSerializer
from pressroom.posts.api.serializers import PostSerializer
from pressroom.posts.api.serializers import PostUpdateSerializer
from pressroom.posts.models import Post
from pressroom.posts.permissions import IsPostOwner

logger = logging.getLogger(__name__)


class PostViewSet(viewsets.ModelViewSet):
    """
    Public blog posts.

    **Reads** are anonymous and only ever see live posts: not drafts, and
    with a publish time that has passed. Anything else is reported as 404,
    to the owner as well.

    **Writes** require authentication. Updates and deletes are limited to the
    post's owner and can target drafts and scheduled posts.
    """

    serializer_class = PostSerializer
    pagination_class = PostPagination
    read_actions = ("list", "retrieve")

    def get_queryset(self):
        queryset = Post.objects.select_related("user")
        if self.action in self.read_actions:
            return queryset.visible()
        return queryset

    def get_permissions(self):
        if self.action in self.read_actions:
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated(), IsPostOwner()]

    def get_serializer_class(self):
        if self.action == "create":
            return PostCreateSerializer
        if self.action in ("update", "partial_update"):
            return PostUpdateSerializer
        return super().get_serializer_class()

    def get_object(self) -> Post:
        try:
            return super().get_object()
        except Http404 as exc:
            raise NotFoundError(_("Post not found.")) from exc

    def permission_denied(self, request, message=None, code=None):
        if request.authenticators and not request.successful_authenticator:
            super().permission_denied(request, message=message, code=code)
        raise AuthorizationError(detail=message, code=code)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        post = serializer.save(user=request.user)
        logger.info("Post %s created by user %s", post.pk, request.user.pk)
        return envelope(
            _("Post created successfully."),
            PostSerializer(post, context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        # Both PUT and PATCH are partial; the publication rules decide
        # which of the sent fields are applied.
        post = self.get_object()
        serializer = self.get_serializer(post, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        post.refresh_from_db()
        logger.info(
            "Post %s updated by user %s (fields: %s)",
            post.pk,
            request.user.pk,
            ", ".join(sorted(serializer.validated_data)) or "none",
        )
        return envelope(
            _("Post updated successfully."),
            PostSerializer(post, context=self.get_serializer_context()).data,
        )

    def destroy(self, request, *args, **kwargs):
        post = self.get_object()
        post_id = post.pk
        post.delete()
        logger.info("Post %s deleted by user %s", post_id, request.user.pk)
        return envelope(_("Post deleted successfully."))
