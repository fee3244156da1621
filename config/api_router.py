"""
Public API router.

Posts are readable by anyone; writes require a token (or session) and are
restricted to the post's owner. The users route only exposes ``me``.
"""

from django.conf import settings
from rest_framework.routers import DefaultRouter
from rest_framework.routers import SimpleRouter

from pressroom.posts.api.views import PostViewSet
from pressroom.users.api.views import UserViewSet

router = DefaultRouter() if settings.DEBUG else SimpleRouter()

router.register("users", UserViewSet)
router.register("posts", PostViewSet, basename="post")

app_name = "api"
urlpatterns = router.urls
