from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class PostPagination(PageNumberPagination):
    """Fixed-size pages for the public post listing (``?page=N``)."""

    def get_page_size(self, request):
        return settings.POSTS_PAGE_SIZE
