from rest_framework import ISO_8601
from rest_framework import serializers
from rest_framework.fields import empty

from pressroom.posts import lifecycle
from pressroom.posts.constants import POST_WRITABLE_FIELDS
from pressroom.posts.constants import PostState
from pressroom.posts.models import Post
from pressroom.users.api.serializers import UserSerializer

# Accept full ISO 8601 timestamps as well as bare dates ("2024-01-01").
PUBLISHED_AT_INPUT_FORMATS = [ISO_8601, "%Y-%m-%d"]


class RequiredBooleanField(serializers.BooleanField):
    """A boolean that must be sent explicitly, for form bodies as well as JSON."""

    # DRF reads an absent checkbox as False for form input
    default_empty_html = empty


class PostSerializer(serializers.ModelSerializer[Post]):
    """Read representation of a post, with its owner expanded."""

    user = UserSerializer(read_only=True)
    state = serializers.ChoiceField(choices=PostState.choices, read_only=True)

    class Meta:
        model = Post
        fields = [
            "id",
            "title",
            "content",
            "is_draft",
            "published_at",
            "state",
            "user",
            "created",
            "modified",
        ]
        read_only_fields = fields


class PostCreateSerializer(serializers.ModelSerializer[Post]):
    is_draft = RequiredBooleanField()
    published_at = serializers.DateTimeField(
        required=False,
        allow_null=True,
        input_formats=PUBLISHED_AT_INPUT_FORMATS,
    )

    class Meta:
        model = Post
        fields = list(POST_WRITABLE_FIELDS)

    def validate(self, attrs):
        return lifecycle.prepare_create(attrs)


class PostUpdateSerializer(serializers.ModelSerializer[Post]):
    """
    Partial update of an existing post.

    Fields that the publication rules refuse are dropped silently, so the
    response may not echo every value the client sent.
    """

    published_at = serializers.DateTimeField(
        required=False,
        allow_null=True,
        input_formats=PUBLISHED_AT_INPUT_FORMATS,
    )

    class Meta:
        model = Post
        fields = list(POST_WRITABLE_FIELDS)

    def validate(self, attrs):
        return lifecycle.prepare_update(self.instance, attrs)
