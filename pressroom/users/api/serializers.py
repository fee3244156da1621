from rest_framework import serializers

from pressroom.users.models import User


class UserSerializer(serializers.ModelSerializer[User]):
    """
    Public view of a user.

    Embedded as the ``user`` of every serialized post, so it only carries
    what is safe to show next to published content.
    """

    class Meta:
        model = User
        fields = ["id", "username", "name"]
        read_only_fields = fields
