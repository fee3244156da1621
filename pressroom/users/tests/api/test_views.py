import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from pressroom.users.models import User


class TestUserViewSet:
    def test_me_returns_current_user(self, api_client: APIClient, user: User):
        api_client.force_authenticate(user=user)

        response = api_client.get(reverse("api:user-me"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            "id": user.pk,
            "username": user.username,
            "name": user.name,
        }

    def test_me_accepts_bearer_token(self, api_client: APIClient, user: User):
        token, _ = Token.objects.get_or_create(user=user)
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")

        response = api_client.get(reverse("api:user-me"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["username"] == user.username

    @pytest.mark.django_db
    def test_me_rejects_anonymous(self, api_client: APIClient):
        response = api_client.get(reverse("api:user-me"))

        # BearerAuthentication supplies a WWW-Authenticate header, so DRF uses 401
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["code"] == status.HTTP_401_UNAUTHORIZED
