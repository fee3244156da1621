"""
Custom authentication classes for the Pressroom API.

Usage:
    Authorization: Bearer <api_token>
"""

from rest_framework.authentication import TokenAuthentication


class BearerAuthentication(TokenAuthentication):
    """
    Token authentication using the Bearer keyword.

    A subclass of DRF's TokenAuthentication that changes the Authorization
    header keyword from "Token" to "Bearer" (RFC 6750). Tokens are issued
    by ``/api/v1/auth-token/`` and stored by ``rest_framework.authtoken``.
    """

    keyword = "Bearer"
