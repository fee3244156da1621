"""
WSGI config for Pressroom.

This module contains the WSGI application used by Django's development server
and any production WSGI deployments. It exposes a module-level variable named
``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

# We defer to a DJANGO_SETTINGS_MODULE already in the environment.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.production")

application = get_wsgi_application()
