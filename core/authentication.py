"""
Authentication class for bearer JWTs.

Kept apart from the views so that Django REST framework can import it
from settings during initialisation without pulling in view modules.
"""
from __future__ import annotations

from rest_framework_simplejwt import authentication


class JWTAuthentication(authentication.JWTAuthentication):
    """Bearer JWT authentication resolving tokens to ``core.User``.

    Exists to give the project a stable import path in
    ``REST_FRAMEWORK['DEFAULT_AUTHENTICATION_CLASSES']``.
    """

    www_authenticate_realm = 'hospital-admin'
