from __future__ import annotations

import logging

from django.contrib.auth import get_user_model

from core.exceptions import ValidationError
from core.models import Role

logger = logging.getLogger(__name__)

User = get_user_model()


def register_user(*, username: str, password: str, role: str = Role.USER):
    if User.objects.filter(username=username).exists():
        raise ValidationError('Username already exists')
    user = User.objects.create_user(username=username, password=password, role=role)
    logger.info('Registered user %s with role %s', user.username, user.role)
    return user


def ensure_user(username: str, password: str, role: str):
    """Create ``username`` unless it exists.  Returns ``(user, created)``."""
    user = User.objects.filter(username=username).first()
    if user is not None:
        return user, False
    return User.objects.create_user(username=username, password=password, role=role), True
