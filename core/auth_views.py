"""
Authentication views.

Login exchanges a username/password pair for a JWT pair; register
creates API users.  Both are open to anonymous callers and rate limited
through DRF's scoped throttles.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from core.models import Role
from core.serializers.auth import LoginSerializer, RegisterSerializer, UserSerializer
from core.services.users import register_user

logger = logging.getLogger(__name__)


def _is_admin(user) -> bool:
    return bool(user and user.is_authenticated and getattr(user, 'role', None) == Role.ADMIN)


@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """
    Login with username/password.  Any ``role`` field in the body is ignored.
    """
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    user = authenticate(request, username=vd['username'], password=vd['password'])
    if not user:
        logger.info('Failed login for %s from %s', vd['username'], request.META.get('REMOTE_ADDR'))
        return Response(
            {'ok': False, 'error': {'code': 'invalid_credentials', 'message': 'Invalid username or password'}},
            status=status.HTTP_401_UNAUTHORIZED,
        )

    refresh = RefreshToken.for_user(user)
    payload: dict[str, object] = {
        'ok': True,
        'token': str(refresh.access_token),
        'refresh': str(refresh),
        'role': user.role,
        'user': UserSerializer(user).data,
    }
    return Response(payload, status=200)

# ScopedRateThrottle reads throttle_scope from the wrapped APIView class
login_view.cls.throttle_scope = 'login'


@api_view(['POST'])
@permission_classes([AllowAny])
def register_view(request):
    """Register a user.  Only an authenticated ADMIN may pick the role."""
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    role = vd.get('role') if _is_admin(request.user) and vd.get('role') else Role.USER
    user = register_user(username=vd['username'], password=vd['password'], role=role)
    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

register_view.cls.throttle_scope = 'register'
