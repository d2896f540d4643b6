import logging

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class NotFoundError(NotFound):
    default_detail = 'Resource not found'
    default_code = 'not_found'


class ValidationError(APIException):
    """Business rule violation, e.g. a ward that is not part of the hospital."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid request'
    default_code = 'validation_error'


class MissingArgumentError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Missing argument'
    default_code = 'missing_argument'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('Unhandled error in %s', context.get('view'), exc_info=exc)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    code = getattr(exc, 'default_code', None) or 'api_error'
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    elif isinstance(resp.data, list):
        detail = resp.data[0] if len(resp.data) == 1 else resp.data
    else:
        detail = str(resp.data)
    if resp.status_code >= 500:
        logger.error('API error %s: %s', resp.status_code, detail)
    return Response({'ok': False, 'error': {'code': code, 'message': detail}}, status=resp.status_code)
