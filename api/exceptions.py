import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_error(detail, field=None):
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key == 'non_field_errors':
                name = field
            elif field is None:
                name = str(key)
            else:
                name = f"{field}.{key}"
            return _first_error(value, name)
        return field, 'Invalid input.'
    if isinstance(detail, list):
        if not detail:
            return field, 'Invalid input.'
        return _first_error(detail[0], field)
    return field, str(detail)


def api_exception_handler(exc, context):
    """Shape every error as ``{"message": ...}``; unknown failures become a bare 500."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception("Unhandled error in %s", type(view).__name__ if view else 'unknown view')
        return Response({'message': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        field, message = _first_error(exc.detail)
        body = {'message': message}
        if field is not None:
            body['field'] = field
        response.data = body
    else:
        response.data = {'message': str(exc.detail) if hasattr(exc, 'detail') else str(exc)}
    return response
