from rest_framework import status
from rest_framework.response import Response


def list_response(queryset, serializer_class):
    """200 with the serialized rows, or an empty 204 when there are none."""
    items = list(queryset)
    if not items:
        return Response(status=status.HTTP_204_NO_CONTENT)
    return Response(serializer_class(items, many=True).data)


def validated(serializer_class, data):
    s = serializer_class(data=data)
    s.is_valid(raise_exception=True)
    return s.validated_data
