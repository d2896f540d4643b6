"""
Proxies for the third-party time and weather services.

Both endpoints always answer 200: the clients substitute a default value
when the upstream service cannot be reached.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser
from core.services.weather import WeatherClient
from core.services.world_time import WorldTimeClient


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def current_time(request):
    info = WorldTimeClient.from_settings().get_current_time(request.query_params.get('timezone'))
    return Response(info.to_dict())


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def current_weather(request):
    info = WeatherClient.from_settings().get_weather_by_city(request.query_params.get('city'))
    return Response(info.to_dict())
