"""
Client for an OpenWeatherMap compatible current-weather service.

``get_weather_by_city`` never raises.  Without an API key no request is
made and a fixed default record is returned for the requested city; on
any failure the default record for the default city is returned.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_CITY = 'Copenhagen'
COPENHAGEN_ALIASES = {'københavn', 'kobenhavn', 'kbh', 'copenhagen'}


@dataclass
class WeatherInfo:
    city: Optional[str] = None
    country: Optional[str] = None
    temperature: Optional[float] = None
    description: Optional[str] = None
    condition: Optional[str] = None
    icon: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            'city': self.city,
            'country': self.country,
            'temperature': self.temperature,
            'description': self.description,
            'condition': self.condition,
            'icon': self.icon,
            'humidity': self.humidity,
            'windSpeed': self.wind_speed,
        }


def default_weather(city: str) -> WeatherInfo:
    return WeatherInfo(
        city=city,
        country='DK',
        temperature=15.0,
        description='Partly cloudy',
        condition='Clouds',
        icon='02d',
        humidity=65.0,
        wind_speed=10.0,
    )


def normalize_city_name(city: str) -> str:
    """Map the usual spellings of Copenhagen to ``"Copenhagen"``."""
    name = (city or '').strip()
    lower = name.lower()
    if ('k' in lower and 'benhavn' in lower) or lower in COPENHAGEN_ALIASES:
        return DEFAULT_CITY
    return name


def _float(value) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _str(value) -> Optional[str]:
    return value if isinstance(value, str) else None


def _dict(value) -> dict:
    return value if isinstance(value, dict) else {}


class WeatherClient:
    def __init__(self, api_url: str, api_key: Optional[str] = None, default_city: str = DEFAULT_CITY,
                 timeout: float = 5):
        self.api_url = api_url
        self.api_key = (api_key or '').strip()
        self.default_city = default_city or DEFAULT_CITY
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> 'WeatherClient':
        return cls(
            api_url=settings.WEATHER_API_URL,
            api_key=getattr(settings, 'WEATHER_API_KEY', ''),
            default_city=getattr(settings, 'DEFAULT_CITY', DEFAULT_CITY),
            timeout=getattr(settings, 'EXTERNAL_API_TIMEOUT', 5),
        )

    def get_weather_by_city(self, city: Optional[str] = None) -> WeatherInfo:
        name = normalize_city_name((city or '').strip() or self.default_city)
        if not self.api_key:
            logger.debug('No weather API key configured, returning default weather for %s', name)
            return default_weather(name)

        params = {'q': name, 'appid': self.api_key, 'units': 'metric'}
        try:
            r = requests.get(self.api_url, params=params, timeout=self.timeout)
            if r.status_code == 401:
                logger.warning('Weather API rejected the API key, using default weather')
                return default_weather(self.default_city)
            if r.status_code == 404:
                logger.warning('Weather API does not know city %s, using default weather', name)
                return default_weather(self.default_city)
            if r.status_code != 200:
                logger.warning('Weather API returned %s for %s, using default weather', r.status_code, name)
                return default_weather(self.default_city)
            data = r.json()
            if not isinstance(data, dict):
                logger.warning('Weather API returned a non-object body for %s, using default weather', name)
                return default_weather(self.default_city)
            return self._parse(name, data)
        except Exception as e:
            logger.warning('Weather API call for %s failed (%s), using default weather', name, e)
            return default_weather(self.default_city)

    @staticmethod
    def _parse(city: str, data: dict) -> WeatherInfo:
        main = _dict(data.get('main'))
        wind = _dict(data.get('wind'))
        sys_info = _dict(data.get('sys'))
        weather = data.get('weather')
        first = _dict(weather[0]) if isinstance(weather, list) and weather else {}
        return WeatherInfo(
            city=city,
            country=_str(sys_info.get('country')),
            temperature=_float(main.get('temp')),
            description=_str(first.get('description')),
            condition=_str(first.get('main')),
            icon=_str(first.get('icon')),
            humidity=_float(main.get('humidity')),
            wind_speed=_float(wind.get('speed')),
        )
