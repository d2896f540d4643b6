"""
Client for a worldtimeapi.org compatible time-zone service.

``get_current_time`` never raises: any transport, status or decoding
problem is logged and replaced by a locally computed value for the
default time zone.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = 'Europe/Copenhagen'
FALLBACK_ABBREVIATION = 'CET'


@dataclass
class TimeInfo:
    datetime: Optional[str] = None
    timezone: Optional[str] = None
    abbreviation: Optional[str] = None
    day_of_week: Optional[int] = None
    day_of_year: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            'datetime': self.datetime,
            'timezone': self.timezone,
            'abbreviation': self.abbreviation,
            'dayOfWeek': self.day_of_week,
            'dayOfYear': self.day_of_year,
        }


def _str(value) -> Optional[str]:
    return value if isinstance(value, str) else None


def _int(value) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


class WorldTimeClient:
    def __init__(self, api_url: str, default_timezone: str = DEFAULT_TIMEZONE, timeout: float = 5):
        self.api_url = api_url.rstrip('/')
        self.default_timezone = default_timezone or DEFAULT_TIMEZONE
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> 'WorldTimeClient':
        return cls(
            api_url=settings.TIME_API_URL,
            default_timezone=getattr(settings, 'DEFAULT_TIMEZONE', DEFAULT_TIMEZONE),
            timeout=getattr(settings, 'EXTERNAL_API_TIMEOUT', 5),
        )

    def get_current_time(self, timezone: Optional[str] = None) -> TimeInfo:
        tz = (timezone or '').strip() or self.default_timezone
        url = f'{self.api_url}/timezone/{tz}'
        try:
            r = requests.get(url, timeout=self.timeout)
            if r.status_code != 200:
                logger.warning('Time API returned %s for %s, using fallback', r.status_code, tz)
                return self.fallback()
            data = r.json()
            if not isinstance(data, dict):
                logger.warning('Time API returned a non-object body for %s, using fallback', tz)
                return self.fallback()
            return TimeInfo(
                datetime=_str(data.get('datetime')),
                timezone=_str(data.get('timezone')),
                abbreviation=_str(data.get('abbreviation')),
                day_of_week=_int(data.get('day_of_week')),
                day_of_year=_int(data.get('day_of_year')),
            )
        except Exception as e:
            logger.warning('Time API call for %s failed (%s), using fallback', tz, e)
            return self.fallback()

    def fallback(self) -> TimeInfo:
        """Current time computed locally for the default time zone."""
        try:
            now = datetime.now(ZoneInfo(self.default_timezone))
        except (ZoneInfoNotFoundError, ValueError):
            now = datetime.now()
        return TimeInfo(
            datetime=now.replace(tzinfo=None).isoformat(),
            timezone=self.default_timezone,
            abbreviation=FALLBACK_ABBREVIATION,
            day_of_week=now.isoweekday(),
            day_of_year=now.timetuple().tm_yday,
        )
