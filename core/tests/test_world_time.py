import pytest
import requests

from core.services import world_time
from core.services.world_time import WorldTimeClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None, exc=None):
        self.status_code = status_code
        self._payload = payload
        self._exc = exc

    def json(self):
        if self._exc:
            raise self._exc
        return self._payload


@pytest.fixture
def client():
    return WorldTimeClient('http://time.test/api/', default_timezone='Europe/Copenhagen', timeout=2)


def _capture(monkeypatch, response=None, exc=None):
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        if exc:
            raise exc
        return response

    monkeypatch.setattr(world_time.requests, 'get', fake_get)
    return calls


def test_success_maps_fields(monkeypatch, client):
    calls = _capture(monkeypatch, FakeResponse(payload={
        'datetime': '2024-06-01T12:00:00.000+02:00',
        'timezone': 'Europe/Paris',
        'abbreviation': 'CEST',
        'day_of_week': 6,
        'day_of_year': 153,
    }))
    info = client.get_current_time('  Europe/Paris ')
    assert calls[0][0] == 'http://time.test/api/timezone/Europe/Paris'
    assert calls[0][1]['timeout'] == 2
    assert info.timezone == 'Europe/Paris'
    assert info.abbreviation == 'CEST'
    assert info.day_of_week == 6 and info.day_of_year == 153


@pytest.mark.parametrize('tz', [None, '', '   '])
def test_blank_timezone_uses_default(monkeypatch, client, tz):
    calls = _capture(monkeypatch, FakeResponse(payload={'timezone': 'Europe/Copenhagen'}))
    client.get_current_time(tz)
    assert calls[0][0].endswith('/timezone/Europe/Copenhagen')


def test_no_argument_uses_default(monkeypatch, client):
    calls = _capture(monkeypatch, FakeResponse(payload={}))
    client.get_current_time()
    assert calls[0][0].endswith('/timezone/Europe/Copenhagen')


def test_wrongly_typed_fields_are_none(monkeypatch, client):
    _capture(monkeypatch, FakeResponse(payload={'datetime': 5, 'day_of_week': 'Monday', 'day_of_year': True}))
    info = client.get_current_time('UTC')
    assert info.datetime is None
    assert info.day_of_week is None
    assert info.day_of_year is None


def test_float_day_numbers_are_truncated_to_int(monkeypatch, client):
    _capture(monkeypatch, FakeResponse(payload={'day_of_week': 3.0, 'day_of_year': 45.0}))
    info = client.get_current_time('UTC')
    assert info.day_of_week == 3 and isinstance(info.day_of_week, int)
    assert info.day_of_year == 45 and isinstance(info.day_of_year, int)


def _assert_fallback(info):
    assert info.abbreviation == 'CET'
    assert info.timezone == 'Europe/Copenhagen'
    assert 1 <= info.day_of_week <= 7
    assert 1 <= info.day_of_year <= 366
    assert info.datetime and 'T' in info.datetime


@pytest.mark.parametrize('response', [
    FakeResponse(status_code=500),
    FakeResponse(status_code=404),
    FakeResponse(payload=['not', 'an', 'object']),
    FakeResponse(exc=ValueError('bad json')),
])
def test_bad_responses_fall_back(monkeypatch, client, response):
    _capture(monkeypatch, response)
    _assert_fallback(client.get_current_time('Asia/Tokyo'))


@pytest.mark.parametrize('exc', [requests.ConnectionError('down'), requests.Timeout('slow'), RuntimeError('boom')])
def test_transport_errors_fall_back(monkeypatch, client, exc):
    _capture(monkeypatch, exc=exc)
    _assert_fallback(client.get_current_time('Asia/Tokyo'))


def test_from_settings(settings):
    settings.TIME_API_URL = 'http://other.test/api'
    settings.DEFAULT_TIMEZONE = 'Europe/Oslo'
    settings.EXTERNAL_API_TIMEOUT = 7
    c = WorldTimeClient.from_settings()
    assert c.api_url == 'http://other.test/api'
    assert c.default_timezone == 'Europe/Oslo'
    assert c.timeout == 7
