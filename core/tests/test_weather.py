import pytest
import requests

from core.services import weather
from core.services.weather import WeatherClient, WeatherInfo, default_weather, normalize_city_name

OWM_PAYLOAD = {
    'name': 'Aarhus',
    'sys': {'country': 'DK'},
    'main': {'temp': 18, 'humidity': 70},
    'weather': [{'main': 'Rain', 'description': 'light rain', 'icon': '10d'}],
    'wind': {'speed': 5.5},
}


class FakeResponse:
    def __init__(self, status_code=200, payload=None, exc=None):
        self.status_code = status_code
        self._payload = payload
        self._exc = exc

    def json(self):
        if self._exc:
            raise self._exc
        return self._payload


def _capture(monkeypatch, response=None, exc=None):
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        if exc:
            raise exc
        return response

    monkeypatch.setattr(weather.requests, 'get', fake_get)
    return calls


@pytest.fixture
def client():
    return WeatherClient('http://weather.test/data', api_key='secret', default_city='Copenhagen', timeout=3)


@pytest.mark.parametrize('name', ['København', 'kbh', 'KOBENHAVN', 'copenhagen', ' Københavns Kommune '])
def test_copenhagen_spellings_normalize(name):
    assert normalize_city_name(name) == 'Copenhagen'


def test_other_cities_are_trimmed_only():
    assert normalize_city_name('  Aarhus ') == 'Aarhus'


def test_success_maps_fields(monkeypatch, client):
    calls = _capture(monkeypatch, FakeResponse(payload=OWM_PAYLOAD))
    info = client.get_weather_by_city(' Aarhus ')
    url, kwargs = calls[0]
    assert url == 'http://weather.test/data'
    assert kwargs['params'] == {'q': 'Aarhus', 'appid': 'secret', 'units': 'metric'}
    assert kwargs['timeout'] == 3
    assert info == WeatherInfo(city='Aarhus', country='DK', temperature=18.0, description='light rain',
                               condition='Rain', icon='10d', humidity=70.0, wind_speed=5.5)
    assert isinstance(info.temperature, float)


def test_missing_nested_objects_stay_none(monkeypatch, client):
    _capture(monkeypatch, FakeResponse(payload={'main': {'temp': 3.5}}))
    info = client.get_weather_by_city('Odense')
    assert info.city == 'Odense'
    assert info.temperature == 3.5
    assert info.country is None and info.icon is None and info.wind_speed is None


def test_normalized_city_is_sent(monkeypatch, client):
    calls = _capture(monkeypatch, FakeResponse(payload=OWM_PAYLOAD))
    client.get_weather_by_city('København')
    assert calls[0][1]['params']['q'] == 'Copenhagen'


@pytest.mark.parametrize('key', [None, '', '   '])
def test_missing_key_skips_request(monkeypatch, key):
    calls = _capture(monkeypatch, FakeResponse(payload=OWM_PAYLOAD))
    c = WeatherClient('http://weather.test/data', api_key=key)
    assert c.get_weather_by_city('Aarhus') == default_weather('Aarhus')
    assert calls == []


def test_blank_city_uses_default(monkeypatch):
    c = WeatherClient('http://weather.test/data', api_key='')
    assert c.get_weather_by_city('  ').city == 'Copenhagen'


@pytest.mark.parametrize('response', [
    FakeResponse(status_code=401),
    FakeResponse(status_code=404),
    FakeResponse(status_code=503),
    FakeResponse(payload='oops'),
    FakeResponse(exc=ValueError('bad json')),
])
def test_bad_responses_return_default_city_record(monkeypatch, client, response):
    _capture(monkeypatch, response)
    assert client.get_weather_by_city('Aarhus') == default_weather('Copenhagen')


@pytest.mark.parametrize('exc', [requests.ConnectionError('down'), requests.Timeout('slow'), KeyError('x')])
def test_transport_errors_return_default_city_record(monkeypatch, client, exc):
    _capture(monkeypatch, exc=exc)
    assert client.get_weather_by_city('Aarhus') == default_weather('Copenhagen')


def test_default_record_values():
    info = default_weather('Aalborg')
    assert info.to_dict() == {
        'city': 'Aalborg',
        'country': 'DK',
        'temperature': 15.0,
        'description': 'Partly cloudy',
        'condition': 'Clouds',
        'icon': '02d',
        'humidity': 65.0,
        'windSpeed': 10.0,
    }
