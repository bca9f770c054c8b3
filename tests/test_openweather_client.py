import unittest

import requests

from city_weather.config import ConfigurationError, Settings
from city_weather.geocoding import GeoCodingService
from city_weather.openweather_client import OpenWeatherClient
from city_weather.weather_service import WeatherService
from fakes import (
    DummyResp,
    RecordingSession,
    RoutingSession,
    tehran_air_payload,
    tehran_geocoding_payload,
    tehran_weather_payload,
)


def _client(session, **overrides):
    settings = Settings(api_key="test-api-key", **overrides)
    return OpenWeatherClient.from_settings(settings, session_factory=lambda: session)


class TestOpenWeatherClient(unittest.TestCase):
    def test_geocoding_request_shape(self):
        session = RecordingSession(DummyResp([{"name": "Tehran", "lat": 1, "lon": 2}]))
        payload = _client(session).fetch_geocoding("Tehran")

        self.assertEqual(payload[0]["name"], "Tehran")
        call = session.calls[0]
        self.assertEqual(call["url"], "http://api.openweathermap.org/geo/1.0/direct")
        self.assertEqual(call["params"], {"q": "Tehran", "limit": 1, "appid": "test-api-key"})
        self.assertEqual(call["timeout"], 10.0)

    def test_geocoding_limit_is_fixed_at_one(self):
        session = RecordingSession(DummyResp([]))
        client = _client(session, geocoding_limit=5)
        client.fetch_geocoding("Tehran")
        self.assertEqual(session.calls[0]["params"]["limit"], 1)

    def test_weather_request_uses_metric_units(self):
        session = RecordingSession(DummyResp({"dt": 1}))
        _client(session).fetch_current_weather(35.6892, 51.3890)

        call = session.calls[0]
        self.assertEqual(call["url"], "https://api.openweathermap.org/data/2.5/weather")
        self.assertEqual(call["params"]["lat"], 35.6892)
        self.assertEqual(call["params"]["lon"], 51.3890)
        self.assertEqual(call["params"]["units"], "metric")
        self.assertEqual(call["params"]["appid"], "test-api-key")

    def test_air_pollution_request(self):
        session = RecordingSession(DummyResp({"list": []}))
        _client(session).fetch_air_pollution(1.5, 2.5)

        call = session.calls[0]
        self.assertEqual(call["url"], "http://api.openweathermap.org/data/2.5/air_pollution")
        self.assertEqual(call["params"], {"lat": 1.5, "lon": 2.5, "appid": "test-api-key"})

    def test_session_closed_after_request(self):
        session = RecordingSession(DummyResp({"dt": 1}))
        _client(session).fetch_current_weather(0, 0)
        self.assertTrue(session.closed)

    def test_custom_endpoint_and_timeout(self):
        session = RecordingSession(DummyResp([]))
        client = _client(session, geocoding_url="http://mock.local/geo/", request_timeout_seconds=3)
        client.fetch_geocoding("Paris")
        self.assertEqual(session.calls[0]["url"], "http://mock.local/geo")
        self.assertEqual(session.calls[0]["timeout"], 3)

    def test_http_error_raises(self):
        session = RecordingSession(DummyResp({"cod": 401}, status_code=401))
        with self.assertRaises(requests.HTTPError):
            _client(session).fetch_current_weather(0, 0)

    def test_bad_json_raises_value_error(self):
        session = RecordingSession(DummyResp(ValueError("not json")))
        with self.assertRaises(ValueError):
            _client(session).fetch_air_pollution(0, 0)

    def test_missing_api_key_is_fatal(self):
        with self.assertRaises(ConfigurationError):
            OpenWeatherClient.from_settings(Settings(api_key=None))
        with self.assertRaises(ConfigurationError):
            OpenWeatherClient.from_settings(Settings(api_key="   "))


class TestConcurrentRequestContexts(unittest.TestCase):
    def test_combined_calls_use_separate_sessions(self):
        routes = {
            "/geo/": tehran_geocoding_payload(),
            "/air_pollution": tehran_air_payload(),
            "/weather": tehran_weather_payload(),
        }
        sessions = []

        def factory():
            session = RoutingSession(routes)
            sessions.append(session)
            return session

        client = OpenWeatherClient.from_settings(Settings(api_key="test-api-key"), session_factory=factory)
        service = WeatherService(client, GeoCodingService(client))

        self.assertTrue(service.combined("Tehran").is_ok())

        by_endpoint = {}
        for session in sessions:
            for call in session.calls:
                by_endpoint[call["url"].rsplit("/", 1)[-1]] = (session, call["thread"])
        weather_session, weather_thread = by_endpoint["weather"]
        air_session, air_thread = by_endpoint["air_pollution"]

        self.assertIsNot(weather_session, air_session)
        self.assertTrue(weather_thread.startswith("combined"))
        self.assertTrue(air_thread.startswith("combined"))
        self.assertTrue(all(session.closed for session in sessions))


if __name__ == "__main__":
    unittest.main()
