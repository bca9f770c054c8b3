import datetime as dt
import unittest

from pydantic import ValidationError

from city_weather.models import (
    AirQualitySnapshot,
    CombinedView,
    GeoLocation,
    PollutantLevels,
    WeatherSnapshot,
)


class TestModels(unittest.TestCase):
    def test_geo_location_parses_upstream_match(self):
        loc = GeoLocation.model_validate(
            {
                "name": "Tehran",
                "local_names": {"fa": "شهر تهران", "en": "Tehran"},
                "lat": 35.6892523,
                "lon": 51.3896004,
                "country": "IR",
                "state": None,
            }
        )
        self.assertEqual(loc.local_names["en"], "Tehran")
        self.assertIsNone(loc.state)

    def test_weather_snapshot_full_payload(self):
        snap = WeatherSnapshot.model_validate(
            {
                "coord": {"lon": 51.3896, "lat": 35.6893},
                "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01n"}],
                "base": "stations",
                "main": {
                    "temp": 20.51,
                    "feels_like": 19.19,
                    "temp_min": 20.1,
                    "temp_max": 20.51,
                    "pressure": 1017,
                    "humidity": 22,
                    "sea_level": 1017,
                    "grnd_level": 866,
                },
                "visibility": 10000,
                "wind": {"speed": 1.79, "deg": 60},
                "clouds": {"all": 0},
                "dt": 1761669278,
                "sys": {"type": 2, "id": 47737, "country": "IR", "sunrise": 1761619946, "sunset": 1761659028},
                "timezone": 12600,
                "id": 112931,
                "name": "Tehran",
                "cod": 200,
            }
        )
        self.assertEqual(snap.weather[0].description, "clear sky")
        self.assertIsNone(snap.wind.gust)
        self.assertEqual(snap.sys.country, "IR")
        self.assertEqual(snap.main.grnd_level, 866)

    def test_weather_snapshot_requires_main_block(self):
        with self.assertRaises(ValidationError):
            WeatherSnapshot.model_validate({"name": "Tehran", "wind": {"speed": 1.0}, "dt": 1})

    def test_air_quality_missing_components_default_to_zero(self):
        snap = AirQualitySnapshot.model_validate({"list": [{"main": {"aqi": 2}, "dt": 1}]})
        self.assertEqual(snap.list[0].components.nh3, 0.0)

    def test_combined_view_serializes_camel_case(self):
        view = CombinedView(
            latitude=1.0,
            longitude=2.0,
            city_name="Tehran",
            temperature=20.0,
            humidity=40,
            wind_speed=1.5,
            air_quality_index=2,
            pollutants=PollutantLevels(pm2_5=1, pm10=2, co=3, no2=4, o3=5, so2=6, nh3=7, no=8),
            timestamp=dt.datetime(2023, 1, 1, tzinfo=dt.timezone.utc),
        )
        data = view.model_dump(by_alias=True)
        self.assertEqual(data["cityName"], "Tehran")
        self.assertEqual(data["windSpeed"], 1.5)
        self.assertEqual(data["airQualityIndex"], 2)
        self.assertEqual(data["pollutants"]["pm2_5"], 1)


if __name__ == "__main__":
    unittest.main()
