import json
import unittest

from pydantic import ValidationError

from city_weather.status import STATUS_INFO, ResultStatus, StatusInfo, status_info


class TestStatus(unittest.TestCase):
    def test_codes_are_fixed(self):
        expected = {
            ResultStatus.OK: 1,
            ResultStatus.UNDEFINED_ERROR: 2,
            ResultStatus.FAILED_TO_GET_GEO_CODING: 3,
            ResultStatus.FAILED_TO_GET_WEATHER_DATA: 4,
            ResultStatus.FAILED_TO_GET_AIR_QUALITY: 5,
            ResultStatus.FAILED_TO_GET_COMBINED_WEATHER_DATA: 6,
            ResultStatus.CITY_NAME_IS_EMPTY: 7,
        }
        for status, code in expected.items():
            self.assertEqual(int(status), code)
            self.assertEqual(status_info(status).code, code)

    def test_every_status_has_info(self):
        self.assertEqual(set(STATUS_INFO), set(ResultStatus))

    def test_ok_message(self):
        self.assertEqual(status_info(ResultStatus.OK).message, "OK")
        self.assertEqual(
            status_info(ResultStatus.CITY_NAME_IS_EMPTY).message,
            "City name is empty or white space",
        )

    def test_lookup_table_is_read_only(self):
        with self.assertRaises(TypeError):
            STATUS_INFO[ResultStatus.OK] = StatusInfo(code=99, message="nope")  # type: ignore[index]

    def test_status_info_is_frozen(self):
        info = status_info(ResultStatus.OK)
        with self.assertRaises(ValidationError):
            info.code = 42

    def test_json_round_trip(self):
        info = StatusInfo(code=3, message="Test Message")
        raw = info.model_dump_json()
        self.assertEqual(json.loads(raw), {"code": 3, "message": "Test Message"})
        self.assertEqual(StatusInfo.model_validate_json(raw), info)


if __name__ == "__main__":
    unittest.main()
