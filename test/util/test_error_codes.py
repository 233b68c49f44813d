import inspect
import unittest

from util import error_codes

CATEGORY_RANGES = {
    "validation": (1000, 1999),
    "not_found": (2000, 2999),
    "authorization": (3000, 3999),
    "authentication": (4000, 4999),
    "external_service": (5000, 5999),
    "rate_limit": (6000, 6999),
    "configuration": (7000, 7999),
    "internal": (8000, 8999),
}


def _constants() -> dict[str, int]:
    return {
        name: value
        for name, value in inspect.getmembers(error_codes)
        if not name.startswith("_") and isinstance(value, int)
    }


class ErrorCodesTest(unittest.TestCase):

    def test_no_duplicate_error_codes(self):
        seen: dict[int, str] = {}
        duplicates: list[str] = []
        for name, value in _constants().items():
            if value in seen:
                duplicates.append(f"{name}={value} duplicates {seen[value]}")
            else:
                seen[value] = name
        self.assertEqual(duplicates, [], f"Duplicate error codes found: {duplicates}")

    def test_error_codes_in_valid_category_ranges(self):
        for name, value in _constants().items():
            in_range = any(low <= value <= high for low, high in CATEGORY_RANGES.values())
            self.assertTrue(in_range, f"{name}={value} is not in any valid category range")

    def test_delivery_failures_are_external_service_errors(self):
        low, high = CATEGORY_RANGES["external_service"]
        for value in [error_codes.UNENGAGED_USER, error_codes.MESSAGE_UNDELIVERABLE, error_codes.MEDIA_UPLOAD_FAILED]:
            self.assertTrue(low <= value <= high)

    def test_missing_configuration_is_a_configuration_error(self):
        low, high = CATEGORY_RANGES["configuration"]
        self.assertTrue(low <= error_codes.MISSING_PREVIEW_PHONE_NUMBER_ID <= high)
