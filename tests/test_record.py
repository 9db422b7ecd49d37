"""Tests for LocationRecord."""

import pytest

from geolocale.geo.record import LocationRecord


class TestLocationRecord:
    """Test the immutable lookup result."""

    def test_to_dict_keys(self) -> None:
        """Serialization uses the compact ip/cc/country/city keys."""
        record = LocationRecord("81.2.69.142", "GB", "United Kingdom", "London")
        assert record.to_dict() == {
            "ip": "81.2.69.142",
            "cc": "GB",
            "country": "United Kingdom",
            "city": "London",
        }

    def test_optional_names_default_empty(self) -> None:
        """Country and city names default to ''."""
        record = LocationRecord("2001:db8::1", "DE")
        assert record.country_name == ""
        assert record.city_name == ""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("US", True), ("us", True), ("", False), ("USA", False), ("U", False)],
    )
    def test_has_country(self, code: str, expected: bool) -> None:
        """Only two-letter codes count as a resolved country."""
        assert LocationRecord("192.0.2.1", code).has_country is expected

    def test_hashable_and_frozen(self) -> None:
        """Records are values."""
        record = LocationRecord("192.0.2.1", "FR")
        assert {record, LocationRecord("192.0.2.1", "FR")} == {record}
        with pytest.raises(AttributeError):
            record.country_code = "DE"  # type: ignore[misc]
