"""Location record produced by a geo lookup.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LocationRecord"]


@dataclass(frozen=True, slots=True)
class LocationRecord:
    """Approximate location of a network address.

    Immutable, thread-safe, hashable. Produced fresh per lookup; only the
    derived country and languages are cached.

    Attributes:
        address: Looked-up address in canonical text form.
        country_code: ISO 3166-1 alpha-2 code as reported by the database,
            or "" when the database has no country for the address.
        country_name: English country name ("" if unknown).
        city_name: English city name ("" if unknown).
    """

    address: str
    country_code: str
    country_name: str = ""
    city_name: str = ""

    @property
    def has_country(self) -> bool:
        """True if the record carries a usable 2-letter country code."""
        return len(self.country_code) == 2

    def to_dict(self) -> dict[str, str]:
        """Serialize with the compact keys used on the wire.

        Example:
            >>> LocationRecord("8.8.8.8", "US", "United States", "").to_dict()
            {'ip': '8.8.8.8', 'cc': 'US', 'country': 'United States', 'city': ''}
        """
        return {
            "ip": self.address,
            "cc": self.country_code,
            "country": self.country_name,
            "city": self.city_name,
        }
