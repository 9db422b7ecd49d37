"""Geo database handles.

Defines the structural interface the resolver needs from a geo database
(look up an address, close) and the MaxMind GeoIP2 implementation of it.
Database format parsing belongs to the geoip2/maxminddb libraries; this
module only translates their results and errors into geolocale types.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from ipaddress import IPv4Address, IPv6Address
from pathlib import Path
from typing import Protocol

import geoip2.database
import geoip2.errors
from maxminddb import InvalidDatabaseError

from geolocale.errors import GeoLookupError
from geolocale.geo.record import LocationRecord

__all__ = [
    "DatabaseOpener",
    "GeoDatabase",
    "GeoIP2Database",
    "IPAddress",
    "open_geoip2_database",
]

logger = logging.getLogger(__name__)

type IPAddress = IPv4Address | IPv6Address

# Names are requested in English regardless of the visitor's language.
_NAME_LOCALE = "en"


class GeoDatabase(Protocol):
    """Protocol for an open geo database.

    This is a Protocol (structural typing) rather than ABC so tests and
    alternative backends can supply any object with these two methods.
    """

    def lookup(self, address: IPAddress) -> LocationRecord:
        """Return the location of address.

        Raises:
            GeoLookupError: If the address is not found or the database
                cannot be read
        """
        ...

    def close(self) -> None:
        """Release the underlying file handle."""
        ...


type DatabaseOpener = Callable[[Path], GeoDatabase]
"""Factory that opens a database file; raises GeoLookupError if unreadable."""


class GeoIP2Database:
    """GeoDatabase backed by a MaxMind GeoIP2/GeoLite2 City database.

    The underlying geoip2 Reader is safe for concurrent lookups, so one
    instance can be shared by every resolving thread.
    """

    __slots__ = ("_path", "_reader")

    def __init__(self, path: Path) -> None:
        """Open the database file.

        Args:
            path: Location of the .mmdb file

        Raises:
            GeoLookupError: If the file is missing or not a valid database
        """
        self._path = path
        try:
            self._reader = geoip2.database.Reader(str(path), locales=[_NAME_LOCALE])
        except (OSError, InvalidDatabaseError, ValueError) as e:
            msg = f"Cannot open geo database {path}: {e}"
            raise GeoLookupError(msg) from e
        logger.info("Opened geo database %s", path)

    def lookup(self, address: IPAddress) -> LocationRecord:
        """Look up one address in the City database.

        Args:
            address: IPv4 or IPv6 address

        Returns:
            LocationRecord with country code, country name and city name

        Raises:
            GeoLookupError: If the address is absent or the database is unreadable
        """
        try:
            response = self._reader.city(address)
        except geoip2.errors.AddressNotFoundError as e:
            msg = f"Address {address} not found in geo database"
            raise GeoLookupError(msg, address=str(address)) from e
        except (geoip2.errors.GeoIP2Error, InvalidDatabaseError, ValueError, TypeError) as e:
            # TypeError: the file is a GeoIP2 database of another type (e.g. Country)
            msg = f"Lookup of {address} failed: {e}"
            raise GeoLookupError(msg, address=str(address)) from e

        return LocationRecord(
            address=str(address),
            country_code=response.country.iso_code or "",
            country_name=response.country.names.get(_NAME_LOCALE, ""),
            city_name=response.city.names.get(_NAME_LOCALE, ""),
        )

    def close(self) -> None:
        """Close the database reader."""
        self._reader.close()

    def __repr__(self) -> str:
        return f"GeoIP2Database({str(self._path)!r})"


def open_geoip2_database(path: Path) -> GeoDatabase:
    """Default DatabaseOpener: open path as a GeoIP2 City database."""
    return GeoIP2Database(path)
