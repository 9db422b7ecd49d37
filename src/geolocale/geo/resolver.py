"""Address to location resolution.

GeoResolver ties a provisioner (which makes the database file exist) to a
database opener (which reads it). The database is opened on first use and
shared by all later lookups; a failed provisioning or open leaves the
resolver closed so the next lookup tries again.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Self

from geolocale.constants import DEFAULT_FETCH_TIMEOUT
from geolocale.errors import GeoDatabaseUnavailableError
from geolocale.geo.database import open_geoip2_database
from geolocale.geo.provisioning import make_provisioner

if TYPE_CHECKING:
    from types import TracebackType

    from geolocale.config import GeoConfig
    from geolocale.geo.database import DatabaseOpener, GeoDatabase, IPAddress
    from geolocale.geo.provisioning import DatabaseProvisioner
    from geolocale.geo.record import LocationRecord

__all__ = ["GeoResolver"]

logger = logging.getLogger(__name__)


class GeoResolver:
    """Resolve network addresses to LocationRecords.

    Thread Safety:
        Safe for concurrent use. Opening the database is serialized; lookups
        on the opened database run concurrently.

    Example:
        >>> resolver = GeoResolver.from_config(GeoConfig())
        >>> record = resolver.resolve(ipaddress.ip_address("81.2.69.142"))
        >>> record.country_code
        'GB'
    """

    __slots__ = ("_database", "_lock", "_opener", "_provisioner", "_timeout")

    def __init__(
        self,
        provisioner: DatabaseProvisioner,
        *,
        opener: DatabaseOpener = open_geoip2_database,
        timeout: float | None = DEFAULT_FETCH_TIMEOUT,
    ) -> None:
        """Initialize resolver.

        Args:
            provisioner: Makes the database file available on disk
            opener: Opens the provisioned file (default: GeoIP2 reader)
            timeout: Seconds passed to provisioner.ensure_available()
        """
        self._provisioner = provisioner
        self._opener = opener
        self._timeout = timeout
        self._database: GeoDatabase | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: GeoConfig) -> GeoResolver:
        """Build a resolver using the provisioning strategy in config."""
        return cls(make_provisioner(config), timeout=config.fetch_timeout)

    @property
    def is_open(self) -> bool:
        """True once the database has been opened and not yet closed."""
        return self._database is not None

    def resolve(self, address: IPAddress) -> LocationRecord:
        """Look up the location of address.

        Provisions and opens the database on first use.

        Args:
            address: IPv4 or IPv6 address

        Returns:
            LocationRecord (country_code may be "" if the database has none)

        Raises:
            GeoDatabaseUnavailableError: If the database is absent and could
                not be provisioned
            GeoLookupError: If the address is not found or the database is
                unreadable
        """
        database = self._get_database()
        record = database.lookup(address)
        logger.debug("Resolved %s to country %r", address, record.country_code)
        return record

    def _get_database(self) -> GeoDatabase:
        database = self._database
        if database is not None:
            return database

        with self._lock:
            # Another thread may have opened it while we waited
            if self._database is not None:
                return self._database
            try:
                path = self._provisioner.ensure_available(self._timeout)
            except GeoDatabaseUnavailableError as e:
                logger.warning("Geo database unavailable: %s", e)
                raise
            self._database = self._opener(path)
            return self._database

    def close(self) -> None:
        """Close the database if open. Safe to call repeatedly."""
        with self._lock:
            if self._database is not None:
                self._database.close()
                self._database = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
