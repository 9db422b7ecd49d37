"""Per-address cache of geo-inferred country and languages.

Memoizes, per raw address string, the tuple ``(country, lang1, lang2?)``
so repeated requests from the same address skip the geo database.

Architecture:
    - RWLock: hits share the read lock; a miss takes the write lock only
      for the single insert. The geo lookup runs with no lock held.
    - Concurrent misses for one address may both compute and both store
      (last write wins). Results are deterministic per address, so a race
      costs duplicate work, never a wrong entry.
    - Entries are tuples and are never modified after they are stored.
    - Unbounded by default: one entry per distinct address for the process
      lifetime. Pass maxsize to evict the oldest insertions instead.

Entry Structure:
    (country_code, *default_languages)
    - country_code: uppercase ISO 3166-1 alpha-2, or "ZZ" when unresolved
    - default_languages: 0 to 2 canonical tags from the country table

Python 3.13+.
"""

from __future__ import annotations

import ipaddress
import logging
import threading
from typing import TYPE_CHECKING, Protocol

from geolocale.constants import UNKNOWN_COUNTRY
from geolocale.errors import GeoResolutionError, HeaderParseError
from geolocale.runtime.rwlock import RWLock
from geolocale.table import lookup_country_languages
from geolocale.tags import parse_accept_language

if TYPE_CHECKING:
    from geolocale.geo.database import IPAddress
    from geolocale.geo.record import LocationRecord
    from geolocale.table import CountryLanguageTable

__all__ = ["AddressResolver", "GeoLanguageCache", "GeoLanguages"]

logger = logging.getLogger(__name__)

type GeoLanguages = tuple[str, ...]
"""(country_code, *default_languages); ("ZZ",) when unresolved."""

_UNRESOLVED: GeoLanguages = (UNKNOWN_COUNTRY,)


class AddressResolver(Protocol):
    """What the cache needs from a geo resolver (GeoResolver satisfies it)."""

    def resolve(self, address: IPAddress) -> LocationRecord:
        """Return the location of address or raise GeoResolutionError."""
        ...


class GeoLanguageCache:
    """Thread-safe memo of address -> (country, default languages).

    Attributes:
        maxsize: Entry limit, or None for an unbounded cache
    """

    __slots__ = (
        "_entries",
        "_hits",
        "_lock",
        "_maxsize",
        "_misses",
        "_resolver",
        "_stats_lock",
        "_table",
        "_unresolved",
    )

    def __init__(
        self,
        resolver: AddressResolver,
        table: CountryLanguageTable,
        *,
        maxsize: int | None = None,
    ) -> None:
        """Initialize cache.

        Args:
            resolver: Geo resolver consulted on a miss
            table: Country language table (read-only)
            maxsize: Maximum entries; None (default) never evicts

        Raises:
            ValueError: If maxsize is not positive
        """
        if maxsize is not None and maxsize <= 0:
            msg = "maxsize must be positive or None"
            raise ValueError(msg)

        self._resolver = resolver
        self._table = table
        self._maxsize = maxsize
        self._entries: dict[str, GeoLanguages] = {}
        self._lock = RWLock()
        # Counters are bumped by concurrent readers; guard them separately
        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._unresolved = 0

    @property
    def maxsize(self) -> int | None:
        """Entry limit, or None for an unbounded cache."""
        return self._maxsize

    def get_or_compute(self, address: str) -> GeoLanguages:
        """Return cached geo languages for address, computing on a miss.

        Never raises for a bad address or a geo failure: those resolve to
        ``("ZZ",)`` and are cached like any other result.

        Args:
            address: Host part of the peer address (no port)

        Returns:
            (country_code, *default_languages)
        """
        with self._lock.read():
            entry = self._entries.get(address)
        if entry is not None:
            with self._stats_lock:
                self._hits += 1
            return entry

        with self._stats_lock:
            self._misses += 1

        languages = self._compute(address)

        with self._lock.write():
            if (
                self._maxsize is not None
                and address not in self._entries
                and len(self._entries) >= self._maxsize
            ):
                # dicts iterate in insertion order: first key is the oldest
                del self._entries[next(iter(self._entries))]
            self._entries[address] = languages

        logger.debug("Cached geo languages for %r: %s", address, languages)
        return languages

    def _compute(self, address: str) -> GeoLanguages:
        try:
            ip = ipaddress.ip_address(address)
        except ValueError:
            logger.debug("Unparseable address %r; country unresolved", address)
            return self._unresolved_result()

        try:
            record = self._resolver.resolve(ip)
        except GeoResolutionError as e:
            logger.debug("Geo lookup for %s failed: %s", ip, e)
            return self._unresolved_result()

        if not record.has_country:
            return self._unresolved_result()

        country = record.country_code.upper()
        tags = lookup_country_languages(self._table, country)
        if tags is None:
            return (country,)

        try:
            languages = parse_accept_language(",".join(tags))
        except HeaderParseError as e:
            logger.debug("Table languages for %s are malformed: %s", country, e)
            return (country,)
        return (country, *languages)

    def _unresolved_result(self) -> GeoLanguages:
        with self._stats_lock:
            self._unresolved += 1
        return _UNRESOLVED

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def __contains__(self, address: object) -> bool:
        with self._lock.read():
            return address in self._entries

    def get_stats(self) -> dict[str, int | float | None]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached addresses
            - maxsize (int | None): Entry limit, None if unbounded
            - hits (int): Lookups served from the cache
            - misses (int): Lookups that computed a result
            - unresolved (int): Misses that fell back to "ZZ"
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        size = len(self)
        with self._stats_lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": size,
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "unresolved": self._unresolved,
                "hit_rate": hit_rate,
            }
