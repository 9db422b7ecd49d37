"""Locale resolution engine.

Combines the two language signals of a request:

1. Browser languages: the Accept-Language header, best first.
2. Geo languages: the peer address mapped to a country (through the geo
   language cache) and that country's default languages.

The union is de-duplicated by content, then generic tags are dropped when a
region-specific tag of the same language is present ("en" goes when "en-US"
is there), because the region-specific tag is the more informative one.

Ordering:
    Output lists browser tags first (header order) then geo tags. This is
    deterministic, but callers should treat the result as a set.

Error Handling:
    resolve() never raises for request data. A malformed header counts as
    no browser languages; a bad address or any geo failure yields the
    unknown-region country "ZZ" with no geo languages. Only construction can
    fail, with DatasetError, when the country table cannot be built.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from babel.core import negotiate_locale

from geolocale.addresses import split_host_port
from geolocale.config import GeoConfig
from geolocale.constants import UNKNOWN_COUNTRY
from geolocale.errors import HeaderParseError
from geolocale.geo.resolver import GeoResolver
from geolocale.runtime.cache import GeoLanguageCache
from geolocale.table import default_country_table
from geolocale.tags import generic_prefix, is_region_specific, parse_accept_language

if TYPE_CHECKING:
    from types import TracebackType

    from geolocale.runtime.cache import AddressResolver, GeoLanguages
    from geolocale.table import CountryLanguageTable
    from geolocale.tags import LanguageTag

__all__ = ["LocaleResolver", "ResolvedLocale", "merge_languages"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedLocale:
    """Country and preferred languages of one request.

    Unpacks as a pair: ``country, languages = resolver.resolve(...)``.

    Attributes:
        country: Uppercase ISO 3166-1 alpha-2 code, or "ZZ" if unknown.
        languages: Preferred tags with no duplicates and no generic tag
            alongside a region-specific tag of the same language.
    """

    country: str
    languages: tuple[LanguageTag, ...]

    def __iter__(self) -> Iterator[str | tuple[LanguageTag, ...]]:
        yield self.country
        yield self.languages

    @property
    def country_known(self) -> bool:
        """False when the country is the unknown-region sentinel."""
        return self.country != UNKNOWN_COUNTRY

    def best_match(
        self, available: Iterable[str], default: str | None = None
    ) -> str | None:
        """Pick the best supported locale for these preferences.

        Uses Babel's negotiation: exact (case-insensitive) matches first,
        then the generic language of a region-specific preference, then
        Babel's common aliases.

        Args:
            available: Locales the application supports (hyphen separated)
            default: Returned when nothing matches

        Returns:
            Negotiated locale, or default

        Example:
            >>> ResolvedLocale("DE", ("en-US", "de")).best_match(["de", "fr"])
            'de'
        """
        match = negotiate_locale(list(self.languages), list(available), sep="-")
        return default if match is None else match


def merge_languages(
    browser: Iterable[LanguageTag], geo: Iterable[LanguageTag]
) -> tuple[LanguageTag, ...]:
    """Union browser and geo tags, then drop generics shadowed by specifics.

    Only the literal prefix before the first hyphen is removed: "zh-Hant-TW"
    removes "zh" but not "zh-Hant".

    Example:
        >>> merge_languages(["en-US", "en"], ["de"])
        ('en-US', 'de')
        >>> merge_languages(["en-US"], ["fr"])
        ('en-US', 'fr')
    """
    # dict.fromkeys() removes duplicates while maintaining insertion order
    candidates = dict.fromkeys([*browser, *geo])
    for tag in [tag for tag in candidates if is_region_specific(tag)]:
        candidates.pop(generic_prefix(tag), None)
    return tuple(candidates)


class LocaleResolver:
    """Resolve a request's country and preferred languages.

    Owns its geo language cache; share one instance across request
    handlers to share the cache.

    Thread Safety:
        resolve() is safe to call concurrently from any number of threads.

    Example:
        >>> with LocaleResolver.from_config(GeoConfig()) as resolver:
        ...     country, languages = resolver.resolve("81.2.69.142:443", "en-US,en;q=0.5")
        >>> country
        'GB'
        >>> sorted(languages)
        ['cy-GB', 'en-GB', 'en-US']
    """

    __slots__ = ("_cache", "_geo_resolver", "_table")

    def __init__(
        self,
        geo_resolver: AddressResolver,
        *,
        table: CountryLanguageTable | None = None,
        cache_maxsize: int | None = None,
    ) -> None:
        """Initialize resolver.

        The country table is built eagerly so a broken dataset fails here,
        at start-up, rather than on the first request.

        Args:
            geo_resolver: Maps addresses to locations (e.g. GeoResolver)
            table: Country language table; defaults to the embedded dataset
            cache_maxsize: Bound for the geo language cache; None is unbounded

        Raises:
            DatasetError: If the embedded country dataset cannot be parsed
            ValueError: If cache_maxsize is not positive
        """
        self._table = default_country_table() if table is None else table
        self._geo_resolver = geo_resolver
        self._cache = GeoLanguageCache(geo_resolver, self._table, maxsize=cache_maxsize)

    @classmethod
    def from_config(cls, config: GeoConfig | None = None) -> LocaleResolver:
        """Build the full stack (provisioner, geo resolver, cache) from config.

        Args:
            config: Configuration; None reads GeoConfig.from_env()
        """
        if config is None:
            config = GeoConfig.from_env()
        return cls(GeoResolver.from_config(config), cache_maxsize=config.cache_maxsize)

    @property
    def cache(self) -> GeoLanguageCache:
        """The per-address geo language cache owned by this resolver."""
        return self._cache

    @property
    def table(self) -> CountryLanguageTable:
        """The country language table in use."""
        return self._table

    def browser_languages(self, accept_language: str | None) -> list[LanguageTag]:
        """Tags declared in an Accept-Language value, best first.

        Returns an empty list when the header is absent or malformed.
        """
        try:
            return parse_accept_language(accept_language)
        except HeaderParseError as e:
            logger.debug("Ignoring malformed Accept-Language header: %s", e)
            return []

    def geo_languages(self, request_address: str | None) -> GeoLanguages:
        """``(country, *default_languages)`` inferred from a peer address.

        The port, if any, is stripped first. Returns ("ZZ",) when the
        address is unusable or the geo lookup fails.
        """
        return self._cache.get_or_compute(split_host_port(request_address))

    def resolve(
        self, request_address: str | None, accept_language: str | None
    ) -> ResolvedLocale:
        """Resolve country and preferred languages for one request.

        Args:
            request_address: Peer address, optionally "host:port"
            accept_language: Raw Accept-Language header value, or None

        Returns:
            ResolvedLocale(country, languages)
        """
        browser = self.browser_languages(accept_language)
        country, *geo = self.geo_languages(request_address)
        return ResolvedLocale(country, merge_languages(browser, geo))

    def resolve_environ(self, environ: Mapping[str, object]) -> ResolvedLocale:
        """Resolve from a WSGI environ (REMOTE_ADDR, HTTP_ACCEPT_LANGUAGE)."""
        address = environ.get("REMOTE_ADDR")
        header = environ.get("HTTP_ACCEPT_LANGUAGE")
        return self.resolve(
            address if isinstance(address, str) else None,
            header if isinstance(header, str) else None,
        )

    def close(self) -> None:
        """Release the geo database held by the geo resolver, if closable."""
        close = getattr(self._geo_resolver, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
