"""GeoLocale - request locale resolution from Accept-Language and geo-IP.

Combines the languages a browser declares with the default languages of the
country the request comes from, and returns one de-duplicated list in which
a region-specific tag ("en-US") replaces its generic form ("en").

Public API:
    LocaleResolver - Resolve (country, languages) for a request
    ResolvedLocale - Result of a resolution
    GeoConfig - Database location, provisioning and cache settings
    parse_accept_language - Canonical tags from an Accept-Language value
    split_host_port - Strip the port from a peer address
    build_country_language_table - Country -> default languages table

Exceptions:
    GeoLocaleError - Base exception class
    DatasetError - Embedded country dataset is malformed
    HeaderParseError - Accept-Language value is malformed
    GeoResolutionError - Address could not be mapped to a location
    GeoDatabaseUnavailableError - Geo database missing or unopenable
    ProvisioningError - Geo database could not be fetched or unpacked
    GeoLookupError - Geo database lookup failed

Submodules:
    geolocale.geo - Geo database, provisioning and GeoResolver
    geolocale.runtime - Resolution engine, cache and RWLock
"""

from .addresses import split_host_port
from .config import GeoConfig
from .constants import UNKNOWN_COUNTRY
from .enums import ProvisioningMode
from .errors import (
    DatasetError,
    GeoDatabaseUnavailableError,
    GeoLocaleError,
    GeoLookupError,
    GeoResolutionError,
    HeaderParseError,
    ProvisioningError,
)
from .geo import GeoResolver, LocationRecord
from .runtime import LocaleResolver, ResolvedLocale, merge_languages
from .table import build_country_language_table, default_country_table
from .tags import canonicalize_tag, parse_accept_language

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("geolocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "UNKNOWN_COUNTRY",
    "DatasetError",
    "GeoConfig",
    "GeoDatabaseUnavailableError",
    "GeoLocaleError",
    "GeoLookupError",
    "GeoResolutionError",
    "GeoResolver",
    "HeaderParseError",
    "LocaleResolver",
    "LocationRecord",
    "ProvisioningError",
    "ProvisioningMode",
    "ResolvedLocale",
    "__version__",
    "build_country_language_table",
    "canonicalize_tag",
    "default_country_table",
    "merge_languages",
    "parse_accept_language",
    "split_host_port",
]
