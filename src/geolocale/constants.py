"""Shared constants for geolocale.

This module provides centralized configuration constants used across the
table, geo and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Sentinels: Values marking an unresolved signal
- Table limits: Shape of country language entries
- Geo database: Default file location and remote source
- Environment: Variable names read by GeoConfig.from_env()

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Sentinels
    "UNKNOWN_COUNTRY",
    # Table limits
    "MAX_DEFAULT_LANGUAGES",
    # Geo database
    "DEFAULT_DATABASE_FILENAME",
    "COMPRESSED_SUFFIX",
    "DEFAULT_DOWNLOAD_URL",
    "DEFAULT_FETCH_TIMEOUT",
    "DOWNLOAD_CHUNK_SIZE",
    # Environment
    "ENV_DATABASE_PATH",
    "ENV_DOWNLOAD_URL",
    "ENV_FETCH_TIMEOUT",
    "ENV_CACHE_MAXSIZE",
    "ENV_PROVISIONING",
]

# ============================================================================
# SENTINELS
# ============================================================================

# CLDR "Unknown Region". Returned as the country when no geo signal exists.
UNKNOWN_COUNTRY: str = "ZZ"

# ============================================================================
# TABLE LIMITS
# ============================================================================

# Default languages kept per country. The dataset lists every language spoken
# in a territory; only the first two are strong enough to act on.
MAX_DEFAULT_LANGUAGES: int = 2

# ============================================================================
# GEO DATABASE
# ============================================================================

DEFAULT_DATABASE_FILENAME: str = "GeoLite2-City.mmdb"

COMPRESSED_SUFFIX: str = ".gz"

DEFAULT_DOWNLOAD_URL: str = (
    "http://geolite.maxmind.com/download/geoip/database/GeoLite2-City.mmdb.gz"
)

# Seconds. Bounds the network fetch and each external provisioning command.
DEFAULT_FETCH_TIMEOUT: float = 30.0

# Bytes per streamed download chunk (64 KiB).
DOWNLOAD_CHUNK_SIZE: int = 64 * 1024

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_DATABASE_PATH: str = "GEOLOCALE_DATABASE_PATH"
ENV_DOWNLOAD_URL: str = "GEOLOCALE_DOWNLOAD_URL"
ENV_FETCH_TIMEOUT: str = "GEOLOCALE_FETCH_TIMEOUT"
ENV_CACHE_MAXSIZE: str = "GEOLOCALE_CACHE_MAXSIZE"
ENV_PROVISIONING: str = "GEOLOCALE_PROVISIONING"
