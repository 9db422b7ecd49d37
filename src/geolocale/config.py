"""Configuration for the geo resolution stack.

Provides a single frozen dataclass that encapsulates every tunable of the
resolver: where the geo database lives, how it is provisioned, how long
network operations may block, and whether the per-address cache is bounded.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from geolocale.constants import (
    DEFAULT_DATABASE_FILENAME,
    DEFAULT_DOWNLOAD_URL,
    DEFAULT_FETCH_TIMEOUT,
    ENV_CACHE_MAXSIZE,
    ENV_DATABASE_PATH,
    ENV_DOWNLOAD_URL,
    ENV_FETCH_TIMEOUT,
    ENV_PROVISIONING,
)
from geolocale.enums import ProvisioningMode

__all__ = ["GeoConfig"]


@dataclass(frozen=True, slots=True)
class GeoConfig:
    """Immutable configuration for LocaleResolver and GeoResolver.

    All fields have sensible defaults; ``GeoConfig()`` looks for
    ``GeoLite2-City.mmdb`` in the working directory and downloads it over
    HTTP if missing.

    Attributes:
        database_path: Location of the MaxMind .mmdb database.
        download_url: Remote source of the gzip-compressed database.
        fetch_timeout: Seconds allowed for the download and for each external
            provisioning command (default: 30.0).
        cache_maxsize: Maximum cached addresses. None (default) keeps the
            cache unbounded for the process lifetime.
        provisioning: Strategy used when the database file is missing.

    Example:
        >>> config = GeoConfig(database_path=Path("/var/lib/geo/city.mmdb"))
        >>> config.provisioning
        <ProvisioningMode.HTTP: 'http'>

    Example - Read-only deployment:
        >>> config = GeoConfig(provisioning=ProvisioningMode.NONE, cache_maxsize=100_000)
    """

    database_path: Path = field(default_factory=lambda: Path(DEFAULT_DATABASE_FILENAME))
    download_url: str = DEFAULT_DOWNLOAD_URL
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    cache_maxsize: int | None = None
    provisioning: ProvisioningMode = ProvisioningMode.HTTP

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If fetch_timeout is not positive, cache_maxsize is not
                positive, download_url is empty, or provisioning is unknown.
        """
        if not isinstance(self.database_path, Path):
            object.__setattr__(self, "database_path", Path(self.database_path))
        if self.fetch_timeout <= 0:
            msg = "fetch_timeout must be positive"
            raise ValueError(msg)
        if self.cache_maxsize is not None and self.cache_maxsize <= 0:
            msg = "cache_maxsize must be positive or None"
            raise ValueError(msg)
        if not self.download_url:
            msg = "download_url must not be empty"
            raise ValueError(msg)
        # Raises ValueError for unknown strategy names
        object.__setattr__(self, "provisioning", ProvisioningMode(self.provisioning))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GeoConfig:
        """Build configuration from environment variables.

        Unset or empty variables keep the field default.

        Variables:
            GEOLOCALE_DATABASE_PATH: database_path
            GEOLOCALE_DOWNLOAD_URL: download_url
            GEOLOCALE_FETCH_TIMEOUT: fetch_timeout (float seconds)
            GEOLOCALE_CACHE_MAXSIZE: cache_maxsize (int)
            GEOLOCALE_PROVISIONING: provisioning ('http', 'command', 'none')

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Validated GeoConfig

        Raises:
            ValueError: If a variable holds a malformed value

        Example:
            >>> GeoConfig.from_env({"GEOLOCALE_FETCH_TIMEOUT": "5"}).fetch_timeout
            5.0
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if value := env.get(ENV_DATABASE_PATH):
            kwargs["database_path"] = Path(value)
        if value := env.get(ENV_DOWNLOAD_URL):
            kwargs["download_url"] = value
        if value := env.get(ENV_FETCH_TIMEOUT):
            try:
                kwargs["fetch_timeout"] = float(value)
            except ValueError as e:
                msg = f"{ENV_FETCH_TIMEOUT} must be a number, got {value!r}"
                raise ValueError(msg) from e
        if value := env.get(ENV_CACHE_MAXSIZE):
            try:
                kwargs["cache_maxsize"] = int(value)
            except ValueError as e:
                msg = f"{ENV_CACHE_MAXSIZE} must be an integer, got {value!r}"
                raise ValueError(msg) from e
        if value := env.get(ENV_PROVISIONING):
            try:
                kwargs["provisioning"] = ProvisioningMode(value.strip().lower())
            except ValueError as e:
                choices = ", ".join(mode.value for mode in ProvisioningMode)
                msg = f"{ENV_PROVISIONING} must be one of {choices}, got {value!r}"
                raise ValueError(msg) from e

        return cls(**kwargs)  # type: ignore[arg-type]
