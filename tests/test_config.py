"""Tests for GeoConfig validation and environment loading."""

from pathlib import Path

import pytest

from geolocale.config import GeoConfig
from geolocale.constants import DEFAULT_DOWNLOAD_URL, DEFAULT_FETCH_TIMEOUT
from geolocale.enums import ProvisioningMode


class TestGeoConfigDefaults:
    """Test default values."""

    def test_defaults(self) -> None:
        """Defaults point at the GeoLite2 City database in the working directory."""
        config = GeoConfig()
        assert config.database_path == Path("GeoLite2-City.mmdb")
        assert config.download_url == DEFAULT_DOWNLOAD_URL
        assert config.fetch_timeout == DEFAULT_FETCH_TIMEOUT
        assert config.cache_maxsize is None
        assert config.provisioning is ProvisioningMode.HTTP

    def test_frozen(self) -> None:
        """Configuration is immutable."""
        config = GeoConfig()
        with pytest.raises(AttributeError):
            config.fetch_timeout = 1.0  # type: ignore[misc]


class TestGeoConfigValidation:
    """Test __post_init__ validation and coercion."""

    def test_string_path_coerced(self) -> None:
        """A str database_path becomes a Path."""
        config = GeoConfig(database_path="/tmp/city.mmdb")  # type: ignore[arg-type]
        assert config.database_path == Path("/tmp/city.mmdb")

    def test_string_mode_coerced(self) -> None:
        """A str provisioning value becomes the enum member."""
        config = GeoConfig(provisioning="none")  # type: ignore[arg-type]
        assert config.provisioning is ProvisioningMode.NONE

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_non_positive_timeout(self, timeout: float) -> None:
        """fetch_timeout must be positive."""
        with pytest.raises(ValueError, match="fetch_timeout"):
            GeoConfig(fetch_timeout=timeout)

    @pytest.mark.parametrize("maxsize", [0, -5])
    def test_non_positive_maxsize(self, maxsize: int) -> None:
        """cache_maxsize must be positive or None."""
        with pytest.raises(ValueError, match="cache_maxsize"):
            GeoConfig(cache_maxsize=maxsize)

    def test_empty_url(self) -> None:
        """download_url must not be empty."""
        with pytest.raises(ValueError, match="download_url"):
            GeoConfig(download_url="")

    def test_unknown_mode(self) -> None:
        """Unknown provisioning names are rejected."""
        with pytest.raises(ValueError):
            GeoConfig(provisioning="ftp")  # type: ignore[arg-type]


class TestGeoConfigFromEnv:
    """Test GeoConfig.from_env()."""

    def test_empty_environment_gives_defaults(self) -> None:
        """Unset variables keep defaults."""
        assert GeoConfig.from_env({}) == GeoConfig()

    def test_all_variables(self) -> None:
        """Every variable maps to its field."""
        config = GeoConfig.from_env(
            {
                "GEOLOCALE_DATABASE_PATH": "/srv/geo/city.mmdb",
                "GEOLOCALE_DOWNLOAD_URL": "https://mirror.example/city.mmdb.gz",
                "GEOLOCALE_FETCH_TIMEOUT": "5",
                "GEOLOCALE_CACHE_MAXSIZE": "1000",
                "GEOLOCALE_PROVISIONING": " Command ",
            }
        )
        assert config.database_path == Path("/srv/geo/city.mmdb")
        assert config.download_url == "https://mirror.example/city.mmdb.gz"
        assert config.fetch_timeout == 5.0
        assert config.cache_maxsize == 1000
        assert config.provisioning is ProvisioningMode.COMMAND

    def test_empty_values_ignored(self) -> None:
        """Empty strings count as unset."""
        assert GeoConfig.from_env({"GEOLOCALE_FETCH_TIMEOUT": ""}) == GeoConfig()

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("GEOLOCALE_FETCH_TIMEOUT", "soon"),
            ("GEOLOCALE_CACHE_MAXSIZE", "1.5"),
            ("GEOLOCALE_PROVISIONING", "rsync"),
        ],
    )
    def test_malformed_values(self, name: str, value: str) -> None:
        """Malformed values name the offending variable."""
        with pytest.raises(ValueError, match=name):
            GeoConfig.from_env({name: value})

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without an explicit mapping, os.environ is used."""
        monkeypatch.setenv("GEOLOCALE_PROVISIONING", "none")
        assert GeoConfig.from_env().provisioning is ProvisioningMode.NONE
