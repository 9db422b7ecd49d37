"""On-demand provisioning of the geo database file.

Provides the protocol the resolver uses to obtain a database path, plus
three strategies:

    LocalDatabaseProvisioner - File must already exist (no I/O beyond stat)
    HttpDatabaseProvisioner - Download with httpx, decompress with gzip
    CommandDatabaseProvisioner - Download and decompress via wget/gunzip

When the database is missing, the archive strategies check for a local
compressed copy, fetch it if absent, and decompress it in place. Every
write goes to a temporary file in the target directory that is renamed
over the target only after the step completes, so an interrupted download
or a failed decompression never leaves a file that looks like a valid
database. Attempts are serialized per provisioner and file existence is
re-checked before each step, making provisioning idempotent.

Python 3.13+.
"""

from __future__ import annotations

import gzip
import logging
import os
import shutil
import subprocess
import tempfile
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol

import httpx

from geolocale.constants import (
    COMPRESSED_SUFFIX,
    DEFAULT_DOWNLOAD_URL,
    DEFAULT_FETCH_TIMEOUT,
    DOWNLOAD_CHUNK_SIZE,
)
from geolocale.enums import ProvisioningMode
from geolocale.errors import GeoDatabaseUnavailableError, ProvisioningError

if TYPE_CHECKING:
    from collections.abc import Generator

    from geolocale.config import GeoConfig

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DatabaseProvisioner",
    # Strategies
    "LocalDatabaseProvisioner",
    "HttpDatabaseProvisioner",
    "CommandDatabaseProvisioner",
    # Factory
    "make_provisioner",
]

logger = logging.getLogger(__name__)


class DatabaseProvisioner(Protocol):
    """Protocol for making the geo database available on local disk.

    Example:
        >>> class MountedVolume:
        ...     database_path = Path("/mnt/geo/GeoLite2-City.mmdb")
        ...     def ensure_available(self, timeout: float | None = None) -> Path:
        ...         return self.database_path
    """

    @property
    def database_path(self) -> Path:
        """Final location of the database file."""
        ...

    def ensure_available(self, timeout: float | None = None) -> Path:
        """Return the database path, provisioning the file first if needed.

        Args:
            timeout: Seconds allowed for blocking steps. None uses the
                provisioner's configured default.

        Returns:
            Path of an existing database file

        Raises:
            GeoDatabaseUnavailableError: If the file is absent and could not
                be provisioned
        """
        ...


@contextmanager
def _atomic_write(target: Path) -> Generator[BinaryIO]:
    """Write to a temporary sibling of target, renamed over it on success.

    The temporary file is deleted if the body raises.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".part"
    )
    tmp_path = Path(tmp_name)
    committed = False
    try:
        with os.fdopen(fd, "wb") as fh:
            yield fh
        os.replace(tmp_path, target)
        committed = True
    finally:
        if not committed:
            tmp_path.unlink(missing_ok=True)


class LocalDatabaseProvisioner:
    """Provisioner for deployments that ship the database file themselves."""

    __slots__ = ("_database_path",)

    def __init__(self, database_path: Path) -> None:
        self._database_path = Path(database_path)

    @property
    def database_path(self) -> Path:
        """Final location of the database file."""
        return self._database_path

    def ensure_available(self, timeout: float | None = None) -> Path:  # noqa: ARG002
        """Return the database path if the file exists.

        Raises:
            GeoDatabaseUnavailableError: If the file does not exist
        """
        if self._database_path.is_file():
            return self._database_path
        msg = f"Geo database {self._database_path} does not exist"
        raise GeoDatabaseUnavailableError(msg, path=str(self._database_path))


class _ArchiveProvisioner(ABC):
    """Shared flow for provisioners that fetch and unpack a .gz archive.

    Subclasses implement _download() and _decompress().
    """

    __slots__ = ("_database_path", "_download_url", "_lock", "_timeout")

    def __init__(
        self,
        database_path: Path,
        download_url: str = DEFAULT_DOWNLOAD_URL,
        *,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
    ) -> None:
        """Initialize provisioner.

        Args:
            database_path: Final location of the .mmdb file
            download_url: Remote source of the gzip-compressed database
            timeout: Default seconds allowed for each blocking step

        Raises:
            ValueError: If timeout is not positive
        """
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        self._database_path = Path(database_path)
        self._download_url = download_url
        self._timeout = timeout
        self._lock = threading.Lock()

    @property
    def database_path(self) -> Path:
        """Final location of the database file."""
        return self._database_path

    @property
    def compressed_path(self) -> Path:
        """Location of the downloaded archive (database path + '.gz')."""
        return self._database_path.with_name(self._database_path.name + COMPRESSED_SUFFIX)

    @property
    def download_url(self) -> str:
        """Remote source of the compressed database."""
        return self._download_url

    def ensure_available(self, timeout: float | None = None) -> Path:
        """Return the database path, downloading and decompressing if missing.

        Args:
            timeout: Seconds allowed for each blocking step. None uses the
                timeout given at construction.

        Returns:
            Path of the database file

        Raises:
            ProvisioningError: If the download or decompression fails
        """
        effective_timeout = self._timeout if timeout is None else timeout
        database = self._database_path
        archive = self.compressed_path

        with self._lock:
            if database.is_file():
                return database

            logger.info("%s does not exist. Checking for %s", database, archive.name)
            if not archive.is_file():
                logger.info("%s does not exist. Downloading %s", archive, self._download_url)
                self._download(archive, effective_timeout)
            if not archive.is_file():
                msg = f"Could not download {archive}"
                raise ProvisioningError(msg, path=str(database), step="download")

            logger.info("Decompressing %s", archive)
            self._decompress(archive, database, effective_timeout)
            if not database.is_file():
                msg = f"Could not decompress {archive}"
                raise ProvisioningError(msg, path=str(database), step="decompress")

            archive.unlink(missing_ok=True)
            logger.info("Geo database provisioned at %s", database)
            return database

    @abstractmethod
    def _download(self, archive: Path, timeout: float) -> None:
        """Fetch the archive to the given path or raise ProvisioningError."""

    @abstractmethod
    def _decompress(self, archive: Path, database: Path, timeout: float) -> None:
        """Unpack the archive to the database path or raise ProvisioningError."""

    def _fail(self, step: str, archive: Path, error: Exception) -> ProvisioningError:
        """Log a failed step and build the error to raise.

        A corrupt archive is removed so the next attempt fetches a fresh copy.
        """
        if step == "decompress":
            archive.unlink(missing_ok=True)
        logger.warning("Provisioning step '%s' failed for %s: %s", step, archive, error)
        msg = f"Could not {step} {archive}: {error}"
        return ProvisioningError(msg, path=str(self._database_path), step=step)


class HttpDatabaseProvisioner(_ArchiveProvisioner):
    """Provisioner that downloads with httpx and decompresses with gzip.

    Example:
        >>> provisioner = HttpDatabaseProvisioner(Path("GeoLite2-City.mmdb"), timeout=10.0)
        >>> path = provisioner.ensure_available()
    """

    __slots__ = ("_transport",)

    def __init__(
        self,
        database_path: Path,
        download_url: str = DEFAULT_DOWNLOAD_URL,
        *,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize provisioner.

        Args:
            database_path: Final location of the .mmdb file
            download_url: Remote source of the gzip-compressed database
            timeout: Default seconds allowed for the download
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        super().__init__(database_path, download_url, timeout=timeout)
        self._transport = transport

    def _download(self, archive: Path, timeout: float) -> None:
        # httpx timeouts apply per network operation; the deadline bounds the
        # whole transfer.
        deadline = time.monotonic() + timeout
        try:
            with (
                httpx.Client(
                    timeout=timeout, follow_redirects=True, transport=self._transport
                ) as client,
                client.stream("GET", self._download_url) as response,
            ):
                response.raise_for_status()
                with _atomic_write(archive) as fh:
                    for chunk in response.iter_bytes(DOWNLOAD_CHUNK_SIZE):
                        if time.monotonic() > deadline:
                            msg = f"download exceeded {timeout:g}s"
                            raise TimeoutError(msg)
                        fh.write(chunk)
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            raise self._fail("download", archive, e) from e

    def _decompress(self, archive: Path, database: Path, timeout: float) -> None:  # noqa: ARG002
        try:
            with gzip.open(archive, "rb") as src, _atomic_write(database) as dst:
                shutil.copyfileobj(src, dst, DOWNLOAD_CHUNK_SIZE)
        except (OSError, EOFError) as e:
            # gzip.BadGzipFile is an OSError; truncated archives raise EOFError
            raise self._fail("decompress", archive, e) from e


class CommandDatabaseProvisioner(_ArchiveProvisioner):
    """Provisioner that shells out to external download/decompress tools.

    Both commands must write their result to stdout: the URL is appended to
    the download command, the archive path to the decompress command.
    """

    __slots__ = ("_decompress_command", "_download_command")

    def __init__(
        self,
        database_path: Path,
        download_url: str = DEFAULT_DOWNLOAD_URL,
        *,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        download_command: Sequence[str] = ("wget", "-q", "-O", "-"),
        decompress_command: Sequence[str] = ("gunzip", "-c"),
    ) -> None:
        """Initialize provisioner.

        Args:
            database_path: Final location of the .mmdb file
            download_url: Remote source of the gzip-compressed database
            timeout: Default seconds allowed for each command
            download_command: Argv prefix; the URL is appended
            decompress_command: Argv prefix; the archive path is appended
        """
        super().__init__(database_path, download_url, timeout=timeout)
        self._download_command = tuple(download_command)
        self._decompress_command = tuple(decompress_command)

    def _run_to(self, target: Path, argv: list[str], timeout: float) -> None:
        with _atomic_write(target) as fh:
            subprocess.run(  # noqa: S603
                argv, stdout=fh, stderr=subprocess.PIPE, check=True, timeout=timeout
            )

    def _download(self, archive: Path, timeout: float) -> None:
        argv = [*self._download_command, self._download_url]
        try:
            self._run_to(archive, argv, timeout)
        except (subprocess.SubprocessError, OSError) as e:
            raise self._fail("download", archive, e) from e

    def _decompress(self, archive: Path, database: Path, timeout: float) -> None:
        argv = [*self._decompress_command, str(archive)]
        try:
            self._run_to(database, argv, timeout)
        except (subprocess.SubprocessError, OSError) as e:
            raise self._fail("decompress", archive, e) from e


def make_provisioner(config: GeoConfig) -> DatabaseProvisioner:
    """Build the provisioner selected by config.provisioning."""
    match config.provisioning:
        case ProvisioningMode.HTTP:
            return HttpDatabaseProvisioner(
                config.database_path, config.download_url, timeout=config.fetch_timeout
            )
        case ProvisioningMode.COMMAND:
            return CommandDatabaseProvisioner(
                config.database_path, config.download_url, timeout=config.fetch_timeout
            )
        case ProvisioningMode.NONE:
            return LocalDatabaseProvisioner(config.database_path)
        case _:  # pragma: no cover
            msg = f"Unknown provisioning mode: {config.provisioning}"
            raise ValueError(msg)
