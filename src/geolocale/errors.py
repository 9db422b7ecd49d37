"""Exception hierarchy for locale resolution.

Only DatasetError is fatal: it is raised while the country language table is
built and stops start-up. Every other error is raised by a collaborator
(header parser, geo resolver, provisioner) and absorbed by the resolution
engine into a well-defined fallback value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "DatasetError",
    "GeoDatabaseUnavailableError",
    "GeoLocaleError",
    "GeoLookupError",
    "GeoResolutionError",
    "HeaderParseError",
    "ProvisioningError",
]


class GeoLocaleError(Exception):
    """Base exception for all geolocale errors."""


class DatasetError(GeoLocaleError):
    """Embedded country reference dataset could not be parsed.

    There is no sensible fallback for an empty country language table,
    so this error is not caught anywhere inside the library.

    Attributes:
        line: 1-based source line where parsing failed (0 if unknown)
    """

    def __init__(self, message: str, *, line: int = 0) -> None:
        """Initialize DatasetError.

        Args:
            message: Error description
            line: 1-based source line where parsing failed (0 if unknown)
        """
        super().__init__(message)
        self.line = line


class HeaderParseError(GeoLocaleError):
    """Accept-Language header (or comma-joined tag list) is malformed.

    Fallback: the caller treats the header as declaring no languages.

    Attributes:
        header: The raw value that failed to parse
        tag: The offending tag within the header, if one was isolated
    """

    def __init__(self, message: str, *, header: str = "", tag: str = "") -> None:
        super().__init__(message)
        self.header = header
        self.tag = tag


class GeoResolutionError(GeoLocaleError):
    """Address could not be mapped to a location.

    Fallback: the caller uses the unknown-region sentinel "ZZ".
    """


class GeoDatabaseUnavailableError(GeoResolutionError):
    """Geo database file is absent and could not be provisioned.

    Attributes:
        path: Database path that was expected to exist
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class ProvisioningError(GeoDatabaseUnavailableError):
    """A provisioning step (fetch or decompress) failed.

    Attributes:
        path: Database path being provisioned
        step: Failed step name ('download' or 'decompress')
    """

    def __init__(self, message: str, *, path: str = "", step: str = "") -> None:
        super().__init__(message, path=path)
        self.step = step


class GeoLookupError(GeoResolutionError):
    """Lookup failed: address not found, invalid, or database unreadable.

    Attributes:
        address: The address that was looked up (empty if not applicable)
    """

    def __init__(self, message: str, *, address: str = "") -> None:
        super().__init__(message)
        self.address = address
