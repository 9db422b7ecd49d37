"""Enumerations for geolocale type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so configuration values read from
the environment compare equal to members without conversion.

Python 3.13+.
"""

from enum import StrEnum


class ProvisioningMode(StrEnum):
    """How a missing geo database is obtained.

    StrEnum provides automatic string conversion: str(ProvisioningMode.HTTP) == "http"
    """

    HTTP = "http"
    """Download the compressed database with httpx and gunzip it in-process."""

    COMMAND = "command"
    """Run external wget and gunzip commands."""

    NONE = "none"
    """Never provision; the database file must already exist."""


__all__ = [
    "ProvisioningMode",
]
