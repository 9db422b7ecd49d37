"""Geo resolution: network address to location record.

Exports:
    GeoResolver: Provision, open and query the geo database
    LocationRecord: Result of a single lookup
    GeoDatabase, GeoIP2Database: Database handle protocol and MaxMind backend
    DatabaseProvisioner and strategies: Make the database file available

Python 3.13+.
"""

from .database import (
    DatabaseOpener,
    GeoDatabase,
    GeoIP2Database,
    IPAddress,
    open_geoip2_database,
)
from .provisioning import (
    CommandDatabaseProvisioner,
    DatabaseProvisioner,
    HttpDatabaseProvisioner,
    LocalDatabaseProvisioner,
    make_provisioner,
)
from .record import LocationRecord
from .resolver import GeoResolver

__all__ = [
    "CommandDatabaseProvisioner",
    "DatabaseOpener",
    "DatabaseProvisioner",
    "GeoDatabase",
    "GeoIP2Database",
    "GeoResolver",
    "HttpDatabaseProvisioner",
    "IPAddress",
    "LocalDatabaseProvisioner",
    "LocationRecord",
    "make_provisioner",
    "open_geoip2_database",
]
