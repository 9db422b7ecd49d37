"""Hypothesis strategies for geolocale property-based testing.

Usage:
    from tests.strategies import language_tags, accept_language_headers
    from tests.strategies.addresses import ipv4_addresses, host_port_pairs
"""

from .addresses import (
    bracketed_host_ports,
    host_port_pairs,
    ipv4_addresses,
    ipv6_addresses,
    ports,
)
from .iso_codes import all_alpha2_codes, table_country_codes
from .tags import (
    GENERIC_LANGUAGES,
    REGIONS,
    accept_language_headers,
    generic_tags,
    language_tags,
    quality_values,
    region_tags,
)

__all__ = [
    "GENERIC_LANGUAGES",
    "REGIONS",
    "accept_language_headers",
    "all_alpha2_codes",
    "bracketed_host_ports",
    "generic_tags",
    "host_port_pairs",
    "ipv4_addresses",
    "ipv6_addresses",
    "language_tags",
    "ports",
    "quality_values",
    "region_tags",
    "table_country_codes",
]
