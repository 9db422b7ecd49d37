"""Quickstart example for geolocale.

This example demonstrates resolving a request's country and preferred
languages from the peer address and the Accept-Language header.

Note: The first four examples use an in-memory geo resolver so they run
offline. Example 5 uses the real GeoLite2 database and downloads it on first
use unless GEOLOCALE_PROVISIONING=none is set.
"""

import ipaddress
import logging

from geolocale import (
    GeoConfig,
    GeoLookupError,
    LocaleResolver,
    LocationRecord,
    parse_accept_language,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


class DemoGeoResolver:
    """Answers from a fixed table instead of a GeoIP2 database."""

    COUNTRIES = {"81.2.69.142": "GB", "5.9.0.1": "DE", "2001:db8::1": "CH"}

    def resolve(self, address: ipaddress.IPv4Address | ipaddress.IPv6Address) -> LocationRecord:
        code = self.COUNTRIES.get(str(address))
        if code is None:
            raise GeoLookupError(f"{address} not found", address=str(address))
        return LocationRecord(str(address), code)


resolver = LocaleResolver(DemoGeoResolver())

# Example 1: Browser and geo signals combined
print("=" * 50)
print("Example 1: Browser + Geo")
print("=" * 50)

country, languages = resolver.resolve("5.9.0.1:51234", "en-US,en;q=0.5")
print(country, languages)
# Output: DE ('en-US', 'de')

# Example 2: Region-specific tags replace generic ones
print("\n" + "=" * 50)
print("Example 2: Specificity")
print("=" * 50)

country, languages = resolver.resolve("81.2.69.142:443", "en")
print(country, languages)
# Output: GB ('en-GB', 'cy-GB')

country, languages = resolver.resolve("[2001:db8::1]:8443", "fr")
print(country, languages)
# Output: CH ('de-CH', 'fr-CH')

# Example 3: Degradation
print("\n" + "=" * 50)
print("Example 3: Unknown Peer, Malformed Header")
print("=" * 50)

print(resolver.resolve("192.0.2.1:80", "pt-BR"))
# Output: ResolvedLocale(country='ZZ', languages=('pt-BR',))
print(resolver.resolve("5.9.0.1:80", "en-US, 123"))
# Output: ResolvedLocale(country='DE', languages=('de',))
print(parse_accept_language("fr;q=0.5, de-at"))
# Output: ['de-AT', 'fr']

# Example 4: Picking a supported locale
print("\n" + "=" * 50)
print("Example 4: Negotiation")
print("=" * 50)

result = resolver.resolve("5.9.0.1:80", "de-AT, en;q=0.3")
print(result.best_match(["en", "de", "fr"]))
# Output: de
print(resolver.cache.get_stats())

# Example 5: Real GeoLite2 database
print("\n" + "=" * 50)
print("Example 5: GeoLite2")
print("=" * 50)

with LocaleResolver.from_config(GeoConfig.from_env()) as live:
    print(live.resolve("81.2.69.142:443", "en-US"))
    # Output (database present): ResolvedLocale(country='GB', languages=('en-US', 'en-GB', 'cy-GB'))
    # Output (database unavailable): ResolvedLocale(country='ZZ', languages=('en-US',))

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
