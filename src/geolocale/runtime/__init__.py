"""Locale resolution runtime.

Provides the resolution engine, its per-address geo language cache and the
readers-writer lock guarding that cache.

Python 3.13+.
"""

from .cache import AddressResolver, GeoLanguageCache, GeoLanguages
from .resolver import LocaleResolver, ResolvedLocale, merge_languages
from .rwlock import RWLock

__all__ = [
    "AddressResolver",
    "GeoLanguageCache",
    "GeoLanguages",
    "LocaleResolver",
    "RWLock",
    "ResolvedLocale",
    "merge_languages",
]
