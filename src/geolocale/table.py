"""Country to default languages table.

Builds, once per process, an immutable mapping from ISO 3166-1 alpha-2
country code to at most two default language tags, parsed from the embedded
reference dataset. A dataset that cannot be parsed is fatal: there is no
sensible fallback for an empty table.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import csv
import functools
import io
import logging
from collections.abc import Mapping
from types import MappingProxyType

from geolocale._dataset import COUNTRY_INFO
from geolocale.constants import MAX_DEFAULT_LANGUAGES
from geolocale.errors import DatasetError

__all__ = [
    "CountryCode",
    "CountryLanguageTable",
    "build_country_language_table",
    "default_country_table",
    "lookup_country_languages",
]

logger = logging.getLogger(__name__)

type CountryCode = str
"""ISO 3166-1 alpha-2 country code (e.g., 'US', 'DE')."""

type CountryLanguageTable = Mapping[CountryCode, tuple[str, ...]]
"""Read-only country code -> default language tags (0 to 2, most preferred first)."""


def build_country_language_table(source: str = COUNTRY_INFO) -> CountryLanguageTable:
    """Parse a country info dataset into a read-only language table.

    The language field is the last column of each row, a comma-joined list
    quoted when it holds more than one tag. Only the first two tags are kept,
    in source order. No validation is performed beyond the split: a row with
    a malformed language column is stored with whatever the split yields.

    Args:
        source: CSV text, one row per territory. Blank lines are ignored.

    Returns:
        Immutable mapping (MappingProxyType) of country code to tags

    Raises:
        DatasetError: If the CSV is malformed or rows disagree on column count

    Example:
        >>> row = 'US,United States,NA,.us,USD,Dollar,"en-US,es-US,haw,fr"'
        >>> build_country_language_table(row)["US"]
        ('en-US', 'es-US')
    """
    reader = csv.reader(io.StringIO(source), strict=True)
    table: dict[CountryCode, tuple[str, ...]] = {}
    expected_fields: int | None = None

    try:
        for row in reader:
            if not row:
                continue
            if expected_fields is None:
                expected_fields = len(row)
            elif len(row) != expected_fields:
                msg = (
                    f"Line {reader.line_num}: expected {expected_fields} fields, "
                    f"got {len(row)}"
                )
                raise DatasetError(msg, line=reader.line_num)
            languages = row[-1].split(",")
            table[row[0]] = tuple(languages[:MAX_DEFAULT_LANGUAGES])
    except csv.Error as e:
        logger.error("Country dataset is malformed at line %d: %s", reader.line_num, e)
        msg = f"Line {reader.line_num}: {e}"
        raise DatasetError(msg, line=reader.line_num) from e

    if not table:
        msg = "Country dataset contains no rows"
        raise DatasetError(msg)

    return MappingProxyType(table)


@functools.lru_cache(maxsize=1)
def default_country_table() -> CountryLanguageTable:
    """Return the table built from the embedded dataset.

    Built on first call and shared for the process lifetime.

    Raises:
        DatasetError: If the embedded dataset is malformed
    """
    table = build_country_language_table()
    logger.debug("Country language table built with %d territories", len(table))
    return table


def lookup_country_languages(
    table: CountryLanguageTable, country_code: CountryCode
) -> tuple[str, ...] | None:
    """Look up default languages, uppercasing the code first.

    Returns:
        Tags for the country, or None if the table has no entry

    Example:
        >>> lookup_country_languages(default_country_table(), "de")
        ('de',)
    """
    return table.get(country_code.upper())
