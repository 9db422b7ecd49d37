"""Language tag utilities.

Centralizes language tag handling used throughout the codebase:
canonical spelling (so "en-us" from a browser and "en-US" from the country
table compare equal), the generic/region-specific relation used by the
specificity dedupe, and Accept-Language parsing.

Header syntax is delegated to Werkzeug and locale grammar to Babel. Only
subtag well-formedness is checked here, before Babel sees a tag.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re

from babel.core import get_locale_identifier, parse_locale
from werkzeug.datastructures import LanguageAccept
from werkzeug.http import parse_accept_header

from geolocale.errors import HeaderParseError

__all__ = [
    "LanguageTag",
    "canonicalize_tag",
    "generic_prefix",
    "is_region_specific",
    "parse_accept_language",
]

logger = logging.getLogger(__name__)

type LanguageTag = str
"""BCP-47 style language tag (e.g., 'en', 'en-US', 'zh-Hant-TW')."""

_WILDCARD = "*"

_SUBTAG_PATTERN = re.compile(r"[A-Za-z0-9]{1,8}")

_CANONICAL_PATTERN = re.compile(r"[a-z]{2,8}(?:-[A-Za-z0-9]{1,8})*")

# Irregular ("i-default") and private-use ("x-klingon") tags
_IRREGULAR_PREFIXES = frozenset({"i", "x"})


@functools.lru_cache(maxsize=512)
def canonicalize_tag(tag: str) -> LanguageTag:
    """Return the canonical hyphenated spelling of a language tag.

    Language subtag lowercased, script titlecased, region uppercased.
    Underscore separators (POSIX style) are accepted on input.

    Well-formed tags that Babel's locale grammar does not cover are reduced
    to the part it does:
    - Extension and private-use sections (from the first single-character
      subtag on) are dropped: "en-US-u-ca-gregory" -> "en-US".
    - An extended language subtag replaces its prefix: "zh-yue-HK" -> "yue-HK".
    - Irregular "i-" and private-use "x-" tags are only lowercased.

    Thread-safe via lru_cache internal locking.

    Args:
        tag: Language tag in any case, hyphen or underscore separated

    Returns:
        Canonical tag

    Raises:
        HeaderParseError: If the tag is not a well-formed language tag
            (including header parameters, "@" modifiers and "." charsets)

    Example:
        >>> canonicalize_tag("en-us")
        'en-US'
        >>> canonicalize_tag("zh_hant_tw")
        'zh-Hant-TW'
        >>> canonicalize_tag("sr-Latn-RS-u-nu-latn")
        'sr-Latn-RS'
    """
    subtags = tag.strip().replace("_", "-").split("-")
    if not all(_SUBTAG_PATTERN.fullmatch(subtag) for subtag in subtags):
        raise _invalid_tag(tag, "subtags must be 1 to 8 letters or digits")

    primary, rest = subtags[0].lower(), subtags[1:]
    if len(primary) == 1:
        if primary not in _IRREGULAR_PREFIXES or not rest:
            raise _invalid_tag(tag, "tag cannot start with a singleton")
        return "-".join([primary, *(subtag.lower() for subtag in rest)])
    if not primary.isalpha():
        raise _invalid_tag(tag, "language subtag must be letters")

    for index, subtag in enumerate(rest):
        if len(subtag) == 1:
            if index == len(rest) - 1:
                raise _invalid_tag(tag, f"singleton {subtag!r} has no subtags")
            rest = rest[:index]
            break

    if len(primary) <= 3 and rest and len(rest[0]) == 3 and rest[0].isalpha():
        primary, rest = rest[0].lower(), rest[1:]

    try:
        lang, territory, script, variant, *_ = parse_locale("-".join([primary, *rest]), sep="-")
    except ValueError as e:
        raise _invalid_tag(tag, str(e)) from e
    canonical = get_locale_identifier(
        (lang, territory, script, variant.lower() if variant else None), sep="-"
    )
    if not _CANONICAL_PATTERN.fullmatch(canonical):
        raise _invalid_tag(tag, f"unexpected canonical form {canonical!r}")
    return canonical


def _invalid_tag(tag: str, reason: str) -> HeaderParseError:
    msg = f"Invalid language tag {tag!r}: {reason}"
    return HeaderParseError(msg, tag=tag)


def generic_prefix(tag: LanguageTag) -> LanguageTag:
    """Return the substring before the first hyphen.

    Example:
        >>> generic_prefix("en-US")
        'en'
        >>> generic_prefix("fr")
        'fr'
    """
    return tag.partition("-")[0]


def is_region_specific(tag: LanguageTag) -> bool:
    """True if the tag carries any subtag after the language."""
    return "-" in tag


def parse_accept_language(header: str | None) -> list[LanguageTag]:
    """Parse an Accept-Language value into canonical tags, best first.

    Entries are ordered by quality, highest first; entries of equal quality
    keep header order. Wildcards and entries with ``q=0`` are dropped.

    Parsing is all-or-nothing: one malformed tag rejects the whole value,
    so callers never act on a partially understood header. An entry carrying
    parameters other than ``q`` is malformed.

    The country table stores its comma-joined default languages in the same
    syntax, so the geo path parses table entries with this function too.

    Args:
        header: Raw header value; None or blank yields an empty list

    Returns:
        Canonical tags in preference order

    Raises:
        HeaderParseError: If any listed tag is malformed

    Example:
        >>> parse_accept_language("fr;q=0.5, en-us")
        ['en-US', 'fr']
    """
    if header is None or not header.strip():
        return []

    accept = parse_accept_header(header, LanguageAccept)
    tags: list[LanguageTag] = []
    for value, quality in accept:
        if value == _WILDCARD or quality <= 0:
            continue
        try:
            tags.append(canonicalize_tag(value))
        except HeaderParseError as e:
            logger.debug("Rejecting Accept-Language %r: %s", header, e)
            raise HeaderParseError(str(e), header=header, tag=e.tag) from e
    return tags
