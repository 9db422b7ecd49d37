"""Tests for language tag canonicalization and Accept-Language parsing.

Tests verify:
- Canonical spelling of language, script and region subtags
- Generic/region-specific relation used by the dedupe
- Quality ordering, wildcard and q=0 handling
- All-or-nothing rejection of malformed headers
"""

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from geolocale.errors import HeaderParseError
from geolocale.tags import (
    canonicalize_tag,
    generic_prefix,
    is_region_specific,
    parse_accept_language,
)
from tests.strategies.tags import accept_language_headers, language_tags, quality_values


class TestCanonicalizeTag:
    """Test canonical tag spelling."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("en", "en"),
            ("EN", "en"),
            ("en-us", "en-US"),
            ("en-US", "en-US"),
            ("EN_us", "en-US"),
            ("zh-hant-tw", "zh-Hant-TW"),
            ("sr-latn", "sr-Latn"),
            (" de-at ", "de-AT"),
            ("es-419", "es-419"),
            ("de-de-1996", "de-DE-1996"),
        ],
    )
    def test_canonical_spelling(self, raw: str, expected: str) -> None:
        """Case and separators are normalized."""
        assert canonicalize_tag(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("en-US-u-ca-gregory", "en-US"),
            ("en-US-x-twain", "en-US"),
            ("sr-Latn-RS-u-nu-latn", "sr-Latn-RS"),
            ("de-DE-1996-t-en", "de-DE-1996"),
        ],
    )
    def test_extension_sections_dropped(self, raw: str, expected: str) -> None:
        """Everything from the first singleton subtag on is discarded."""
        assert canonicalize_tag(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("zh-yue-HK", "yue-HK"), ("zh-cmn-Hans-CN", "cmn-Hans-CN"), ("ar-AEB", "aeb")],
    )
    def test_extended_language_replaces_prefix(self, raw: str, expected: str) -> None:
        """An extlang subtag is used as the language in preferred form."""
        assert canonicalize_tag(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("i-default", "i-default"), ("I-Klingon", "i-klingon"), ("x-klingon", "x-klingon")],
    )
    def test_irregular_and_private_use_lowercased(self, raw: str, expected: str) -> None:
        """i- and x- tags have no region to uppercase."""
        assert canonicalize_tag(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "123",
            "en-US-x",
            "",
            "e n",
            "en-US; foo=bar",
            "en@euro",
            "en.UTF-8",
            "en_US.UTF-8@euro",
            "x",
            "q-abc",
            "en--US",
            "en-toolongsubtag",
        ],
    )
    def test_invalid_tag_raises(self, raw: str) -> None:
        """Malformed tags raise HeaderParseError naming the input."""
        with pytest.raises(HeaderParseError) as exc_info:
            canonicalize_tag(raw)
        assert exc_info.value.tag == raw

    @given(tag=language_tags)
    def test_canonical_tags_are_fixed_points(self, tag: str) -> None:
        """Canonicalizing a canonical tag returns it unchanged."""
        event(f"region_specific={is_region_specific(tag)}")
        assert canonicalize_tag(tag) == tag
        assert canonicalize_tag(tag.lower()) == tag


class TestGenericPrefix:
    """Test the generic/region-specific relation."""

    @pytest.mark.parametrize(
        ("tag", "prefix", "specific"),
        [
            ("en-US", "en", True),
            ("en", "en", False),
            ("zh-Hant-TW", "zh", True),
            ("es-419", "es", True),
        ],
    )
    def test_prefix_and_specificity(self, tag: str, prefix: str, specific: bool) -> None:
        """Prefix is the text before the first hyphen."""
        assert generic_prefix(tag) == prefix
        assert is_region_specific(tag) is specific


class TestParseAcceptLanguage:
    """Test Accept-Language parsing."""

    @pytest.mark.parametrize("header", [None, "", "   "])
    def test_absent_header_is_empty(self, header: str | None) -> None:
        """Missing or blank header declares no languages."""
        assert parse_accept_language(header) == []

    def test_single_tag(self) -> None:
        """Single entry is canonicalized."""
        assert parse_accept_language("en-us") == ["en-US"]

    def test_quality_ordering(self) -> None:
        """Entries are sorted by quality, highest first."""
        header = "fr;q=0.5, de;q=0.9, en-US"
        assert parse_accept_language(header) == ["en-US", "de", "fr"]

    def test_equal_quality_keeps_header_order(self) -> None:
        """Ties keep the order in which the browser listed them."""
        assert parse_accept_language("pt-BR,pt,en") == ["pt-BR", "pt", "en"]

    def test_duplicates_are_kept(self) -> None:
        """Parser reports every entry; de-duplication happens later."""
        assert parse_accept_language("en,EN") == ["en", "en"]

    def test_wildcard_dropped(self) -> None:
        """The '*' entry names no language."""
        assert parse_accept_language("de, *;q=0.1") == ["de"]

    def test_zero_quality_dropped(self) -> None:
        """q=0 means 'not acceptable'."""
        assert parse_accept_language("en-US, fr;q=0") == ["en-US"]

    def test_malformed_tag_rejects_whole_header(self) -> None:
        """One bad tag makes the whole value unusable."""
        with pytest.raises(HeaderParseError) as exc_info:
            parse_accept_language("en-US, 123, fr")
        assert exc_info.value.header == "en-US, 123, fr"
        assert exc_info.value.tag == "123"

    def test_country_table_syntax(self) -> None:
        """Comma-joined table entries parse in the same syntax."""
        assert parse_accept_language("he,ar-IL") == ["he", "ar-IL"]

    def test_extra_parameters_reject_header(self) -> None:
        """Parameters other than q are not silently folded into the tag."""
        with pytest.raises(HeaderParseError) as exc_info:
            parse_accept_language("en-US;q=0.9;foo=bar")
        assert exc_info.value.header == "en-US;q=0.9;foo=bar"

    def test_extension_tag_keeps_rest_of_header(self) -> None:
        """A tag with a Unicode extension still parses, reduced to its locale."""
        assert parse_accept_language("en-US-u-ca-gregory,fr;q=0.9") == ["en-US", "fr"]

    @given(data=accept_language_headers())
    def test_generated_headers_roundtrip_tags(self, data: tuple[str, list[str]]) -> None:
        """Every declared tag comes back canonical, none invented."""
        header, tags = data
        parsed = parse_accept_language(header)
        event(f"parsed_count={len(parsed)}")
        assert sorted(parsed) == sorted(tags)

    @given(text=st.text(max_size=40))
    def test_arbitrary_text_never_raises_unexpected(self, text: str) -> None:
        """Arbitrary input yields tags or HeaderParseError, nothing else."""
        try:
            result = parse_accept_language(text)
        except HeaderParseError:
            event("outcome=rejected")
            return
        event("outcome=parsed")
        assert all(isinstance(tag, str) for tag in result)

    @given(entries=st.lists(st.tuples(language_tags, quality_values), min_size=1, max_size=8))
    def test_order_follows_quality_then_header(self, entries: list[tuple[str, str]]) -> None:
        """Quality never increases along the result; ties keep header order."""
        header = ",".join(f"{tag};q={quality}" for tag, quality in entries)
        ranked = sorted(entries, key=lambda entry: -float(entry[1]))
        event(f"distinct_qualities={len({quality for _, quality in entries})}")
        assert parse_accept_language(header) == [tag for tag, _ in ranked]


@pytest.mark.fuzz
class TestParseAcceptLanguageFuzz:
    """Intensive parsing of header-shaped noise."""

    @given(
        text=st.text(
            alphabet="abcdefghijklmnopqrstuvwxyzENUSLH0123456789-_;,=.*@ qx",
            max_size=80,
        )
    )
    @settings(max_examples=5000)
    def test_parsed_tags_are_canonical(self, text: str) -> None:
        """Accepted tags are fixed points of canonicalization."""
        try:
            result = parse_accept_language(text)
        except HeaderParseError:
            event("outcome=rejected")
            return
        event(f"outcome=parsed_{min(len(result), 3)}")
        for tag in result:
            assert canonicalize_tag(tag) == tag
            assert not {";", "@", ".", " "} & set(tag)
