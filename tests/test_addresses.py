"""Tests for split_host_port()."""

import pytest
from hypothesis import given

from geolocale.addresses import split_host_port
from tests.strategies.addresses import (
    bracketed_host_ports,
    host_port_pairs,
    ipv4_addresses,
    ipv6_addresses,
)


class TestSplitHostPort:
    """Test port stripping."""

    @pytest.mark.parametrize(
        ("remote_addr", "host"),
        [
            ("203.0.113.7:51234", "203.0.113.7"),
            ("[2001:db8::1]:443", "2001:db8::1"),
            ("[2001:db8::1]", "2001:db8::1"),
            ("2001:db8::1", "2001:db8::1"),
            ("203.0.113.7", "203.0.113.7"),
            ("localhost:8080", "localhost"),
            ("not-an-ip:80", "not-an-ip"),
        ],
    )
    def test_splits(self, remote_addr: str, host: str) -> None:
        """Host part is returned unchanged in spelling."""
        assert split_host_port(remote_addr) == host

    @pytest.mark.parametrize(
        "remote_addr",
        [None, "", ":80", "[2001:db8::1", "[]:80", "[::1]x", "2001:db8::1:443:x", "garbage"],
    )
    def test_unusable(self, remote_addr: str | None) -> None:
        """Addresses that cannot be split yield ''."""
        assert split_host_port(remote_addr) == ""

    @given(pair=host_port_pairs)
    def test_ipv4_with_port(self, pair: tuple[str, str]) -> None:
        """IPv4 host:port always splits to the host."""
        host, remote_addr = pair
        assert split_host_port(remote_addr) == host

    @given(pair=bracketed_host_ports)
    def test_bracketed_ipv6_with_port(self, pair: tuple[str, str]) -> None:
        """[IPv6]:port always splits to the host."""
        host, remote_addr = pair
        assert split_host_port(remote_addr) == host

    @given(host=ipv4_addresses | ipv6_addresses)
    def test_bare_address_unchanged(self, host: str) -> None:
        """A bare address without port is returned as-is."""
        assert split_host_port(host) == host
