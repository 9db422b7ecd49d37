"""Peer address handling.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import ipaddress

__all__ = ["split_host_port"]


def split_host_port(remote_addr: str | None) -> str:
    """Strip an optional port from a peer address.

    Accepts a bare IPv4/IPv6 address, ``host:port`` and ``[host]:port``.
    Anything that cannot be split into a single host yields "", which the
    resolver treats as "no address".

    Args:
        remote_addr: Peer address as reported by the server

    Returns:
        Host part, unchanged in spelling, or "" if unusable

    Example:
        >>> split_host_port("203.0.113.7:51234")
        '203.0.113.7'
        >>> split_host_port("[2001:db8::1]:443")
        '2001:db8::1'
        >>> split_host_port("2001:db8::1")
        '2001:db8::1'
        >>> split_host_port("2001:db8::1:443:x")
        ''
    """
    if not remote_addr:
        return ""
    value = remote_addr.strip()

    try:
        ipaddress.ip_address(value)
    except ValueError:
        pass
    else:
        return value

    if value.startswith("["):
        host, closed, rest = value[1:].partition("]")
        if not closed or not host or (rest and not rest.startswith(":")):
            return ""
        return host

    host, sep, _port = value.rpartition(":")
    if not sep or not host or ":" in host:
        return ""
    return host
