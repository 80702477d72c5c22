"""Shared data types and ordering helpers for the interface."""

from __future__ import annotations

import enum
import ipaddress
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Iterable

_V4_IN_V6_PREFIX = b"\x00" * 10 + b"\xff\xff"


class StatusSeverity(enum.Enum):
    """Severity of a status-bar message."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class WindowSize:
    width: int
    height: int


@dataclass
class Tab:
    title: str
    sub_tabs: list[str] = field(default_factory=list)
    app_state: int = 0


@dataclass
class Filter:
    """A text filter typed by the user."""

    query: str = ""
    active: bool = False


@dataclass
class FooterOption:
    page_title: str
    page_options: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ExportOption:
    label: str
    map_key: str
    filename: str


@dataclass
class TimedPayload:
    """Data wrapped together with the time it was received."""

    received_at: str
    data: Any


def add_export_option(opts: list[ExportOption], opt: ExportOption) -> list[ExportOption]:
    """Return ``opts`` with ``opt`` appended unless its map key is already present."""
    if any(existing.map_key == opt.map_key for existing in opts):
        return opts
    return [*opts, opt]


def ip_sort_key(ip: str) -> bytes | None:
    """Return the 16-byte form of an IP address, or None if it does not parse.

    IPv4 addresses are mapped into IPv6 (``::ffff:a.b.c.d``).
    """
    if "%" in ip:
        return None
    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return None
    if addr.version == 4:
        return _V4_IN_V6_PREFIX + addr.packed
    return addr.packed


def _compare_ips(a: str, b: str) -> int:
    key_a, key_b = ip_sort_key(a), ip_sort_key(b)
    if key_a is None or key_b is None:
        left, right = a, b
    else:
        left, right = key_a, key_b
    return (left > right) - (left < right)


def sort_ips(ips: Iterable[str]) -> list[str]:
    """Sort addresses numerically; unparsable entries compare as strings."""
    return sorted(ips, key=cmp_to_key(_compare_ips))


def _prefix_key(text: str) -> tuple[int, int, int]:
    addr_text, slash, bits = text.partition("/")
    if not slash or not bits.isascii() or not bits.isdecimal() or "%" in addr_text:
        raise ValueError(f"invalid CIDR {text!r}")
    try:
        addr = ipaddress.ip_address(addr_text)
    except ValueError as exc:
        raise ValueError(f"invalid CIDR {text!r}: {exc}") from None
    length = int(bits)
    if length > addr.max_prefixlen:
        raise ValueError(f"invalid CIDR {text!r}: prefix length out of range")
    return addr.version, int(addr), length


def sort_prefixes(prefixes: Iterable[str]) -> list[str]:
    """Sort CIDR strings by address (IPv4 first), then by prefix length.

    Raises ValueError if any entry is not a valid prefix.
    """
    return sorted(prefixes, key=_prefix_key)