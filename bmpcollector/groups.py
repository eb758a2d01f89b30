"""Router and peer group matching by hostname, address and ASN."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TypeVar, Union

Network = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]
_T = TypeVar("_T")


@dataclass(frozen=True)
class IpMatch:
    """An address range that places routers or peers into a group."""

    network: Network

    @property
    def is_ipv4(self) -> bool:
        return self.network.version == 4

    @property
    def bits(self) -> int:
        return self.network.prefixlen

    def matches(self, ip_addr: str) -> bool:
        """Return True if the printed address lies within this range."""
        is_ipv4 = ":" not in ip_addr
        if is_ipv4 != self.is_ipv4:
            return False
        try:
            address = ipaddress.ip_address(ip_addr)
        except ValueError:
            return False
        return address in self.network


def parse_prefix(text: str) -> IpMatch:
    """Parse 'address[/bits]' into an IpMatch; host bits are masked off."""
    try:
        network = ipaddress.ip_network(text.strip(), strict=False)
    except ValueError as exc:
        raise ValueError(f"invalid prefix {text!r}: {exc}") from None
    return IpMatch(network)


def _compile(patterns: Iterable[str | re.Pattern[str]]) -> list[re.Pattern[str]]:
    return [p if isinstance(p, re.Pattern) else re.compile(p) for p in patterns]


def _prefixes(items: Iterable[str | IpMatch]) -> list[IpMatch]:
    return [p if isinstance(p, IpMatch) else parse_prefix(p) for p in items]


def _ordered(groups: Mapping[str, list[_T]]) -> Iterator[tuple[str, list[_T]]]:
    # Groups are tried in name order.
    for name in sorted(groups):
        yield name, groups[name]


@dataclass
class GroupRules:
    """Rules mapping routers and peers to named groups.

    Regular expressions may be given as strings and prefixes as
    'address/bits' strings; both are converted on construction.
    """

    router_by_name: dict[str, list[re.Pattern[str]]] = field(default_factory=dict)
    router_by_ip: dict[str, list[IpMatch]] = field(default_factory=dict)
    peer_by_name: dict[str, list[re.Pattern[str]]] = field(default_factory=dict)
    peer_by_ip: dict[str, list[IpMatch]] = field(default_factory=dict)
    peer_by_asn: dict[str, list[int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.router_by_name = {k: _compile(v) for k, v in self.router_by_name.items()}
        self.peer_by_name = {k: _compile(v) for k, v in self.peer_by_name.items()}
        self.router_by_ip = {k: _prefixes(v) for k, v in self.router_by_ip.items()}
        self.peer_by_ip = {k: _prefixes(v) for k, v in self.peer_by_ip.items()}
        self.peer_by_asn = {k: [int(a) for a in v] for k, v in self.peer_by_asn.items()}

    @staticmethod
    def _by_name(groups: Mapping[str, list[re.Pattern[str]]], hostname: str) -> str | None:
        if not hostname:
            return None
        for name, patterns in _ordered(groups):
            if any(p.search(hostname) for p in patterns):
                return name
        return None

    @staticmethod
    def _by_ip(groups: Mapping[str, list[IpMatch]], ip_addr: str) -> str | None:
        for name, ranges in _ordered(groups):
            if any(r.matches(ip_addr) for r in ranges):
                return name
        return None

    def lookup_router_group(self, hostname: str, ip_addr: str) -> str:
        """Return the router group name, or '' when nothing matches."""
        found = self._by_name(self.router_by_name, hostname)
        if found is None:
            found = self._by_ip(self.router_by_ip, ip_addr)
        return found or ""

    def lookup_peer_group(self, hostname: str, ip_addr: str, peer_asn: int) -> str:
        """Return the peer group name, or '' when nothing matches."""
        found = self._by_name(self.peer_by_name, hostname)
        if found is None:
            found = self._by_ip(self.peer_by_ip, ip_addr)
        if found is None:
            for name, asns in _ordered(self.peer_by_asn):
                if peer_asn in asns:
                    found = name
                    break
        return found or ""