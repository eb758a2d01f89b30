"""Message headers placed in front of bus payloads, and address lookup."""

from __future__ import annotations

import logging
import socket

from bmpcollector.topics import TopicVar

MSGBUS_API_VERSION = "1.7"
WORKING_BUF_SIZE = 1_800_000

_log = logging.getLogger(__name__)


def _check_length(length: int) -> int:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return length


def build_header(
    collector_hash: str, topic_var: TopicVar | str, length: int, rows: int
) -> bytes:
    """Return the header for a parsed message of ``length`` bytes and ``rows`` rows."""
    var = topic_var.value if isinstance(topic_var, TopicVar) else str(topic_var)
    text = (
        f"V: {MSGBUS_API_VERSION}\n"
        f"C_HASH_ID: {collector_hash}\n"
        f"T: {var}\n"
        f"L: {_check_length(length)}\n"
        f"R: {rows}\n\n"
    )
    return text.encode("utf-8")


def build_raw_header(
    collector_hash: str, router_hash: str, router_ip: str, length: int
) -> bytes:
    """Return the header for a raw BMP message of ``length`` bytes."""
    text = (
        f"V: {MSGBUS_API_VERSION}\n"
        f"C_HASH_ID: {collector_hash}\n"
        f"R_HASH: {router_hash}\n"
        f"R_IP: {router_ip}\n"
        f"L: {_check_length(length)}\n\n"
    )
    return text.encode("utf-8")


def resolve_ip(address: str) -> str:
    """Return the host name registered for an address, or '' if there is none."""
    if not address:
        return ""
    try:
        infos = socket.getaddrinfo(address, None)
    except (OSError, UnicodeError):
        return ""
    if not infos:
        return ""
    sockaddr = infos[0][4]
    try:
        hostname, _ = socket.getnameinfo(sockaddr, socket.NI_NAMEREQD)
    except OSError:
        return ""
    _log.info("resolve: %s to %s", address, hostname)
    return hostname