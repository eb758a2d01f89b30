"""BGP-LS node, link and prefix records passed to the message bus."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

HASH_SIZE = 16


class _FixedBytesMixin:
    """Coerces and length-checks the binary fields named in ``_BYTE_SIZES``."""

    _BYTE_SIZES: ClassVar[dict[str, int]] = {}

    def _check_bytes(self) -> None:
        for name, size in self._BYTE_SIZES.items():
            raw = bytes(getattr(self, name))
            if len(raw) != size:
                raise ValueError(f"{name} must be {size} bytes, got {len(raw)}")
            setattr(self, name, raw)


@dataclass
class LsNode(_FixedBytesMixin):
    """A BGP-LS node."""

    _BYTE_SIZES: ClassVar[dict[str, int]] = {
        "hash_id": HASH_SIZE,
        "igp_router_id": 8,
        "ospf_area_id": 4,
        "router_id": 16,
        "isis_area_id": 9,
    }

    hash_id: bytes = bytes(HASH_SIZE)
    id: int = 0
    is_ipv4: bool = True
    asn: int = 0
    bgp_ls_id: int = 0
    igp_router_id: bytes = bytes(8)
    ospf_area_id: bytes = bytes(4)
    protocol: str = ""
    router_id: bytes = bytes(16)
    isis_area_id: bytes = bytes(9)
    flags: str = ""
    name: str = ""
    mt_id: str = ""
    sr_capabilities_tlv: str = ""

    def __post_init__(self) -> None:
        self._check_bytes()


@dataclass
class LsLink(_FixedBytesMixin):
    """A BGP-LS link between two nodes."""

    _BYTE_SIZES: ClassVar[dict[str, int]] = {
        "hash_id": HASH_SIZE,
        "igp_router_id": 8,
        "remote_igp_router_id": 8,
        "ospf_area_id": 4,
        "router_id": 16,
        "remote_router_id": 16,
        "isis_area_id": 9,
        "intf_addr": 16,
        "nei_addr": 16,
        "local_node_hash_id": HASH_SIZE,
        "remote_node_hash_id": HASH_SIZE,
    }

    hash_id: bytes = bytes(HASH_SIZE)
    id: int = 0
    mt_id: int = 0
    bgp_ls_id: int = 0
    igp_router_id: bytes = bytes(8)
    remote_igp_router_id: bytes = bytes(8)
    ospf_area_id: bytes = bytes(4)
    router_id: bytes = bytes(16)
    remote_router_id: bytes = bytes(16)
    local_node_asn: int = 0
    remote_node_asn: int = 0
    local_bgp_router_id: int = 0
    remote_bgp_router_id: int = 0
    isis_area_id: bytes = bytes(9)
    protocol: str = ""
    intf_addr: bytes = bytes(16)
    nei_addr: bytes = bytes(16)
    local_link_id: int = 0
    remote_link_id: int = 0
    is_ipv4: bool = True
    local_node_hash_id: bytes = bytes(HASH_SIZE)
    remote_node_hash_id: bytes = bytes(HASH_SIZE)
    admin_group: int = 0
    max_link_bw: int = 0
    max_resv_bw: int = 0
    unreserved_bw: str = ""
    te_def_metric: int = 0
    protection_type: str = ""
    mpls_proto_mask: str = ""
    igp_metric: int = 0
    srlg: str = ""
    name: str = ""
    peer_node_sid: str = ""
    peer_adj_sid: str = ""

    def __post_init__(self) -> None:
        self._check_bytes()


@dataclass
class LsPrefix(_FixedBytesMixin):
    """A BGP-LS prefix advertised by a node."""

    _BYTE_SIZES: ClassVar[dict[str, int]] = {
        "hash_id": HASH_SIZE,
        "igp_router_id": 8,
        "ospf_area_id": 4,
        "router_id": 16,
        "isis_area_id": 9,
        "intf_addr": 16,
        "nei_addr": 16,
        "local_node_hash_id": HASH_SIZE,
        "prefix_bin": 16,
        "prefix_bcast_bin": 16,
        "ospf_fwd_addr": 16,
    }

    hash_id: bytes = bytes(HASH_SIZE)
    id: int = 0
    protocol: str = ""
    bgp_ls_id: int = 0
    igp_router_id: bytes = bytes(8)
    ospf_area_id: bytes = bytes(4)
    router_id: bytes = bytes(16)
    isis_area_id: bytes = bytes(9)
    intf_addr: bytes = bytes(16)
    nei_addr: bytes = bytes(16)
    local_node_hash_id: bytes = bytes(HASH_SIZE)
    mt_id: int = 0
    metric: int = 0
    is_ipv4: bool = True
    prefix_len: int = 0
    ospf_route_type: str = ""
    prefix_bin: bytes = bytes(16)
    prefix_bcast_bin: bytes = bytes(16)
    igp_flags: str = ""
    route_tag: int = 0
    ext_route_tag: int = 0
    ospf_fwd_addr: bytes = bytes(16)
    sid_tlv: str = ""

    def __post_init__(self) -> None:
        self._check_bytes()
        if not 0 <= self.prefix_len <= 128:
            raise ValueError(f"prefix_len out of range: {self.prefix_len}")


__all__ = ["LsNode", "LsLink", "LsPrefix"]

# Keep ``fields`` referenced for callers introspecting records.
_ = fields