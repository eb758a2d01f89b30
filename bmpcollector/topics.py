"""Topic naming and selection by router group, peer group and peer ASN."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class TopicVar(str, Enum):
    """Topic variables; each is the key of a configured topic name."""

    COLLECTOR = "collector"
    ROUTER = "router"
    PEER = "peer"
    BASE_ATTRIBUTE = "base_attribute"
    UNICAST_PREFIX = "unicast_prefix"
    L3VPN = "l3vpn"
    EVPN = "evpn"
    LS_NODE = "ls_node"
    LS_LINK = "ls_link"
    LS_PREFIX = "ls_prefix"
    BMP_STAT = "bmp_stat"
    BMP_RAW = "bmp_raw"


DEFAULT_TOPIC_NAMES: dict[str, str] = {
    TopicVar.COLLECTOR.value: "openbmp.parsed.collector",
    TopicVar.ROUTER.value: "openbmp.parsed.router",
    TopicVar.PEER.value: "openbmp.parsed.peer",
    TopicVar.BASE_ATTRIBUTE.value: "openbmp.parsed.base_attribute",
    TopicVar.UNICAST_PREFIX.value: "openbmp.parsed.unicast_prefix",
    TopicVar.L3VPN.value: "openbmp.parsed.l3vpn",
    TopicVar.EVPN.value: "openbmp.parsed.evpn",
    TopicVar.LS_NODE.value: "openbmp.parsed.ls_node",
    TopicVar.LS_LINK.value: "openbmp.parsed.ls_link",
    TopicVar.LS_PREFIX.value: "openbmp.parsed.ls_prefix",
    TopicVar.BMP_STAT.value: "openbmp.parsed.bmp_stat",
    TopicVar.BMP_RAW.value: "openbmp.bmp_raw",
}

_DEFAULT = "default"


def _var(topic_var: TopicVar | str) -> str:
    return topic_var.value if isinstance(topic_var, TopicVar) else str(topic_var)


class TopicSelector:
    """Resolves topic variables to concrete topic names and caches them.

    Keys in the cache have the form ``<var>_<router_group>_<peer_group>``
    with ``_<peer_asn>`` added when the topic name uses ``{peer_asn}``.
    The collector key is the bare variable and the router key stops
    after the router group.
    """

    def __init__(self, topic_names: Mapping[str, str] | None = None) -> None:
        names = DEFAULT_TOPIC_NAMES if topic_names is None else topic_names
        self.topic_names: dict[str, str] = {_var(k): v for k, v in names.items()}
        self.topics: dict[str, str] = {}
        self._include_peer_asn: dict[str, bool] = {}

    def topic_enabled(self, topic_var: TopicVar | str) -> bool:
        """Return True if the topic variable has a non-empty topic name."""
        return bool(self.topic_names.get(_var(topic_var), ""))

    def topic_key(
        self,
        topic_var: TopicVar | str,
        router_group: str | None = None,
        peer_group: str | None = None,
        peer_asn: int = 0,
    ) -> str:
        """Return the cache key for a topic variable and its groups."""
        var = _var(topic_var)
        key = var
        if var == TopicVar.COLLECTOR.value:
            return key
        key += "_" + (router_group or "")
        if var == TopicVar.ROUTER.value:
            return key
        key += "_" + (peer_group or "")
        if self._include_peer_asn.get(var, False):
            key += "_" + (str(peer_asn) if peer_asn > 0 else "")
        return key

    def get_topic(
        self,
        topic_var: TopicVar | str,
        router_group: str | None = None,
        peer_group: str | None = None,
        peer_asn: int = 0,
    ) -> str:
        """Return the topic name, creating and caching it on first use.

        ValueError is raised for a topic variable with no topic name.
        """
        key = self.topic_key(topic_var, router_group, peer_group, peer_asn)
        if key in self.topics:
            return self.topics[key]
        return self._init_topic(_var(topic_var), router_group, peer_group, peer_asn)

    def _init_topic(
        self,
        var: str,
        router_group: str | None,
        peer_group: str | None,
        peer_asn: int,
    ) -> str:
        name = self.topic_names.get(var, "")
        if not name:
            raise ValueError(f"no topic name configured for {var!r}")

        self._include_peer_asn[var] = "{peer_asn}" in name
        key = self.topic_key(var, router_group, peer_group, peer_asn)

        if var != TopicVar.COLLECTOR.value:
            name = name.replace("{router_group}", router_group or _DEFAULT)
            if var != TopicVar.ROUTER.value:
                name = name.replace("{peer_group}", peer_group or _DEFAULT)
                name = name.replace(
                    "{peer_asn}", str(peer_asn) if peer_asn > 0 else _DEFAULT
                )

        self.topics[key] = name
        return name