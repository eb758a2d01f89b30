# bmpcollector

`bmpcollector` holds the building blocks a BGP Monitoring Protocol (BMP)
collector needs to publish what it sees on a message bus: typed records
for collectors, routers, peers, paths, prefixes and BGP-LS objects,
router and peer group matching, topic naming, partition choice and
message headers.

## Installation

```
pip install bmpcollector
```

It has no runtime dependencies. To run the tests:

```
pip install "bmpcollector[test]"
pytest
```

## Modules

### `bmpcollector.records`

Data classes for the objects carried on the bus: `Collector`, `Router`,
`BgpPeer`, `PeerUpEvent`, `PeerDownEvent`, `PathAttributes`, `RibEntry`,
`RouteDistinguisher`, `VpnEntry`, `EvpnEntry` and `StatsReport`. Hash
fields and binary prefixes must be exactly 16 bytes, and a `RibEntry`
prefix length must lie between 0 and 128; otherwise `ValueError` is
raised. `VpnEntry` and `EvpnEntry` combine a `RibEntry` with a
`RouteDistinguisher`.

### `bmpcollector.lsrecords`

The BGP-LS records `LsNode`, `LsLink` and `LsPrefix`. Their binary fields
(router IDs, area IDs, addresses, hashes) are checked for length on
construction.

### `bmpcollector.common`

- The action enums `CollectorAction`, `RouterAction`, `PeerAction`,
  `BaseAttrAction`, `UnicastPrefixAction`, `VpnAction` and `LsAction`;
  each member's `label` is its lower-case name (`"started"`, `"del"`, ...).
- `RowContext`, holding the router IP that goes into every row.
- `hash_to_str(hash_bin)`: the first 16 bytes of a hash as lower-case hex.
- `format_timestamp(secs, usecs)`: a UTC `YYYY-MM-DD HH:MM:SS.uuuuuu`
  string; a `secs` value of 1000 or less means "now".

```python
from bmpcollector.common import format_timestamp, hash_to_str

hash_to_str(bytes(range(16)))        # '000102030405060708090a0b0c0d0e0f'
format_timestamp(1500000000, 42)     # '2017-07-14 02:40:00.000042'
```

### `bmpcollector.groups`

`GroupRules` maps routers and peers to named groups by hostname regular
expression, IP prefix and (for peers) ASN. Patterns and prefixes may be
given as strings. Hostname rules are tried first, then prefixes, then
ASNs; groups are tried in name order, and `""` is returned when nothing
matches. `parse_prefix` turns `"address/bits"` into an `IpMatch`.

```python
from bmpcollector.groups import GroupRules

rules = GroupRules(
    router_by_name={"core": [r"^core-"]},
    peer_by_ip={"customers": ["192.0.2.0/24"]},
    peer_by_asn={"transit": [64500]},
)
rules.lookup_router_group("core-1.example.com", "198.51.100.1")  # 'core'
rules.lookup_peer_group("", "192.0.2.7", 0)                      # 'customers'
rules.lookup_peer_group("", "203.0.113.9", 64500)                # 'transit'
```

### `bmpcollector.topics`

`TopicVar` names the kinds of message; `TopicSelector` turns a topic
variable plus router group, peer group and peer ASN into a topic name,
filling the `{router_group}`, `{peer_group}` and `{peer_asn}` placeholders
(`default` where a value is missing) and caching the result. Without an
argument it uses the standard `openbmp.parsed.*` and `openbmp.bmp_raw`
names. A topic whose name is empty is disabled (`topic_enabled` returns
False), and `get_topic` raises `ValueError` for it.

```python
from bmpcollector.topics import TopicSelector, TopicVar

sel = TopicSelector({"peer": "openbmp.parsed.peer.{router_group}.{peer_group}.{peer_asn}"})
sel.get_topic(TopicVar.PEER, "core", None, 65001)
# 'openbmp.parsed.peer.core.default.65001'
```

### `bmpcollector.partition`

`peer_partition(key, partition_count)` picks a partition from the first
and last byte of a message key. Empty keys and non-positive counts raise
`ValueError`.

### `bmpcollector.wire`

- `build_header(collector_hash, topic_var, length, rows)`: the `V`,
  `C_HASH_ID`, `T`, `L` and `R` header placed before a parsed message.
- `build_raw_header(collector_hash, router_hash, router_ip, length)`: the
  header placed before a raw BMP message.
- `resolve_ip(address)`: reverse lookup of an address, `""` if none.

```python
from bmpcollector.wire import build_header

build_header("abc", "peer", 10, 1)
# b'V: 1.7\nC_HASH_ID: abc\nT: peer\nL: 10\nR: 1\n\n'
```

## What it does not do

The package does not compute the hash identifiers of peers, paths or
routes, does not format the tab-separated rows of each message type, and
keeps no sequence counters. It also does not talk to a broker: there is
no producer, no connection handling and no command to run. It supplies
the records, names, keys and headers; assembling rows and sending them is
left to the caller.