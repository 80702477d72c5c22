"""Text rendering of the link-state database and router LSA tabs of the OSPF page."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Sequence

from .utils import (
    backend_error_text,
    contains_string,
    filter_rows,
    render_table,
    sort_table_by_ip_column,
)

_COLUMN_GAP = 2

_ROUTER_HEADERS = ("Advertised Router ID", "Router Links", "LSA Age")
_NETWORK_HEADERS = ("Designated Router ID", "Advertised Router ID", "LSA Age")
_SUMMARY_HEADERS = ("Network ID", "Advertised Router ID", "LSA Age")
_ASBR_HEADERS = ("AS Border Router ID", "Advertised Router ID", "LSA Age")
_EXTERNAL_HEADERS = ("External Route", "Metric Type", "Advertising Router ID", "LSA Age")
_TRANSIT_HEADERS = ("DR Address", "DR", "Interface Address", "LSA Age")
_STUB_HEADERS = ("Network Address", "Network Mask", "LSA Age")
_P2P_HEADERS = ("Interface Address", "Translated Address", "LSA Age")

Table = tuple[str, Sequence[str], list[list[str]]]


def _field(obj: Any, name: str, default: Any = None) -> Any:
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _text(obj: Any, name: str) -> str:
    value = _field(obj, name, "")
    return "" if value is None else str(value)


def _number(obj: Any, name: str) -> str:
    return str(int(_field(obj, name, 0) or 0))


def _items(value: Any) -> Iterable[Any]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return value.values()
    return value


def _prepared(rows: list[list[str]], query: str) -> list[list[str]]:
    sort_table_by_ip_column(rows)
    return [list(row) for row in filter_rows(rows, query)]


def _box(title: str, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    return f"{title}\n{render_table(headers, rows)}"


def _join_horizontal(left: str, right: str) -> str:
    left_lines = left.split("\n")
    right_lines = right.split("\n")
    width = max((len(line) for line in left_lines), default=0) + _COLUMN_GAP
    height = max(len(left_lines), len(right_lines))
    left_lines += [""] * (height - len(left_lines))
    right_lines += [""] * (height - len(right_lines))
    return "\n".join((l.ljust(width) + r).rstrip() for l, r in zip(left_lines, right_lines))


def _counted(raw_rows: list[list[str]], area: Any, count_field: str) -> str:
    return _number(area, count_field) if raw_rows else "0"


def lsdb_area_tables(area: Any, query: str = "") -> list[Table]:
    """Build the LSA tables of one area as ``(title, headers, rows)`` triples.

    The router, network, summary and ASBR summary tables are always present,
    in that order; the NSSA external table follows only if it has rows left
    after filtering. Titles carry the area's LSA counts.
    """
    router = [
        [_text(_field(lsa, "base"), "advertised_router"),
         _number(lsa, "num_of_router_links"),
         _number(_field(lsa, "base"), "lsa_age")]
        for lsa in _items(_field(area, "router_link_states"))
    ]
    network = [
        [_text(_field(lsa, "base"), "ls_id"),
         _text(_field(lsa, "base"), "advertised_router"),
         _number(_field(lsa, "base"), "lsa_age")]
        for lsa in _items(_field(area, "network_link_states"))
    ]
    summary = [
        [_text(lsa, "summary_address"),
         _text(_field(lsa, "base"), "advertised_router"),
         _number(_field(lsa, "base"), "lsa_age")]
        for lsa in _items(_field(area, "summary_link_states"))
    ]
    asbr = [
        [_text(_field(lsa, "base"), "ls_id"),
         _text(_field(lsa, "base"), "advertised_router"),
         _number(_field(lsa, "base"), "lsa_age")]
        for lsa in _items(_field(area, "asbr_summary_link_states"))
    ]
    nssa = [
        [_text(lsa, "route"),
         _text(lsa, "metric_type"),
         _text(_field(lsa, "base"), "advertised_router"),
         _number(_field(lsa, "base"), "lsa_age")]
        for lsa in _items(_field(area, "nssa_external_link_states"))
    ]

    tables: list[Table] = [
        (_counted(router, area, "router_link_states_count") + " Router Link States",
         _ROUTER_HEADERS, _prepared(router, query)),
        (_counted(network, area, "network_link_states_count") + " Network Link States",
         _NETWORK_HEADERS, _prepared(network, query)),
        (_counted(summary, area, "summary_link_states_count") + " Summary Link States",
         _SUMMARY_HEADERS, _prepared(summary, query)),
        (_counted(asbr, area, "asbr_summary_link_states_count") + " ASBR Summary Link States",
         _ASBR_HEADERS, _prepared(asbr, query)),
    ]
    nssa_title = _counted(nssa, area, "nssa_external_link_states_count") + " NSSA External Link States"
    nssa_rows = _prepared(nssa, query)
    if nssa_rows:
        tables.append((nssa_title, _EXTERNAL_HEADERS, nssa_rows))
    return tables


def render_lsdb_tab(backend: Any, query: str = "") -> str:
    """Render the complete link-state database, area by area, then AS external LSAs."""
    try:
        lsdb = backend.get_lsdb()
    except Exception as exc:  # any backend failure is shown in place of the tab
        return backend_error_text(exc, "GetLSDB")

    blocks: list[str] = []
    areas = _field(lsdb, "areas", None) or {}
    for area_id in sorted(areas):
        tables = lsdb_area_tables(areas[area_id], query)
        router, network, summary, asbr = (_box(*table) for table in tables[:4])
        left = router + "\n" + summary
        right = network + "\n" + asbr
        parts = [f"Link State Database: Area {area_id}", _join_horizontal(left, right)]
        parts.extend(_box(*table) for table in tables[4:])
        blocks.append("\n".join(parts))

    external = [
        [_text(lsa, "route"),
         _text(lsa, "metric_type"),
         _text(_field(lsa, "base"), "advertised_router"),
         _number(_field(lsa, "base"), "lsa_age")]
        for lsa in _items(_field(lsdb, "as_external_link_states"))
    ]
    external_count = _number(lsdb, "as_external_count") if external else "0"
    external_rows = _prepared(external, query)
    blocks.append("\n".join([
        "Link State Database: AS External LSAs",
        _box(external_count + " AS External Link States", _EXTERNAL_HEADERS, external_rows),
    ]) + "\n\n")
    return "\n".join(blocks)


def _section(title: str, empty_title: str, headers: Sequence[str], rows: list[list[str]]) -> str:
    if rows:
        return _box(title, headers, rows)
    return empty_title


def render_router_tab(backend: Any, query: str = "") -> str:
    """Render the router LSAs this router originates: transit, stub and point-to-point links."""
    try:
        neighbors = list(backend.get_ospf_neighbor_interfaces() or [])
    except Exception as exc:  # any backend failure is shown in place of the tab
        return backend_error_text(exc, "GetOspfNeighborInterfaces")
    try:
        router_self = backend.get_ospf_router_data_self()
    except Exception as exc:
        return backend_error_text(exc, "GetOspfRouterDataSelf")
    try:
        p2p = backend.get_ospf_p2p_interface_mapping()
    except Exception as exc:
        return backend_error_text(exc, "GetOspfP2PInterfaceMapping")

    peer_map = _field(p2p, "peer_interface_to_address", None) or {}
    states = _field(router_self, "router_states", None) or {}
    blocks: list[str] = []
    for area_id in sorted(states):
        transit: list[list[str]] = []
        stub: list[list[str]] = []
        point2point: list[list[str]] = []
        for lsa in _items(_field(states[area_id], "lsa_entries")):
            age = _number(lsa, "lsa_age")
            for link in _items(_field(lsa, "router_links")):
                link_type = _text(link, "link_type")
                interface = _text(link, "router_interface_address")
                if "Transit Network" in link_type:
                    dr = _text(link, "designated_router_address")
                    if dr == interface:
                        name = "self"
                    elif contains_string(neighbors, dr):
                        name = "Neighbor"
                    else:
                        name = "No Neighbor"
                    transit.append([dr, name, interface, age])
                elif "Stub Network" in link_type:
                    stub.append([_text(link, "network_address"), _text(link, "network_mask"), age])
                elif "point-to-point" in link_type:
                    point2point.append([interface, peer_map.get(interface, "no mapping"), age])

        transit_box = _section("Transit Networks", "No Transit Networks",
                               _TRANSIT_HEADERS, _prepared(transit, query))
        stub_box = _section("Stub Networks", "No Stub Networks",
                            _STUB_HEADERS, _prepared(stub, query))
        p2p_box = _section("Point-to-Point Networks", "No Point-to-Point Networks",
                           _P2P_HEADERS, _prepared(point2point, query))

        if len(transit_box) < len(stub_box):
            tables = _join_horizontal(transit_box + "\n" + p2p_box, stub_box)
        else:
            tables = _join_horizontal(transit_box, stub_box + "\n" + p2p_box)
        blocks.append(f"Area {area_id}\n{tables}\n\n")
    return "\n".join(blocks)