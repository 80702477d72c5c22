"""Text rendering of the network, external, neighbor and configuration tabs of the OSPF page."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Sequence

from .models import Filter, sort_ips
from .ospf_lsdb_view import render_lsdb_tab, render_router_tab
from .utils import backend_error_text, filter_rows, render_table, sort_table_by_ip_column

_COLUMN_GAP = 2
_FETCHING = "Fetching running config..."

_NETWORK_HEADERS = ("Link State ID", "CIDR", "Advertising Router", "Attached Routers", "LSA Age")
_EXTERNAL_HEADERS = ("Link State ID", "CIDR", "Metric Type", "Forwarding Address", "LSA Age")
_NEIGHBOR_HEADERS = (
    "Neighbor ID",
    "Neighbor IP",
    "Role",
    "Converged",
    "Internal Interface",
    "Up Time",
    "Dead Time",
)


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


def render_network_tab(backend: Any, query: str = "") -> str:
    """Render the network LSAs (type 2) this router originates, area by area."""
    try:
        network_self = backend.get_ospf_network_data_self()
    except Exception as exc:  # any backend failure is shown in place of the tab
        return backend_error_text(exc, "GetOspfRouterDataSelf")
    try:
        router_name, _ = backend.get_router_name()
    except Exception as exc:
        return backend_error_text(exc, "GetRouterName")

    states = _field(network_self, "net_states", None) or {}
    blocks: list[str] = []
    for area_id in sorted(states):
        entries = _field(states[area_id], "lsa_entries", None)
        rows: list[list[str]] = []
        for lsa_id, lsa in (entries or {}).items():
            if lsa_id != _text(lsa, "link_state_id"):
                return "Anomaly: LSA Mismatch"
            attached = [
                _text(router, "attached_router_id")
                for router in _items(_field(lsa, "attached_routers"))
            ]
            rows.append([
                lsa_id,
                _number(lsa, "network_mask"),
                _text(lsa, "advertising_router"),
                "\n".join(attached),
                _number(lsa, "lsa_age"),
            ])
        rows = _prepared(rows, query)
        if entries:
            blocks.append(
                f"Area {area_id}\n"
                + _box("Network LSAs (Type 2)", _NETWORK_HEADERS, rows)
                + "\n\n"
            )

    if not blocks:
        return f"{router_name} does not originate Network LSAs (Type 2)"
    return "\n".join(blocks)


def _external_row(lsa: Any, forward_field: str) -> list[str]:
    return [
        _text(lsa, "link_state_id"),
        "/" + _number(lsa, "network_mask"),
        _text(lsa, "metric_type"),
        _text(lsa, forward_field),
        _number(lsa, "lsa_age"),
    ]


def render_external_tab(backend: Any, query: str = "") -> str:
    """Render the external (type 5) and NSSA external (type 7) LSAs this router originates."""
    try:
        external_self = backend.get_ospf_external_data_self()
    except Exception as exc:  # any backend failure is shown in place of the tab
        return backend_error_text(exc, "GetOspfExternalDataSelf")
    try:
        nssa_self = backend.get_ospf_nssa_external_data_self()
    except Exception as exc:
        return backend_error_text(exc, "GetOspfNssaExternalDataSelf")
    try:
        router_name, _ = backend.get_router_name()
    except Exception as exc:
        return backend_error_text(exc, "GetRouterName")

    external_rows = _prepared(
        [
            _external_row(lsa, "forward_address")
            for lsa in _items(_field(external_self, "as_external_link_states"))
        ],
        query,
    )
    external_block = (
        "External LSAs (Type 5)\n"
        + _box("Self Originating", _EXTERNAL_HEADERS, external_rows)
        + "\n\n"
    )

    nssa_blocks: list[str] = []
    nssa_areas = _field(nssa_self, "nssa_external_link_states", None) or {}
    for area_id in sorted(nssa_areas):
        data = _field(nssa_areas[area_id], "data", None)
        if data is None:
            continue
        rows = _prepared(
            [_external_row(lsa, "nssa_forward_address") for lsa in _items(data)], query
        )
        nssa_blocks.append(
            f"NSSA External LSAs (Type 7) in Area {area_id}\n"
            + _box("Self Originating", _EXTERNAL_HEADERS, rows)
            + "\n\n"
        )

    if nssa_blocks:
        return "\n".join([external_block, *nssa_blocks])
    if not external_rows:
        return f"{router_name} does not originate External LSAs (Type 5 or 7)"
    return external_block


def render_neighbor_tab(backend: Any, query: str = "") -> str:
    """Render every OSPF neighborship of this router."""
    try:
        ospf_neighbors = backend.get_ospf_neighbors()
    except Exception as exc:  # any backend failure is shown in place of the tab
        return backend_error_text(exc, "GetOspfNeighborInterfaces")
    try:
        router_name, _ = backend.get_router_name()
    except Exception as exc:
        return backend_error_text(exc, "GetRouterName")

    neighbor_map = _field(ospf_neighbors, "neighbors", None) or {}
    neighbor_ids = sort_ips(neighbor_map)
    rows: list[list[str]] = []
    for neighbor_id in neighbor_ids:
        for neighbor in _items(_field(neighbor_map[neighbor_id], "neighbors")):
            rows.append([
                neighbor_id,
                _text(neighbor, "iface_address"),
                _text(neighbor, "role"),
                _text(neighbor, "converged"),
                _text(neighbor, "iface_name"),
                _text(neighbor, "up_time"),
                _text(neighbor, "dead_time"),
            ])
    rows = _prepared(rows, query)

    title = f"Router {router_name} has {len(neighbor_ids)} Neighbors"
    return "All OSPF Neighborships\n" + _box(title, _NEIGHBOR_HEADERS, rows)


def render_running_config_tab(backend: Any, running_config: Sequence[str] | None = None) -> str:
    """Show the running configuration next to its parsed form."""
    lines = list(running_config) if running_config is not None else [_FETCHING]
    running = "Running Config\n" + "\n".join(lines)
    try:
        parsed = backend.get_static_frr_configuration_pretty()
    except Exception as exc:  # any backend failure is shown in place of the tab
        return backend_error_text(exc, "GetStaticFRRConfigurationPretty")
    return _join_horizontal(running, "Parsed Running Config\n" + str(parsed))


def render_ospf(
    backend: Any,
    sub_tab: int,
    text_filter: Filter | None = None,
    running_config: Sequence[str] | None = None,
) -> str:
    """Render the OSPF monitoring page for the selected sub-tab."""
    text_filter = text_filter if text_filter is not None else Filter()
    query = text_filter.query

    if sub_tab == 5:
        return render_running_config_tab(backend, running_config)

    renderers = {
        0: render_lsdb_tab,
        1: render_router_tab,
        2: render_network_tab,
        3: render_external_tab,
        4: render_neighbor_tab,
    }
    body = renderers.get(sub_tab, render_lsdb_tab)(backend, query)

    if text_filter.active:
        filter_box = "Filter: " + query
    else:
        filter_box = "Filter: press [:] to activate filter"
    return body + "\n" + filter_box