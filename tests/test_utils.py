import json
from dataclasses import dataclass
from datetime import datetime
from types import SimpleNamespace

import pytest

from frrmad.models import ExportOption
from frrmad.utils import (
    backend_error_text,
    contains_string,
    export_proto,
    filter_rows,
    has_any_anomaly,
    pretty_print_json,
    render_table,
    sort_table_by_ip_column,
    write_export_to_file,
)


def test_contains_string():
    assert contains_string(["10.0.0.1", "10.0.0.2"], "10.0.0.2") is True
    assert contains_string(["10.0.0.1"], "10.0.0.3") is False


def test_has_any_anomaly_none():
    assert has_any_anomaly(None) is False


def test_has_any_anomaly_mapping_flag():
    assert has_any_anomaly({"has_over_advertised_prefixes": True}) is True
    assert has_any_anomaly({"has_misconfigured_prefixes": True}) is True


def test_has_any_anomaly_object_without_flags():
    anomaly = SimpleNamespace(
        has_un_advertised_prefixes=False,
        has_over_advertised_prefixes=False,
        has_duplicate_prefixes=False,
        has_misconfigured_prefixes=False,
    )
    assert has_any_anomaly(anomaly) is False


def test_backend_error_text():
    assert backend_error_text("boom", "GetLSDB") == (
        "Error: \nboom\n\nNo data received from backend for 'GetLSDB()'. Press 'r' to reload..."
    )


def test_sort_table_by_ip_column():
    table = [["10.0.0.10", "a"], ["10.0.0.2", "b"], ["9.9.9.9", "c"]]
    sort_table_by_ip_column(table)
    assert [row[0] for row in table] == ["9.9.9.9", "10.0.0.2", "10.0.0.10"]
    assert table[0] == ["9.9.9.9", "c"]


def test_sort_table_by_ip_column_fallback():
    table = [["zeta"], ["alpha"]]
    sort_table_by_ip_column(table)
    assert table == [["alpha"], ["zeta"]]


def test_pretty_print_json_round_trip():
    message = {"router_id": "192.168.1.1", "areas": {"0.0.0.0": {"lsa_number": 3}}}
    text = pretty_print_json(message)
    assert json.loads(text) == message
    assert "\n  " in text


def test_pretty_print_json_dataclass():
    @dataclass
    class Item:
        name: str
        count: int

    assert json.loads(pretty_print_json(Item("r101", 2))) == {"name": "r101", "count": 2}


def test_pretty_print_json_failure():
    assert pretty_print_json(object()).startswith("Failed to marshal proto message to JSON: ")


def test_export_proto_stores_wrapped_data():
    export_data = {}
    message = {"areas": {"0.0.0.0": {}}}
    options = export_proto(export_data, [], "GetLSDB", "lsdb", "lsdb.json", lambda: message)
    assert options == [ExportOption("lsdb", "GetLSDB", "lsdb.json")]
    stored = json.loads(export_data["GetLSDB"])
    assert stored["data"] == message
    datetime.strptime(stored["received_at"], "%Y-%m-%dT%H:%M:%SZ")


def test_export_proto_does_not_duplicate_option():
    export_data = {}
    options = export_proto(export_data, [], "k", "label", "f.json", lambda: {"a": 1})
    options = export_proto(export_data, options, "k", "label", "f.json", lambda: {"a": 2})
    assert len(options) == 1
    assert json.loads(export_data["k"])["data"] == {"a": 2}


def test_export_proto_fetch_error_propagates():
    export_data = {}
    existing = [ExportOption("x", "x", "x.json")]

    def failing():
        raise ConnectionError("backend down")

    with pytest.raises(ConnectionError, match="backend down"):
        export_proto(export_data, existing, "k", "label", "f.json", failing)
    assert export_data == {}
    assert existing == [ExportOption("x", "x", "x.json")]


def test_write_export_adds_json_extension(tmp_path):
    path = write_export_to_file("content", "report", tmp_path / "exports")
    assert path == tmp_path / "exports" / "report.json"
    assert path.read_text() == "content\n"


def test_write_export_keeps_json_extension_and_truncates(tmp_path):
    write_export_to_file("a much longer first content", "data.json", tmp_path)
    path = write_export_to_file("short", "data.json", tmp_path)
    assert path.name == "data.json"
    assert path.read_text() == "short\n"


def test_filter_rows_empty_query_returns_rows():
    rows = [["a"], ["b"]]
    assert filter_rows(rows, "") is rows


def test_filter_rows_case_insensitive():
    rows = [["Router", "10.0.0.1"], ["Network", "10.0.0.2"]]
    assert filter_rows(rows, "router") == [["Router", "10.0.0.1"]]


def test_filter_rows_matches_across_cells():
    rows = [["a1", "2b"], ["c", "d"]]
    assert filter_rows(rows, "1 2") == [["a1", "2b"]]


def test_filter_rows_no_match():
    assert filter_rows([["x"]], "y") == []


def test_render_table_contains_headers_and_cells():
    text = render_table(["Neighbor ID", "LSA Age"], [["10.0.0.1", "1.10"]])
    assert "Neighbor ID" in text
    assert "LSA Age" in text
    assert "10.0.0.1" in text
    assert "1.10" in text


def test_render_table_header_before_rows():
    text = render_table(["Route"], [["192.168.0.0"]])
    assert text.index("Route") < text.index("192.168.0.0")