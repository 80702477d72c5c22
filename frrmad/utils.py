"""Helpers for tables, anomalies and data export."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from functools import cmp_to_key
from pathlib import Path
from typing import Any, Callable, Sequence

from tabulate import tabulate

from .models import ExportOption, add_export_option, ip_sort_key

_ANOMALY_FLAGS = (
    "has_un_advertised_prefixes",
    "has_over_advertised_prefixes",
    "has_duplicate_prefixes",
    "has_misconfigured_prefixes",
)


def _field(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def contains_string(items: Sequence[str], value: str) -> bool:
    """Return True if ``value`` is one of ``items``."""
    return value in items


def has_any_anomaly(anomaly: Any) -> bool:
    """Return True if an anomaly report flags any kind of anomaly."""
    if anomaly is None:
        return False
    return any(bool(_field(anomaly, flag, False)) for flag in _ANOMALY_FLAGS)


def backend_error_text(err: object, function_name: str) -> str:
    """Message shown when the backend delivered no data for a call."""
    return (
        f"Error: \n{err}\n\nNo data received from backend for "
        f"'{function_name}()'. Press 'r' to reload..."
    )


def _compare_first_column(a: Sequence[str], b: Sequence[str]) -> int:
    key_a, key_b = ip_sort_key(a[0]), ip_sort_key(b[0])
    if key_a is None or key_b is None:
        left, right = a[0], b[0]
    else:
        left, right = key_a, key_b
    return (left > right) - (left < right)


def sort_table_by_ip_column(table: list[Sequence[str]]) -> None:
    """Sort table rows in place by their first column as IP addresses."""
    table.sort(key=cmp_to_key(_compare_first_column))


def _json_default(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def pretty_print_json(message: Any) -> str:
    """Render a message as indented JSON, or an error text if that fails."""
    try:
        return json.dumps(message, indent=2, default=_json_default)
    except (TypeError, ValueError) as exc:
        return "Failed to marshal proto message to JSON: " + str(exc)


def export_proto(
    export_data: dict[str, str],
    export_options: list[ExportOption],
    key: str,
    label: str,
    filename: str,
    fetch: Callable[[], Any],
) -> list[ExportOption]:
    """Fetch a message, store it under ``key`` with a UTC timestamp, and register it.

    Returns the export options with an entry for ``key`` added if missing.
    Errors from ``fetch`` or serialization propagate unchanged.
    """
    message = fetch()
    wrapper = {
        "received_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "data": message,
    }
    export_data[key] = json.dumps(wrapper, indent=2, default=_json_default)
    return add_export_option(export_options, ExportOption(label, key, filename))


def _extension(filename: str) -> str:
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def write_export_to_file(data: str, filename: str, directory: str | Path) -> Path:
    """Write ``data`` to ``directory/filename``, forcing a ``.json`` extension.

    Existing files are truncated. Returns the path written.
    """
    export_dir = Path(directory)
    export_dir.mkdir(parents=True, exist_ok=True)
    if _extension(filename) != ".json":
        filename = filename + ".json"
    path = export_dir / filename
    with path.open("w", encoding="utf-8") as handle:
        handle.write(data + "\n")
    return path


def filter_rows(rows: list[Sequence[str]], query: str) -> list[Sequence[str]]:
    """Keep rows whose space-joined cells contain ``query``, case-insensitively."""
    if not query:
        return rows
    needle = query.lower()
    return [row for row in rows if needle in " ".join(row).lower()]


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render rows under headers as a text table, leaving cell text untouched."""
    return tabulate(
        [list(row) for row in rows],
        headers=list(headers),
        tablefmt="grid",
        disable_numparse=True,
    )