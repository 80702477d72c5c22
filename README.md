# frrmad

Helpers for watching an OSPF router that runs FRR: loading the YAML
configuration, running `vtysh` and shell commands, sorting and filtering
tables of addresses, exporting data as timestamped JSON, and rendering the
OSPF monitoring pages (link-state database, router, network and external
LSAs, neighbours, running configuration) as plain text.

## Configuration (`frrmad.config`)

Configuration is read from a YAML file. Whatever extension the configured
file has, the `.yaml` file with the same base name is read.

```python
from frrmad.config import load_config, load_yaml_config, get_yaml_path

config = load_config()                  # prints the location it loads
print(config.default.export_path)
print(config.socket.unix_socket_name)
print(config.frr_mad_tui.pages)         # {name: PageConfig(enabled=...)}

get_yaml_path("path/to/config.conf")    # "path/to/config.yaml"
get_yaml_path("config")                 # "config.yaml"
```

The location is chosen in this order: the argument to `load_config`, the
environment variable `FRR_MAD_CONFFILE`, then `frrmad.config.CONFIG_LOCATION`.
`CONFIG_LOCATION` is `/etc/frr-mad/main.yaml` unless the environment variable
`FRR_MAD_PROFILE` names a profile when the module is imported;
`default_config_location(profile)` gives the location for `dev`, `docker` or
`local` and raises `ValueError` for any other profile.

`load_yaml_config` raises `OSError` when the file cannot be read and
`ValueError` when it is not valid YAML or its values do not fit. Keys are
matched case-insensitively. The file holds three sections:

```yaml
default:
  tempfiles: /tmp/frr-mad
  logpath: /var/log/frr-mad
  exportpath: /tmp/frr-mad/exports
  debuglevel: error
frrmadtui:
  pages:
    dashboard:
      enabled: true
socket:
  unixsocketlocation: /var/run/frr-mad
  unixsocketname: analyzer.sock
  sockettype: unix
```

## Tables, filters and exports (`frrmad.utils`, `frrmad.models`)

```python
from frrmad.models import ExportOption, add_export_option, sort_ips, sort_prefixes
from frrmad.utils import (
    export_proto, filter_rows, render_table, sort_table_by_ip_column, write_export_to_file,
)

rows = [["10.0.0.2", "Full"], ["10.0.0.10", "Init"], ["10.0.0.1", "Full"]]
sort_table_by_ip_column(rows)           # in place, by address; unparsable cells as text
filter_rows(rows, "full")               # case-insensitive match on any cell
print(render_table(["Address", "State"], rows))

sort_ips(["10.0.0.10", "10.0.0.2"])     # ["10.0.0.2", "10.0.0.10"]
sort_prefixes(["10.0.0.0/24", "10.0.0.0/16"])   # ValueError on an invalid prefix

export_data: dict[str, str] = {}
options = export_proto(export_data, [], "GetLSDB", "link-state database",
                       "link-state_database.json", lambda: {"areas": {}})
# export_data["GetLSDB"] holds {"received_at": "...Z", "data": {...}} as indented JSON

write_export_to_file(export_data["GetLSDB"], "lsdb", "/tmp/frr-mad/exports")
# writes /tmp/frr-mad/exports/lsdb.json and returns its path
```

`add_export_option` adds an option only when no existing one has the same
`map_key`. `has_any_anomaly` tells whether an anomaly report sets any of
`has_un_advertised_prefixes`, `has_over_advertised_prefixes`,
`has_duplicate_prefixes` or `has_misconfigured_prefixes`.
`frrmad.models` also holds the small data types `StatusSeverity`,
`WindowSize`, `Tab`, `Filter`, `FooterOption`, `ExportOption` and
`TimedPayload`.

## Running commands on the router (`frrmad.shell`)

```python
from frrmad.shell import CommandError, CommandTimeout, run_custom_command

output = run_custom_command("vtysh", "show ip ospf neighbor", 5.0)
output = run_custom_command("bash", "ip route", 5.0)
```

With `vtysh` the command goes to `vtysh -c`; with any other shell it is split
on whitespace and run directly. `timeout` is in seconds. A failing command
raises `CommandError` (with `output` and `exit_code`); one that does not finish
in time raises `CommandTimeout`. `get_running_config` and `get_ospf_data` ask
`vtysh` for the running configuration and the neighbour list;
`show_running_config` and `detect_ospf_anomalies` split such text into lines.

## OSPF pages (`frrmad.ospf_view`, `frrmad.ospf_lsdb_view`)

The renderers take a backend object supplied by the caller. It provides
`get_lsdb()`, `get_ospf_neighbor_interfaces()`, `get_ospf_router_data_self()`,
`get_ospf_p2p_interface_mapping()`, `get_ospf_network_data_self()`,
`get_ospf_external_data_self()`, `get_ospf_nssa_external_data_self()`,
`get_ospf_neighbors()`, `get_router_name()` (a pair whose first item is the
name) and `get_static_frr_configuration_pretty()`. The data they return may be
mappings or objects with snake_case fields. When a call raises, the page shows
an error text in place of the tab.

```python
from frrmad.models import Filter
from frrmad.ospf_view import render_ospf

text = render_ospf(backend, 0, Filter(query="10.0.0", active=True))
```

Sub-tabs: 0 link-state database, 1 router LSAs, 2 network LSAs, 3 external
LSAs, 4 neighbours, 5 running configuration (`running_config` is a list of
lines). Each tab is also available on its own, e.g. `render_lsdb_tab`,
`render_router_tab`, `render_network_tab`, `render_external_tab`,
`render_neighbor_tab` and `render_running_config_tab`; `lsdb_area_tables`
returns the LSA tables of one area as `(title, headers, rows)`.

## Version information (`frrmad.version`)

`set_app_version_info(...)` stores daemon and interface versions, commit,
build date and repository location; `get_app_version_info()` returns them as an
`AppVersionInfo`.

## What this package does not do

- It has no command-line program and no interactive screen: it renders text
  that a caller displays.
- It does not talk to the analyzer daemon; the backend object passed to the
  renderers must be provided by the caller.
- There is no dashboard page, no anomaly table rendering and no clipboard
  copying.