"""Loading the YAML configuration file of the terminal interface."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

ENV_CONFIG_FILE = "FRR_MAD_CONFFILE"
ENV_PROFILE = "FRR_MAD_PROFILE"

_DEFAULT_LOCATION = "/etc/frr-mad/main.yaml"
_PROFILE_LOCATIONS = {
    "dev": "/tmp/dev-config.conf",
    "docker": "/app/config/main.yaml",
    "local": "../../local/dev-config.conf",
}

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"", "0", "f", "F", "FALSE", "false", "False"}


@dataclass
class DefaultConfig:
    temp_files: str = ""
    log_path: str = ""
    export_path: str = ""
    debug_level: str = ""


@dataclass
class PageConfig:
    enabled: bool = False


@dataclass
class FrrMadTuiConfig:
    pages: dict[str, PageConfig] = field(default_factory=dict)


@dataclass
class SocketConfig:
    unix_socket_location: str = ""
    unix_socket_name: str = ""
    socket_type: str = ""


@dataclass
class Config:
    default: DefaultConfig = field(default_factory=DefaultConfig)
    frr_mad_tui: FrrMadTuiConfig = field(default_factory=FrrMadTuiConfig)
    socket: SocketConfig = field(default_factory=SocketConfig)


def default_config_location(profile: str | None = None) -> str:
    """Return the configuration location used by a deployment profile.

    No profile gives the system location; ``dev``, ``docker`` and ``local``
    select their own locations. Any other profile raises ValueError.
    """
    if not profile:
        return _DEFAULT_LOCATION
    try:
        return _PROFILE_LOCATIONS[profile]
    except KeyError:
        raise ValueError(f"unknown configuration profile {profile!r}") from None


CONFIG_LOCATION = default_config_location(os.environ.get(ENV_PROFILE))


def get_yaml_path(location: str) -> str:
    """Replace the extension of ``location`` (if any) with ``.yaml``."""
    last_slash = location.rfind("/")
    dot = location.rfind(".")
    base = location[:dot] if dot > last_slash else location
    return base + ".yaml"


def load_config(location: str | None = None) -> Config:
    """Load the configuration.

    The location is ``location`` if given, else the ``FRR_MAD_CONFFILE``
    environment variable, else the default location. Whatever its extension,
    the ``.yaml`` file next to it is read.
    """
    if not location:
        location = os.environ.get(ENV_CONFIG_FILE, CONFIG_LOCATION)
    print("Loading configuration file:", location)
    return load_yaml_config(get_yaml_path(location))


def load_yaml_config(yaml_path: str | Path) -> Config:
    """Read and decode a YAML configuration file.

    Raises OSError if the file cannot be read and ValueError if it is not
    valid YAML or does not fit the configuration structure.
    """
    text = Path(yaml_path).read_text(encoding="utf-8")
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"error reading YAML config: {exc}") from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValueError("error reading YAML config: top level is not a mapping")
    data = _lower_keys(raw)
    try:
        return _build_config(data)
    except ValueError as exc:
        raise ValueError(f"error unmarshaling config: {exc}") from exc


def _lower_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key).lower(): _lower_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_lower_keys(item) for item in value]
    return value


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"'{key}' expected a map, got {type(value).__name__}")
    return value


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"'{key}' expected a string, got {type(value).__name__}")


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
        raise ValueError(f"'{key}' cannot parse {value!r} as bool")
    raise ValueError(f"'{key}' expected a bool, got {type(value).__name__}")


def _build_config(data: Mapping[str, Any]) -> Config:
    default = _section(data, "default")
    socket = _section(data, "socket")
    tui = _section(data, "frrmadtui")
    pages = {
        name: PageConfig(enabled=_boolean(_section(tui_pages, name), "enabled"))
        for tui_pages in (_section(tui, "pages"),)
        for name in tui_pages
    }
    return Config(
        default=DefaultConfig(
            temp_files=_string(default, "tempfiles"),
            log_path=_string(default, "logpath"),
            export_path=_string(default, "exportpath"),
            debug_level=_string(default, "debuglevel"),
        ),
        frr_mad_tui=FrrMadTuiConfig(pages=pages),
        socket=SocketConfig(
            unix_socket_location=_string(socket, "unixsocketlocation"),
            unix_socket_name=_string(socket, "unixsocketname"),
            socket_type=_string(socket, "sockettype"),
        ),
    )