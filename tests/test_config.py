import pytest

from frrmad import config as cfg

MAIN_YAML = """\
default:
  tempfiles: /tmp/frr-mad
  logpath: /var/log/frr-mad
  exportpath: /tmp/frr-mad/exports
  debuglevel: error
socket:
  unixsocketlocation: /var/run/frr-mad
  unixsocketname: analyzer.sock
  sockettype: unix
frrmadtui:
  pages:
    Dashboard:
      enabled: true
    ospf:
      enabled: "false"
"""

INVALID_YAML = """{
\t\tinvalid: yaml: content
\t\tmissing: quotes
\t\t- invalid: structure
\t}"""

INCOMPATIBLE_YAML = """
completely_different_structure:
  - item1
  - item2
random_field: "value"
numeric_array: [1, 2, 3, 4, 5]
"""


@pytest.fixture
def main_yaml(tmp_path):
    path = tmp_path / "main.yaml"
    path.write_text(MAIN_YAML)
    return path


def _check_main(config):
    assert config.default.temp_files == "/tmp/frr-mad"
    assert config.default.debug_level == "error"
    assert config.default.log_path == "/var/log/frr-mad"
    assert config.socket.unix_socket_location == "/var/run/frr-mad"
    assert config.socket.unix_socket_name == "analyzer.sock"
    assert config.socket.socket_type == "unix"


def test_load_config_with_explicit_path(main_yaml, monkeypatch):
    monkeypatch.delenv(cfg.ENV_CONFIG_FILE, raising=False)
    config = cfg.load_config(str(main_yaml))
    _check_main(config)
    assert config.default.export_path == "/tmp/frr-mad/exports"


def test_load_config_with_env_variable(main_yaml, monkeypatch):
    monkeypatch.setenv(cfg.ENV_CONFIG_FILE, str(main_yaml))
    _check_main(cfg.load_config())


def test_load_config_reads_yaml_beside_other_extension(main_yaml):
    _check_main(cfg.load_config(str(main_yaml.with_suffix(".conf"))))


def test_pages_keys_are_lowercased_and_bools_parsed(main_yaml):
    config = cfg.load_config(str(main_yaml))
    assert config.frr_mad_tui.pages == {
        "dashboard": cfg.PageConfig(enabled=True),
        "ospf": cfg.PageConfig(enabled=False),
    }


def test_load_config_default_path_missing_yaml(tmp_path):
    (tmp_path / "config.txt").write_text("")
    with pytest.raises(FileNotFoundError):
        cfg.load_config(str(tmp_path / "config.txt"))


def test_default_config_location():
    assert cfg.default_config_location(None) == "/etc/frr-mad/main.yaml"
    assert cfg.default_config_location("dev") == "/tmp/dev-config.conf"
    assert cfg.default_config_location("docker") == "/app/config/main.yaml"
    assert cfg.default_config_location("local") == "../../local/dev-config.conf"


def test_default_config_location_unknown_profile():
    with pytest.raises(ValueError):
        cfg.default_config_location("staging")


def test_get_yaml_path_success():
    assert cfg.get_yaml_path("mock-files/main.yaml") == "mock-files/main.yaml"


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        ("config.txt", "config.yaml"),
        ("config.json", "config.yaml"),
        ("config", "config.yaml"),
        ("path/to/config.conf", "path/to/config.yaml"),
    ],
)
def test_get_yaml_path_with_various_extensions(location, expected):
    assert cfg.get_yaml_path(location) == expected


def test_get_yaml_path_dot_in_directory_only():
    assert cfg.get_yaml_path("etc.d/config") == "etc.d/config.yaml"


def test_load_yaml_config_success(main_yaml):
    _check_main(cfg.load_yaml_config(main_yaml))


def test_load_config_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        cfg.load_config(str(tmp_path / "non-existent" / "config.txt"))


def test_load_yaml_config_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        cfg.load_yaml_config(tmp_path / "non-existent" / "config.yaml")


def test_load_config_invalid_yaml_file(tmp_path):
    (tmp_path / "invalid-config.txt").write_text("")
    (tmp_path / "invalid-config.yaml").write_text(INVALID_YAML)
    with pytest.raises(ValueError):
        cfg.load_config(str(tmp_path / "invalid-config.txt"))


def test_load_yaml_config_invalid_content(tmp_path):
    path = tmp_path / "invalid-config.yaml"
    path.write_text(INVALID_YAML)
    with pytest.raises(ValueError, match="error reading YAML config"):
        cfg.load_yaml_config(path)


def test_load_yaml_config_incompatible_structure(tmp_path):
    path = tmp_path / "incompatible-config.yaml"
    path.write_text(INCOMPATIBLE_YAML)
    assert cfg.load_yaml_config(path) == cfg.Config()


def test_load_yaml_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert cfg.load_yaml_config(path) == cfg.Config()


def test_load_yaml_config_top_level_list(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        cfg.load_yaml_config(path)


def test_load_yaml_config_wrong_field_type(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("default:\n  tempfiles:\n    nested: value\n")
    with pytest.raises(ValueError, match="error unmarshaling config"):
        cfg.load_yaml_config(path)


def test_load_yaml_config_weak_scalar_conversion(tmp_path):
    path = tmp_path / "weak.yaml"
    path.write_text("default:\n  debuglevel: 5\n")
    assert cfg.load_yaml_config(path).default.debug_level == "5"