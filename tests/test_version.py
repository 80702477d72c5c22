import pytest

from frrmad.version import AppVersionInfo, get_app_version_info, set_app_version_info


@pytest.fixture
def restore_version():
    saved = get_app_version_info()
    yield
    set_app_version_info(
        saved.daemon_version,
        saved.tui_version,
        saved.git_commit,
        saved.build_date,
        saved.repo_url,
    )


def test_defaults_are_unknown():
    info = AppVersionInfo()
    assert info.daemon_version == "unknown1"
    assert info.tui_version == "unknown1"
    assert info.git_commit == "unknown1"
    assert info.build_date == "unknown1"


def test_set_then_get_round_trip(restore_version):
    set_app_version_info("1.2.0", "0.9.1", "abc1234", "2025-01-01:10:00:00", "repo")
    assert get_app_version_info() == AppVersionInfo(
        "1.2.0", "0.9.1", "abc1234", "2025-01-01:10:00:00", "repo"
    )


def test_info_is_immutable(restore_version):
    set_app_version_info("a", "b", "c", "d", "e")
    info = get_app_version_info()
    with pytest.raises(AttributeError):
        info.git_commit = "other"
    assert get_app_version_info().git_commit == "c"