"""Build and version information of the application."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppVersionInfo:
    """Versions and build metadata shown in the interface."""

    daemon_version: str = "unknown1"
    tui_version: str = "unknown1"
    git_commit: str = "unknown1"
    build_date: str = "unknown1"
    repo_url: str = ""


_current = AppVersionInfo()


def set_app_version_info(
    daemon_version: str,
    tui_version: str,
    git_commit: str,
    build_date: str,
    repo_url: str,
) -> None:
    """Replace the stored version information."""
    global _current
    _current = AppVersionInfo(daemon_version, tui_version, git_commit, build_date, repo_url)


def get_app_version_info() -> AppVersionInfo:
    """Return the stored version information."""
    return _current