"""
Host-specific configuration management utility.

Selects a hostname-specific env file when one exists, so the same checkout
can be shared between machines with different tool paths or thresholds.
"""

import socket
from pathlib import Path

BASE_SETTINGS_FILE = "diskmoose.env"
HOST_SETTINGS_SUFFIX = "-diskmoose.env"


def get_hostname() -> str:
    """Get the current hostname (without domain)."""
    return socket.gethostname().split(".")[0]


def get_hostname_settings_file() -> str:
    """
    Get the appropriate settings file for this host.

    Logic:
    1. Get current hostname
    2. Use {hostname}-diskmoose.env if it exists
    3. Otherwise fall back to diskmoose.env (which may be missing; defaults apply)

    Returns:
        str: Path to the settings file pydantic-settings should read
    """
    host_settings = Path(f"{get_hostname()}{HOST_SETTINGS_SUFFIX}")
    if host_settings.exists():
        return str(host_settings)
    return BASE_SETTINGS_FILE


def list_all_settings_files() -> list[str]:
    """
    List all available settings files (base + host-specific).

    Returns:
        list[str]: List of settings file paths
    """
    settings_files = []

    if Path(BASE_SETTINGS_FILE).exists():
        settings_files.append(BASE_SETTINGS_FILE)

    for file_path in sorted(Path(".").glob(f"*{HOST_SETTINGS_SUFFIX}")):
        settings_files.append(str(file_path))

    return settings_files
