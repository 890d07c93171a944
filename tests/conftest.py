"""
Pytest configuration and shared fixtures.
"""

import pytest

from diskmoose.config import Settings
from diskmoose.dependencies import reset_singletons

MOUNT_LISTING = (
    "/dev/sda1 on / type ext4 (rw,relatime,errors=remount-ro)\n"
    "proc on /proc type proc (rw,nosuid,nodev,noexec,relatime)\n"
    "/dev/sda2 on /boot type ext4 (rw,relatime)\n"
    "tmpfs on /tmp type tmpfs (rw,nosuid,nodev)\n"
    "/dev/sda3 on /var type ext4 (rw,relatime)\n"
    "\n"
)

WHO_LISTING = (
    "alice    pts/0        2026-10-19 09:12 (10.0.0.5)\n"
    "alice    pts/1        2026-10-19 09:15 (:S.0)\n"
    "bob      tty1         2026-10-19 08:00\n"
    "carol    pts/4        2026-10-19 10:01 (laptop.local)\n"
)


def df_report(mount_point: str, free: str, device: str = "/dev/sda1") -> str:
    """Header plus one data line the way df -BM prints it."""
    return (
        "Filesystem     1M-blocks  Used Available Use% Mounted on\n"
        f"{device}         10240M 5000M     {free}  49% {mount_point}\n"
    )


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before each test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from env files, logging into tmp_path."""
    return Settings(
        _env_file=None,
        check_interval_seconds=0.01,
        device_directory=str(tmp_path / "dev"),
        log_file_path=str(tmp_path / "logs" / "diskmoose.log"),
    )


@pytest.fixture
def mount_listing():
    return MOUNT_LISTING


@pytest.fixture
def who_listing():
    return WHO_LISTING


@pytest.fixture
def make_df_report():
    return df_report
