from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.host_config import get_hostname_settings_file

DEFAULT_MOUNT_POINTS = ["/", "/tmp", "/var", "/var/log", "/var/cache", "/usr", "/home"]


class Settings(BaseSettings):
    # Free space monitoring
    free_space_threshold_mb: int = 100
    check_interval_seconds: float = 120
    relevant_mount_points: List[str] = Field(
        default_factory=lambda: list(DEFAULT_MOUNT_POINTS)
    )
    fallback_mount_point: str = "/"

    # Terminal sessions
    detached_session_marker: str = ":S."  # who marks screen sessions like "(:S.0)"
    device_directory: str = "/dev"

    # External tools
    mount_command: List[str] = Field(default_factory=lambda: ["/bin/mount"])
    session_command: List[str] = Field(default_factory=lambda: ["/usr/bin/who"])
    usage_command: List[str] = Field(default_factory=lambda: ["/bin/df", "-BM"])
    cowsay_command: List[str] = Field(default_factory=lambda: ["/usr/bin/cowsay"])
    cow_type: str = "moose"

    # Logging konfiguration
    log_level: str = "INFO"
    log_file_path: str = "logs/diskmoose.log"
    log_retention_days: int = 30

    model_config = SettingsConfigDict(
        env_prefix="DISKMOOSE_",
        env_file=get_hostname_settings_file(),
        extra="ignore",
    )

    @field_validator("free_space_threshold_mb")
    @classmethod
    def _threshold_not_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("free_space_threshold_mb must not be negative")
        return value

    @field_validator("check_interval_seconds")
    @classmethod
    def _interval_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("check_interval_seconds must be positive")
        return value

    @field_validator("relevant_mount_points")
    @classmethod
    def _absolute_mount_points(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("relevant_mount_points must not be empty")
        for mount_point in value:
            if not mount_point.startswith("/"):
                raise ValueError(f"Mount point is not absolute: {mount_point}")
        return value

    @field_validator("mount_command", "session_command", "usage_command", "cowsay_command")
    @classmethod
    def _command_not_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("Command must contain at least the executable")
        return value

    @property
    def log_directory(self) -> Path:
        """Returnerer log directory som Path objekt"""
        return Path(self.log_file_path).parent

    @property
    def config_file_info(self) -> dict:
        """Return information about which configuration file is being used."""
        from .utils.host_config import get_hostname, list_all_settings_files

        return {
            "hostname": get_hostname(),
            "active_config_file": get_hostname_settings_file(),
            "all_available_configs": list_all_settings_files(),
        }
