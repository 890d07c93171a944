"""
Disk Monitor Module

Components:
- DiskMonitorService: Poll loop - evaluate mount points, warn, sleep, repeat
"""

from .disk_monitor import DiskMonitorService, describe_mount_points, low_space_message

__all__ = ["DiskMonitorService", "describe_mount_points", "low_space_message"]
