from functools import lru_cache
from typing import Any, Dict

from .config import Settings
from .services.disk_monitor import DiskMonitorService
from .services.moose_says import MooseSays
from .services.mount_filter import MountSessionFilter
from .services.notifier import TerminalNotifier
from .services.space_evaluator import SpaceEvaluator
from .services.system_inspector import BaseSystemInspector, CommandSystemInspector

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Hent Settings singleton instance."""
    return Settings()


def get_system_inspector() -> BaseSystemInspector:
    if "system_inspector" not in _singletons:
        _singletons["system_inspector"] = CommandSystemInspector(get_settings())
    return _singletons["system_inspector"]


def get_mount_session_filter() -> MountSessionFilter:
    if "mount_session_filter" not in _singletons:
        _singletons["mount_session_filter"] = MountSessionFilter(
            settings=get_settings(), inspector=get_system_inspector()
        )
    return _singletons["mount_session_filter"]


def get_space_evaluator() -> SpaceEvaluator:
    if "space_evaluator" not in _singletons:
        _singletons["space_evaluator"] = SpaceEvaluator(get_system_inspector())
    return _singletons["space_evaluator"]


def get_moose() -> MooseSays:
    if "moose" not in _singletons:
        _singletons["moose"] = MooseSays(get_settings())
    return _singletons["moose"]


def get_notifier() -> TerminalNotifier:
    if "notifier" not in _singletons:
        _singletons["notifier"] = TerminalNotifier(
            settings=get_settings(), session_filter=get_mount_session_filter()
        )
    return _singletons["notifier"]


def get_disk_monitor() -> DiskMonitorService:
    if "disk_monitor" not in _singletons:
        _singletons["disk_monitor"] = DiskMonitorService(
            settings=get_settings(),
            session_filter=get_mount_session_filter(),
            space_evaluator=get_space_evaluator(),
            notifier=get_notifier(),
            moose=get_moose(),
        )
    return _singletons["disk_monitor"]


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    _singletons.clear()
    get_settings.cache_clear()
