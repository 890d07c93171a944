"""Scripted System Inspector - canned tool output for tests and dry runs."""

from typing import Dict, List, Optional, Tuple

from .base_inspector import BaseSystemInspector
from .command_inspector import (
    MOUNT_LISTING_UNAVAILABLE,
    SESSION_LISTING_UNAVAILABLE,
    USAGE_REPORT_UNAVAILABLE,
)
from ...core.exceptions import InspectionError


class ScriptedSystemInspector(BaseSystemInspector):
    """
    Inspector that replays fixed text instead of spawning processes.

    A listing of None means the tool fails. Usage reports are looked up per
    mount point; a missing entry fails like df would for an unknown path.
    Every call is recorded in `calls` as (operation, argument).
    """

    def __init__(
        self,
        mounts: Optional[str] = "",
        sessions: Optional[str] = "",
        usage: Optional[Dict[str, str]] = None,
    ):
        self.mounts = mounts
        self.sessions = sessions
        self.usage: Dict[str, str] = dict(usage or {})
        self.calls: List[Tuple[str, Optional[str]]] = []

    async def list_mounts(self) -> str:
        self.calls.append(("list_mounts", None))
        if self.mounts is None:
            raise InspectionError(MOUNT_LISTING_UNAVAILABLE, ["mount"], "scripted failure")
        return self.mounts

    async def list_sessions(self) -> str:
        self.calls.append(("list_sessions", None))
        if self.sessions is None:
            raise InspectionError(SESSION_LISTING_UNAVAILABLE, ["who"], "scripted failure")
        return self.sessions

    async def report_usage(self, mount_point: str) -> str:
        self.calls.append(("report_usage", mount_point))
        if mount_point not in self.usage:
            raise InspectionError(
                USAGE_REPORT_UNAVAILABLE, ["df", mount_point], "no scripted report"
            )
        return self.usage[mount_point]

    def usage_calls(self) -> List[str]:
        """Mount points report_usage was called for, in call order."""
        return [arg for op, arg in self.calls if op == "report_usage" and arg is not None]
