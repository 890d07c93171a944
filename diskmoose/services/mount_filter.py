import logging
from typing import Iterable, List, Optional

from .system_inspector import BaseSystemInspector
from .table_parser import data_lines, fields
from ..config import DEFAULT_MOUNT_POINTS, Settings
from ..core.exceptions import InspectionError

MOUNT_PATH_FIELD = 2  # "<device> on <path> type <fstype> (<options>)"
SESSION_DEVICE_FIELD = 1  # "<user> <tty> <date> <time> (<host>)"
DEFAULT_DETACHED_MARKER = ":S."


def is_relevant_mount(path: str, allowed: Iterable[str] = DEFAULT_MOUNT_POINTS) -> bool:
    """Exact membership only; "/var2" and "/var/" are not "/var"."""
    return path in set(allowed)


def relevant_mounts(
    listing: Optional[str],
    allowed: Iterable[str] = DEFAULT_MOUNT_POINTS,
    fallback: str = "/",
) -> List[str]:
    """
    Mount points from a mount listing that are in the allow-list.

    A failed listing (None) or one with a line too short to hold a mount
    path falls back to [fallback].
    """
    if listing is None:
        return [fallback]

    allowed = set(allowed)
    result: List[str] = []
    for line in data_lines(listing):
        columns = fields(line)
        if len(columns) <= MOUNT_PATH_FIELD:
            logging.warning(f"Unparseable mount listing line: {line!r}")
            return [fallback]
        mount_point = columns[MOUNT_PATH_FIELD]
        if is_relevant_mount(mount_point, allowed):
            result.append(mount_point)
    return result


def active_sessions(
    listing: Optional[str], marker: str = DEFAULT_DETACHED_MARKER
) -> List[str]:
    """Terminal devices of attached sessions, in listing order."""
    if listing is None:
        return []

    result: List[str] = []
    for line in data_lines(listing):
        if marker and marker in line:
            # skip sessions inside screen
            continue
        columns = fields(line)
        if len(columns) <= SESSION_DEVICE_FIELD:
            logging.warning(f"Skipping unparseable session line: {line!r}")
            continue
        result.append(columns[SESSION_DEVICE_FIELD])
    return result


class MountSessionFilter:
    """Asks the inspector for listings and degrades when a listing fails."""

    def __init__(self, settings: Settings, inspector: BaseSystemInspector):
        self._settings = settings
        self._inspector = inspector

    async def relevant_mount_points(self) -> List[str]:
        try:
            listing: Optional[str] = await self._inspector.list_mounts()
        except InspectionError as e:
            logging.warning(
                f"Could not run mount ({e}) - "
                f"falling back to {self._settings.fallback_mount_point}"
            )
            listing = None

        mount_points = relevant_mounts(
            listing,
            self._settings.relevant_mount_points,
            self._settings.fallback_mount_point,
        )
        logging.debug(f"Relevant mount points: {', '.join(mount_points) or '(none)'}")
        return mount_points

    async def active_sessions(self) -> List[str]:
        try:
            listing: Optional[str] = await self._inspector.list_sessions()
        except InspectionError as e:
            logging.warning(f"Could not run who ({e}) - no sessions will be notified")
            listing = None

        sessions = active_sessions(listing, self._settings.detached_session_marker)
        logging.debug(f"Active sessions: {', '.join(sessions) or '(none)'}")
        return sessions
