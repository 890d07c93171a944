import logging
import os

import aiofiles

from .mount_filter import MountSessionFilter
from ..config import Settings


def open_existing_device(path: str, flags: int) -> int:
    # Append to the device node; never create a regular file in its place
    return os.open(path, os.O_WRONLY | os.O_APPEND)


class TerminalNotifier:
    """Best-effort broadcast of a message to every attached terminal."""

    def __init__(self, settings: Settings, session_filter: MountSessionFilter):
        self._device_directory = settings.device_directory
        self._session_filter = session_filter

    async def notify_all(self, message: str) -> int:
        """Write message to all active sessions. Returns how many were written."""
        sessions = await self._session_filter.active_sessions()
        if not sessions:
            logging.info("No active sessions to notify")
            return 0

        delivered = 0
        for session in sessions:
            if await self.write_to_session(session, message):
                delivered += 1

        logging.info(f"Low space warning delivered to {delivered}/{len(sessions)} sessions")
        return delivered

    async def write_to_session(self, session: str, message: str) -> bool:
        device_path = os.path.join(self._device_directory, session)
        try:
            async with aiofiles.open(device_path, "a", opener=open_existing_device) as f:
                await f.write("\n" + message + "\n")
        except OSError as e:
            logging.warning(f"Could not open {device_path} for append: {e}")
            return False

        logging.debug(f"Wrote warning to {device_path}")
        return True
