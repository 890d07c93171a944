"""Command System Inspector - runs the real mount, who and df tools."""

import asyncio
import logging
from typing import List, Sequence

from .base_inspector import BaseSystemInspector
from ...config import Settings
from ...core.exceptions import InspectionError

MOUNT_LISTING_UNAVAILABLE = "mount listing unavailable"
SESSION_LISTING_UNAVAILABLE = "session listing unavailable"
USAGE_REPORT_UNAVAILABLE = "usage report unavailable"


async def run_command(command: Sequence[str], operation: str) -> str:
    """
    Run command and return its decoded stdout.

    There is no timeout; a hung tool stalls the caller until it exits.

    Raises:
        InspectionError: the command could not be started or exited non-zero
    """
    logging.debug(f"Running command: {' '.join(command)}")

    try:
        process = await asyncio.create_subprocess_exec(
            *command, stdout=asyncio.subprocess.PIPE, stderr=asyncio.subprocess.PIPE
        )
    except OSError as e:
        logging.error(f"Could not run {command[0]}: {e}")
        raise InspectionError(operation, command, str(e)) from e

    stdout, stderr = await process.communicate()

    if process.returncode != 0:
        error_msg = stderr.decode(errors="replace").strip() if stderr else ""
        logging.error(
            f"{command[0]} exited with status {process.returncode}: "
            f"{error_msg or 'no error output'}"
        )
        raise InspectionError(
            operation, command, f"exit status {process.returncode}"
        )

    return stdout.decode(errors="replace")


class CommandSystemInspector(BaseSystemInspector):
    """Inspector backed by child processes, one per call, no retry."""

    def __init__(self, settings: Settings):
        self._mount_command: List[str] = list(settings.mount_command)
        self._session_command: List[str] = list(settings.session_command)
        self._usage_command: List[str] = list(settings.usage_command)

    async def list_mounts(self) -> str:
        return await run_command(self._mount_command, MOUNT_LISTING_UNAVAILABLE)

    async def list_sessions(self) -> str:
        return await run_command(self._session_command, SESSION_LISTING_UNAVAILABLE)

    async def report_usage(self, mount_point: str) -> str:
        return await run_command(
            [*self._usage_command, mount_point], USAGE_REPORT_UNAVAILABLE
        )
