import logging
from typing import List

from .system_inspector.command_inspector import run_command
from ..config import Settings
from ..core.exceptions import InspectionError


class MooseSays:
    """Decorates messages with cowsay. Falls back to the plain message."""

    def __init__(self, settings: Settings):
        self._command: List[str] = list(settings.cowsay_command)
        self._cow_type = settings.cow_type

    async def say(self, message: str) -> str:
        command = [*self._command, "-f", self._cow_type, message]
        try:
            decorated = await run_command(command, "message decoration unavailable")
        except InspectionError as e:
            logging.warning(f"Could not run cowsay ({e}) - using plain message")
            return message

        if not decorated.strip():
            return message
        return decorated.rstrip("\n")
