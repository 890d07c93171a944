import asyncio
import logging
from typing import List, Optional

from ..moose_says import MooseSays
from ..mount_filter import MountSessionFilter
from ..notifier import TerminalNotifier
from ..space_evaluator import SpaceEvaluator
from ...config import Settings
from ...core.exceptions import MonitorAbortedError, SpaceEvaluationError
from ...models import MonitorState, SpaceReport


def describe_mount_points(mount_points: List[str]) -> str:
    """"/", "/tmp" and "/var" -> "/, /tmp or /var"."""
    if len(mount_points) <= 1:
        return "".join(mount_points)
    return f"{', '.join(mount_points[:-1])} or {mount_points[-1]}"


def low_space_message(report: SpaceReport) -> str:
    return f"Only {report.free_mb} MB free on {report.mount_point}"


class DiskMonitorService:
    def __init__(
        self,
        settings: Settings,
        session_filter: MountSessionFilter,
        space_evaluator: SpaceEvaluator,
        notifier: TerminalNotifier,
        moose: MooseSays,
    ):
        self._settings = settings
        self._session_filter = session_filter
        self._space_evaluator = space_evaluator
        self._notifier = notifier
        self._moose = moose

        self._state = MonitorState.IDLE
        self._is_running = False
        self._stop_event: Optional[asyncio.Event] = None
        self._cycle_count = 0
        self._last_reports: List[SpaceReport] = []

    @property
    def state(self) -> MonitorState:
        return self._state

    async def announce(self) -> str:
        greeting = (
            f"I'll let you know if there are less than "
            f"{self._settings.free_space_threshold_mb} MB free on "
            f"{describe_mount_points(self._settings.relevant_mount_points)}, "
            f"just keep me running in the background."
        )
        decorated = await self._moose.say(greeting)
        print(decorated, flush=True)
        return decorated

    async def start_monitoring(self) -> None:
        """
        Announce, then check all mount points every check_interval_seconds.

        Returns after stop_monitoring(). Raises MonitorAbortedError as soon
        as free space cannot be measured for a mount point.
        """
        if self._is_running:
            logging.warning("Disk monitoring already running")
            return

        self._is_running = True
        self._stop_event = asyncio.Event()
        await self.announce()

        logging.info(
            f"Disk monitoring loop starting - checking every "
            f"{self._settings.check_interval_seconds}s, "
            f"threshold {self._settings.free_space_threshold_mb} MB"
        )
        try:
            while self._is_running:
                await self.run_cycle()
                await self._sleep()
        except MonitorAbortedError:
            self._state = MonitorState.ABORTED
            raise
        finally:
            self._is_running = False

        self._state = MonitorState.STOPPED
        logging.info("Disk monitoring stopped")

    def stop_monitoring(self) -> None:
        if not self._is_running:
            return

        logging.info("Stopping disk monitoring")
        self._is_running = False
        if self._stop_event:
            self._stop_event.set()

    async def run_cycle(self) -> List[SpaceReport]:
        """Check every relevant mount point once, in order. Fail fast."""
        self._state = MonitorState.POLLING
        mount_points = await self._session_filter.relevant_mount_points()

        reports: List[SpaceReport] = []
        for mount_point in mount_points:
            self._state = MonitorState.EVALUATING
            try:
                report = await self._space_evaluator.evaluate(mount_point)
            except SpaceEvaluationError as e:
                logging.error(f"Could not get free space for {mount_point}: {e}")
                logging.error("Aborting.")
                self._state = MonitorState.ABORTED
                raise MonitorAbortedError(mount_point, e) from e

            reports.append(report)
            logging.debug(f"{report.free_mb} MB free on {mount_point}")

            if report.is_low(self._settings.free_space_threshold_mb):
                await self._warn(report)

        self._cycle_count += 1
        self._last_reports = reports
        return reports

    async def _warn(self, report: SpaceReport) -> None:
        self._state = MonitorState.NOTIFYING
        message = low_space_message(report)
        logging.warning(
            f"{message} (threshold {self._settings.free_space_threshold_mb} MB)"
        )
        await self._notifier.notify_all(await self._moose.say(message))

    async def _sleep(self) -> None:
        if not self._is_running:
            return

        self._state = MonitorState.SLEEPING
        try:
            await asyncio.wait_for(
                self._stop_event.wait(), timeout=self._settings.check_interval_seconds
            )
        except asyncio.TimeoutError:
            pass

    def get_monitoring_status(self) -> dict:
        return {
            "state": self._state.value,
            "is_running": self._is_running,
            "cycle_count": self._cycle_count,
            "check_interval_seconds": self._settings.check_interval_seconds,
            "free_space_threshold_mb": self._settings.free_space_threshold_mb,
            "last_reports": [
                {"mount_point": r.mount_point, "free_mb": r.free_mb}
                for r in self._last_reports
            ],
        }
