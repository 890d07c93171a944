import logging
from typing import List

from .system_inspector import BaseSystemInspector
from .table_parser import data_lines, fields
from ..core.exceptions import (
    InspectionError,
    InsufficientOutputError,
    MissingUnitSuffixError,
    MountMismatchError,
    NumericParseError,
    UsageReportUnavailableError,
)
from ..models import SpaceReport

# df -BM columns: Filesystem 1M-blocks Used Available Use% Mounted on
FREE_FIELD = 3
MOUNT_FIELD = 5
UNIT_SUFFIX = "M"


class SpaceEvaluator:
    """Turns a df report into the number of free megabytes on a mount point."""

    def __init__(self, inspector: BaseSystemInspector):
        self._inspector = inspector

    async def free_space_mb(self, mount_point: str) -> int:
        """
        Free megabytes on mount_point.

        Raises:
            SpaceEvaluationError: one of its subclasses, naming what was wrong
        """
        try:
            output = await self._inspector.report_usage(mount_point)
        except InspectionError as e:
            raise UsageReportUnavailableError(mount_point, e) from e

        columns = self._data_fields(output)
        logging.debug(f"df fields for {mount_point}: {columns}")
        if len(columns) <= MOUNT_FIELD:
            raise InsufficientOutputError(mount_point, len(columns))

        reported_mount_point = columns[MOUNT_FIELD]
        if reported_mount_point != mount_point:
            raise MountMismatchError(mount_point, reported_mount_point)

        free_field = columns[FREE_FIELD]
        if UNIT_SUFFIX not in free_field:
            raise MissingUnitSuffixError(mount_point, free_field)

        number = free_field.split(UNIT_SUFFIX, 1)[0]
        if not (number.isascii() and number.isdigit()):
            raise NumericParseError(mount_point, free_field)

        return int(number)

    async def evaluate(self, mount_point: str) -> SpaceReport:
        free_mb = await self.free_space_mb(mount_point)
        return SpaceReport(mount_point=mount_point, free_mb=free_mb)

    def _data_fields(self, output: str) -> List[str]:
        # First line is the header
        lines = data_lines(output)[1:]
        if not lines:
            return []

        columns = fields(lines[0])
        # df puts a long device name on a line of its own and the numbers below it
        if len(columns) == 1 and len(lines) > 1:
            columns += fields(lines[1])
        return columns
