"""
Tests for SpaceEvaluator.

Every malformed df report must raise a SpaceEvaluationError subclass and
never yield a number.
"""

import logging

import pytest

from diskmoose.core.exceptions import (
    InsufficientOutputError,
    MissingUnitSuffixError,
    MountMismatchError,
    NumericParseError,
    SpaceEvaluationError,
    UsageReportUnavailableError,
)
from diskmoose.models import SpaceReport
from diskmoose.services.space_evaluator import SpaceEvaluator
from diskmoose.services.system_inspector import ScriptedSystemInspector

HEADER = "Filesystem     1M-blocks  Used Available Use% Mounted on\n"


def evaluator_for(mount_point: str, report: str) -> SpaceEvaluator:
    return SpaceEvaluator(ScriptedSystemInspector(usage={mount_point: report}))


class TestFreeSpaceMb:
    @pytest.mark.asyncio
    async def test_reads_free_column(self):
        evaluator = evaluator_for("/var", HEADER + "/dev/sda1 10240M 5000M 5240M 49% /var\n")

        assert await evaluator.free_space_mb("/var") == 5240

    @pytest.mark.asyncio
    async def test_irregular_column_widths(self, make_df_report):
        evaluator = evaluator_for("/", make_df_report("/", "87M"))

        assert await evaluator.free_space_mb("/") == 87

    @pytest.mark.asyncio
    async def test_wrapped_device_name(self):
        report = (
            HEADER
            + "/dev/mapper/vg0-very--long--logical--volume--name\n"
            + "                     20480M 20400M       80M 100% /home\n"
        )
        evaluator = evaluator_for("/home", report)

        assert await evaluator.free_space_mb("/home") == 80

    @pytest.mark.asyncio
    async def test_zero_free(self, make_df_report):
        evaluator = evaluator_for("/tmp", make_df_report("/tmp", "0M"))

        assert await evaluator.free_space_mb("/tmp") == 0

    @pytest.mark.asyncio
    async def test_tool_failure(self):
        evaluator = SpaceEvaluator(ScriptedSystemInspector(usage={}))

        with pytest.raises(UsageReportUnavailableError) as exc_info:
            await evaluator.free_space_mb("/var")

        assert exc_info.value.mount_point == "/var"
        assert exc_info.value.cause is not None

    @pytest.mark.asyncio
    async def test_header_only(self):
        evaluator = evaluator_for("/var", HEADER)

        with pytest.raises(InsufficientOutputError):
            await evaluator.free_space_mb("/var")

    @pytest.mark.asyncio
    async def test_too_few_fields(self):
        evaluator = evaluator_for("/var", HEADER + "/dev/sda1 10240M 5000M 5240M 49%\n")

        with pytest.raises(InsufficientOutputError) as exc_info:
            await evaluator.free_space_mb("/var")

        assert exc_info.value.field_count == 5

    @pytest.mark.asyncio
    async def test_mount_mismatch(self, make_df_report):
        evaluator = evaluator_for("/var/log", make_df_report("/var", "5240M"))

        with pytest.raises(MountMismatchError) as exc_info:
            await evaluator.free_space_mb("/var/log")

        assert exc_info.value.mount_point == "/var/log"
        assert exc_info.value.reported == "/var"

    @pytest.mark.asyncio
    async def test_missing_unit_suffix(self, make_df_report):
        evaluator = evaluator_for("/var", make_df_report("/var", "5240"))

        with pytest.raises(MissingUnitSuffixError):
            await evaluator.free_space_mb("/var")

    @pytest.mark.parametrize("free", ["M", "abcM", "52.4M", "-5M", "5_240M", " M5"])
    @pytest.mark.asyncio
    async def test_unparseable_number(self, make_df_report, free):
        evaluator = evaluator_for("/var", make_df_report("/var", free.strip()))

        with pytest.raises(NumericParseError):
            await evaluator.free_space_mb("/var")

    @pytest.mark.asyncio
    async def test_failures_are_raised_not_logged(self, make_df_report, caplog):
        evaluator = evaluator_for("/var/log", make_df_report("/var", "5240M"))

        with caplog.at_level(logging.ERROR):
            with pytest.raises(MountMismatchError):
                await evaluator.free_space_mb("/var/log")

        assert caplog.records == []

    @pytest.mark.asyncio
    async def test_all_failures_share_base_class(self, make_df_report):
        evaluator = evaluator_for("/usr", make_df_report("/home", "100M"))

        with pytest.raises(SpaceEvaluationError):
            await evaluator.free_space_mb("/usr")


class TestEvaluate:
    @pytest.mark.asyncio
    async def test_returns_space_report(self, make_df_report):
        evaluator = evaluator_for("/home", make_df_report("/home", "1234M"))

        report = await evaluator.evaluate("/home")

        assert isinstance(report, SpaceReport)
        assert report.mount_point == "/home"
        assert report.free_mb == 1234


class TestSpaceReport:
    def test_strictly_below_threshold_is_low(self):
        assert SpaceReport(mount_point="/", free_mb=99).is_low(100) is True

    def test_exactly_threshold_is_not_low(self):
        assert SpaceReport(mount_point="/", free_mb=100).is_low(100) is False
