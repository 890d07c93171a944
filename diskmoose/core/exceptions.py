# diskmoose/core/exceptions.py
from typing import Optional, Sequence


class InspectionError(Exception):
    """Raised when an external inspection tool cannot be run or exits abnormally."""
    def __init__(self, operation: str, command: Sequence[str] = (), reason: str = ""):
        self.operation = operation
        self.command = list(command)
        self.reason = reason
        message = operation
        if reason:
            message = f"{operation}: {reason}"
        super().__init__(message)


class SpaceEvaluationError(Exception):
    """Base class for every failure to measure free space on a mount point."""
    def __init__(self, mount_point: str, message: str):
        self.mount_point = mount_point
        super().__init__(f"{mount_point}: {message}")


class UsageReportUnavailableError(SpaceEvaluationError):
    def __init__(self, mount_point: str, cause: Optional[InspectionError] = None):
        self.cause = cause
        detail = str(cause) if cause else "usage report unavailable"
        super().__init__(mount_point, detail)


class InsufficientOutputError(SpaceEvaluationError):
    def __init__(self, mount_point: str, field_count: int):
        self.field_count = field_count
        super().__init__(
            mount_point, f"Too little output from df ({field_count} fields)"
        )


class MountMismatchError(SpaceEvaluationError):
    """df reported a different mount point than the one that was asked for."""
    def __init__(self, mount_point: str, reported: str):
        self.reported = reported
        super().__init__(
            mount_point,
            f"df could not check the given mountpoint: df reported '{reported}'",
        )


class MissingUnitSuffixError(SpaceEvaluationError):
    def __init__(self, mount_point: str, value: str):
        self.value = value
        super().__init__(mount_point, f"No \"M\" in free space field '{value}'")


class NumericParseError(SpaceEvaluationError):
    def __init__(self, mount_point: str, value: str):
        self.value = value
        super().__init__(mount_point, f"Could not get MB free number from '{value}'")


class MonitorAbortedError(Exception):
    """Raised by the monitor loop when it can no longer trust its measurements."""
    def __init__(self, mount_point: str, cause: SpaceEvaluationError):
        self.mount_point = mount_point
        self.cause = cause
        super().__init__(f"Could not get free space for {mount_point}: {cause}")
