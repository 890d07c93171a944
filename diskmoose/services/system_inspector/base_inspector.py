"""Abstract System Inspector - capability interface for external OS tools."""

from abc import ABC, abstractmethod


class BaseSystemInspector(ABC):
    """Abstract base class for obtaining raw tool output about the system."""

    @abstractmethod
    async def list_mounts(self) -> str:
        """Return the mount table listing. Raises InspectionError on failure."""
        pass

    @abstractmethod
    async def list_sessions(self) -> str:
        """Return the logged-in session listing. Raises InspectionError on failure."""
        pass

    @abstractmethod
    async def report_usage(self, mount_point: str) -> str:
        """Return the megabyte usage report for mount_point. Raises InspectionError on failure."""
        pass
