from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MonitorState(str, Enum):
    """
    Tilstand for monitor loopet.

    Cycle: Idle -> Polling -> Evaluating -> (Notifying) -> Sleeping -> Polling ...
    Terminal: Stopped (graceful) eller Aborted (fatal evaluation error)
    """

    IDLE = "Idle"  # Not started yet
    POLLING = "Polling"  # Discovering relevant mount points
    EVALUATING = "Evaluating"  # Running df for a mount point
    NOTIFYING = "Notifying"  # Broadcasting a low space warning
    SLEEPING = "Sleeping"  # Waiting for the next cycle
    STOPPED = "Stopped"  # Stopped on request
    ABORTED = "Aborted"  # Free space could not be measured


class SpaceReport(BaseModel):
    """Free space measured for one mount point in one poll cycle."""

    model_config = ConfigDict(frozen=True)

    mount_point: str = Field(..., description="Mount point as reported by df")
    free_mb: int = Field(..., description="Free megabytes on the mount point")
    checked_at: datetime = Field(default_factory=datetime.now)

    def is_low(self, threshold_mb: int) -> bool:
        # Exactly the threshold is not low
        return self.free_mb < threshold_mb
