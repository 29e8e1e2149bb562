"""
Phase state models.

The phase state records where a project is in the planning-to-implementation
lifecycle. Phases 1-3 are planning work; phase 4 is the implementation loop
that consumes the transition's output.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

IMPLEMENTATION_PHASE = 4

PHASE_LABELS: dict[int, str] = {
    1: "Analysis",
    2: "Planning",
    3: "Design",
    4: "Implementation",
}


def phase_label(phase: int) -> str:
    """Human-readable name of a phase number, "Unknown" when out of range."""
    return PHASE_LABELS.get(phase, "Unknown")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class PhaseStatus(str, Enum):
    """Status of the current phase."""

    PLANNING = "planning"
    IMPLEMENTING = "implementing"
    COMPLETED = "completed"


class PhaseState(BaseModel):
    """
    Persisted lifecycle state.

    Stored as JSON at .specbridge/state/current-phase.json.
    """

    current_phase: int = Field(ge=1, le=4, description="Phase number, 1-4")
    status: PhaseStatus
    iteration: int = Field(default=0, ge=0, description="Loop iteration counter")
    started_at: str = Field(default_factory=utc_now_iso, description="ISO timestamp")
    last_updated: str = Field(default_factory=utc_now_iso, description="ISO timestamp")

    @property
    def label(self) -> str:
        return phase_label(self.current_phase)
