"""
Project lifecycle phase state.
"""

from specbridge.core.state.models import (
    IMPLEMENTATION_PHASE,
    PhaseState,
    PhaseStatus,
    phase_label,
)
from specbridge.core.state.store import read_phase_state, write_phase_state

__all__ = [
    "IMPLEMENTATION_PHASE",
    "PhaseState",
    "PhaseStatus",
    "phase_label",
    "read_phase_state",
    "write_phase_state",
]
