"""
specbridge - planning-to-implementation transition.

Turns PRD, architecture and epics/stories documents into the checklist,
spec snapshot and briefing an autonomous implementation loop consumes.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from specbridge.core.config.models import SpecbridgeConfig
from specbridge.core.stories.models import Story
from specbridge.core.transition.models import TransitionResult

__all__ = ["SpecbridgeConfig", "Story", "TransitionResult", "__version__"]
