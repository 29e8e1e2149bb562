"""
Project context model.
"""

from pydantic import BaseModel, Field


class ProjectContext(BaseModel):
    """
    Condensed project briefing synthesized from planning documents.

    Each field is extracted independently and may be empty.
    """

    project_goals: str = Field(default="", description="Executive summary / vision / goals")
    success_metrics: str = Field(default="", description="Success criteria, KPIs")
    architecture_constraints: str = Field(default="", description="Constraints and ADRs")
    technical_risks: str = Field(default="", description="Risks and mitigations")
    scope_boundaries: str = Field(default="", description="In / out of scope")
    target_users: str = Field(default="", description="Users and personas")
    non_functional_requirements: str = Field(default="", description="NFRs / quality attributes")

    @property
    def is_empty(self) -> bool:
        """True when no field could be extracted."""
        return not any(self.model_dump().values())
