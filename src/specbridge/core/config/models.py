"""
Configuration data models for specbridge.

These models define the structure of .specbridge.json and
~/.config/specbridge/config.json files, with validation and type safety
via Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field


class PathsConfig(BaseModel):
    """
    Where planning documents are read from and generated files are written.

    All paths are relative to the project root. File names under
    ``loop_dir`` are the conventions the implementation loop reads.
    """

    model_config = ConfigDict(extra="ignore")

    artifact_candidates: list[str] = Field(
        default_factory=lambda: [
            "_bmad-output/planning-artifacts",
            "_bmad-output/planning_artifacts",
            "docs/planning",
        ],
        min_length=1,
        description="Candidate planning-artifacts directories, first existing wins",
    )
    output_root: str = Field(
        default="_bmad-output",
        description="Planning-output tree copied whole into the snapshot",
    )
    loop_dir: str = Field(
        default=".ralph",
        description="Directory holding every generated document",
    )
    specs_dir: str = Field(default="specs", description="Snapshot directory inside loop_dir")
    checklist_file: str = Field(default="@fix_plan.md")
    briefing_file: str = Field(default="PROJECT_CONTEXT.md")
    index_file: str = Field(default="SPECS_INDEX.md")
    changelog_file: str = Field(default="SPECS_CHANGELOG.md")
    instructions_file: str = Field(default="PROMPT.md")
    agent_file: str = Field(default="@AGENT.md")
    state_file: str = Field(
        default=".specbridge/state/current-phase.json",
        description="Persistent phase state",
    )


class LimitsConfig(BaseModel):
    """
    Size limits applied while building generated documents.
    """

    model_config = ConfigDict(extra="ignore")

    section_max_length: int = Field(
        default=5000,
        ge=1,
        description="Maximum characters kept per briefing section",
    )
    large_file_threshold: int = Field(
        default=50_000,
        ge=1,
        description="Spec files at or above this many bytes are marked [LARGE]",
    )
    description_max_length: int = Field(
        default=60,
        ge=4,
        description="Maximum length of a spec file description in the index",
    )


class SpecbridgeConfig(BaseModel):
    """
    Complete specbridge configuration.

    Example:
        >>> config = SpecbridgeConfig(name="acme")
        >>> config.paths.loop_dir
        '.ralph'
        >>> config.limits.section_max_length
        5000
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="project", min_length=1, description="Project name")
    description: str = Field(default="", description="One-line project summary")
    paths: PathsConfig = Field(default_factory=PathsConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
