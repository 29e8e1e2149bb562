"""
Planning-to-implementation transition.

The orchestrator turns a finished set of planning documents into the inputs
of an implementation loop:

1. Locate the planning artifacts and the epics/stories document
2. Extract stories and write the checklist, carrying over prior progress
3. Record what changed since the last snapshot (changelog)
4. Swap in a fresh snapshot of the planning output
5. Index the snapshot, write the project briefing and working instructions
6. Tailor the agent instructions to the detected tech stack
7. Validate the artifacts and move the phase state to implementation

Missing artifacts, a missing stories document or zero stories stop the run
with a TransitionError. Everything else is reported as a warning.

Example:
    >>> from specbridge.core.transition import TransitionOrchestrator
    >>> result = TransitionOrchestrator(Path(".")).run()
    >>> print(f"{result.stories_count} stories, {len(result.warnings)} warnings")
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from specbridge.core.checklist import reconcile_checklist
from specbridge.core.config import SpecbridgeConfig, load_config
from specbridge.core.context import (
    ProjectContext,
    build_working_instructions,
    customize_agent_instructions,
    detect_tech_stack,
    extract_project_context,
    render_briefing,
    truncation_warnings,
)
from specbridge.core.specs import (
    build_specs_index,
    diff_specs_trees,
    render_changelog,
    render_specs_index,
)
from specbridge.core.state import (
    IMPLEMENTATION_PHASE,
    PhaseState,
    PhaseStatus,
    read_phase_state,
    write_phase_state,
)
from specbridge.core.stories import parse_stories_with_warnings
from specbridge.core.transition.arena import SnapshotArena
from specbridge.core.transition.artifacts import (
    find_architecture_file,
    find_artifacts_dir,
    find_stories_file,
    list_artifacts,
    validate_artifacts,
)
from specbridge.core.transition.errors import NoStoriesFoundError
from specbridge.core.transition.models import TransitionResult
from specbridge.utils.fs import atomic_write_text

logger = logging.getLogger(__name__)


class TransitionOrchestrator:
    """
    Runs one transition for a project.

    An orchestrator holds no state between runs; calling ``run()`` twice on
    unchanged inputs produces the same checklist both times.
    """

    def __init__(self, project_dir: Path, config: SpecbridgeConfig | None = None) -> None:
        self.project_dir = project_dir
        self.config = config if config is not None else load_config(project_dir)
        paths = self.config.paths
        self.loop_dir = project_dir / paths.loop_dir
        self.specs_dir = self.loop_dir / paths.specs_dir
        self.output_root = project_dir / paths.output_root

    def _loop_file(self, name: str) -> Path:
        return self.loop_dir / name

    def _read_optional(self, path: Path, what: str) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No existing %s at %s", what, path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read existing %s: %s", what, e)
            return None

    def _write(self, path: Path, content: str, result: TransitionResult) -> None:
        atomic_write_text(path, content)
        result.written.append(path)
        logger.debug("Wrote %s", path)

    def _spec_link(self, stories_file: Path) -> str:
        """Location of the stories document inside the snapshot, relative to the loop dir."""
        try:
            rel = stories_file.relative_to(self.output_root).as_posix()
        except ValueError:
            rel = stories_file.name
        return f"{self.config.paths.specs_dir}/{rel}"

    def run(self) -> TransitionResult:
        """
        Run the transition.

        Returns:
            TransitionResult with the story count and all warnings

        Raises:
            ArtifactsNotFoundError: If no planning-artifacts directory exists
            StoriesFileNotFoundError: If no epics/stories document exists
            NoStoriesFoundError: If the stories document has no stories
        """
        paths = self.config.paths
        arena = SnapshotArena(self.specs_dir)
        arena.discard_staging()

        logger.info("Locating planning artifacts...")
        artifacts_dir = find_artifacts_dir(self.project_dir, paths.artifact_candidates)
        files = list_artifacts(artifacts_dir)
        stories_file = find_stories_file(artifacts_dir, files)

        logger.info("Parsing stories...")
        parsed = parse_stories_with_warnings(stories_file.read_text(encoding="utf-8"))
        if not parsed.stories:
            raise NoStoriesFoundError(str(stories_file))

        result = TransitionResult(stories_count=parsed.story_count)
        advisories: list[str] = []

        logger.info("Generating checklist for %d stories...", parsed.story_count)
        checklist_path = self._loop_file(paths.checklist_file)
        merge = reconcile_checklist(
            parsed.stories,
            self._read_optional(checklist_path, "checklist"),
            spec_link=self._spec_link(stories_file),
        )
        self._write(checklist_path, merge.content, result)
        result.checklist_preserved = merge.preserved

        if self.output_root.is_dir() and self.specs_dir.is_dir():
            warning = self._write_changelog(result)
            if warning:
                advisories.append(warning)
        else:
            logger.debug("Skipping changelog: no prior snapshot at %s", self.specs_dir)

        logger.info("Copying specs to %s...", self.specs_dir)
        if self.output_root.is_dir():
            arena.stage_tree(self.output_root)
        else:
            logger.debug("%s not found, snapshotting the artifacts directory", self.output_root)
            arena.stage_entries(artifacts_dir, files)
        arena.commit()

        warning = self._write_index(result)
        if warning:
            advisories.append(warning)

        artifacts = self._read_artifacts(artifacts_dir, files)
        context, truncation = self._write_briefing(artifacts, result)

        logger.info("Generating working instructions...")
        instructions_path = self._loop_file(paths.instructions_file)
        existing = self._read_optional(instructions_path, "working instructions")
        self._write(
            instructions_path,
            build_working_instructions(existing, self.config.name, context),
            result,
        )

        warning = self._customize_agent(artifacts_dir, files, result)
        if warning:
            advisories.append(warning)

        result.warnings = [
            *parsed.warnings,
            *validate_artifacts(files, artifacts_dir),
            *merge.warnings,
            *truncation,
            *advisories,
        ]

        self._commit_phase_state()
        logger.info("Transition complete: phase %d (implementing)", IMPLEMENTATION_PHASE)
        return result

    def _write_changelog(self, result: TransitionResult) -> str | None:
        try:
            changes = diff_specs_trees(self.specs_dir, self.output_root)
            if changes:
                timestamp = datetime.now(timezone.utc).isoformat()
                changelog_path = self._loop_file(self.config.paths.changelog_file)
                self._write(changelog_path, render_changelog(changes, timestamp), result)
                logger.debug("Generated changelog with %d changes", len(changes))
        except OSError as e:
            warning = f"Could not generate {self.config.paths.changelog_file}: {e}"
            logger.warning(warning)
            return warning
        return None

    def _write_index(self, result: TransitionResult) -> str | None:
        index_file = self.config.paths.index_file
        logger.info("Generating %s...", index_file)
        limits = self.config.limits
        try:
            index = build_specs_index(self.specs_dir, limits.description_max_length)
            if index.total_files > 0:
                self._write(
                    self._loop_file(index_file),
                    render_specs_index(index, limits.large_file_threshold),
                    result,
                )
                logger.debug("Generated %s with %d files", index_file, index.total_files)
        except OSError as e:
            warning = f"Could not generate {index_file}: {e}"
            logger.warning(warning)
            return warning
        return None

    def _read_artifacts(self, artifacts_dir: Path, files: list[str]) -> dict[str, str]:
        contents: dict[str, str] = {}
        for name in files:
            path = artifacts_dir / name
            if not name.endswith(".md") or not path.is_file():
                continue
            try:
                contents[name] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read artifact %s: %s", name, e)
        return contents

    def _write_briefing(
        self, artifacts: dict[str, str], result: TransitionResult
    ) -> tuple[ProjectContext | None, list[str]]:
        if not artifacts:
            return None, []

        logger.info("Generating %s...", self.config.paths.briefing_file)
        context, truncated = extract_project_context(
            artifacts, self.config.limits.section_max_length
        )
        warnings = truncation_warnings(truncated)
        for warning in warnings:
            logger.warning(warning)

        self._write(
            self._loop_file(self.config.paths.briefing_file),
            render_briefing(context, self.config.name),
            result,
        )
        return context, warnings

    def _customize_agent(
        self, artifacts_dir: Path, files: list[str], result: TransitionResult
    ) -> str | None:
        architecture = find_architecture_file(files)
        if architecture is None:
            return None

        agent_path = self._loop_file(self.config.paths.agent_file)
        try:
            stack = detect_tech_stack((artifacts_dir / architecture).read_text(encoding="utf-8"))
            if stack is None:
                logger.debug("No tech stack section in %s", architecture)
                return None
            if not agent_path.is_file():
                logger.debug("No existing agent instructions at %s", agent_path)
                return None
            template = agent_path.read_text(encoding="utf-8")
            self._write(agent_path, customize_agent_instructions(template, stack), result)
            logger.debug("Customized %s with detected tech stack", agent_path.name)
        except (OSError, UnicodeDecodeError) as e:
            warning = f"Could not customize {agent_path.name}: {e}"
            logger.warning(warning)
            return warning
        return None

    def _commit_phase_state(self) -> None:
        state_file = self.config.paths.state_file
        now = datetime.now(timezone.utc).isoformat()
        current = read_phase_state(self.project_dir, state_file)
        state = PhaseState(
            current_phase=IMPLEMENTATION_PHASE,
            status=PhaseStatus.IMPLEMENTING,
            iteration=current.iteration if current else 0,
            started_at=current.started_at if current else now,
            last_updated=now,
        )
        write_phase_state(self.project_dir, state, state_file)


def run_transition(project_dir: Path, config: SpecbridgeConfig | None = None) -> TransitionResult:
    """
    Run a transition with the project's layered configuration.

    Args:
        project_dir: Project root
        config: Configuration to use instead of loading one

    Returns:
        TransitionResult
    """
    return TransitionOrchestrator(project_dir, config).run()

