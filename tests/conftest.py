"""
Pytest configuration and shared fixtures.

Provides temp project layouts with planning artifacts, sample stories
documents, and an isolated environment for config and .env loading.
"""

from pathlib import Path

import pytest

from specbridge.core.config import SpecbridgeConfig

# ==============================================================================
# Sample Documents
# ==============================================================================

SAMPLE_STORIES = """# Epics and Stories

## Epic 1: Authentication

Users can sign in and out.

### Story 1.1: Login form

As a user, I want to sign in, So that my data is private.

**Acceptance Criteria:**

**Given** a registered user
**When** they submit valid credentials
**Then** they land on the dashboard

### Story 1.2: Logout

As a user, I want to sign out.

**Acceptance Criteria:**

**Given** a signed-in user
**When** they click logout
**Then** the session ends
"""

SAMPLE_PRD = """# Acme PRD

## Executive Summary

Acme helps teams ship faster.

## Success Criteria

- 100 active teams

## Scope

Web app only.

## Target Users

Small engineering teams.
"""

SAMPLE_ARCHITECTURE = """# Architecture

## Tech Stack

- Python 3.12
- pytest for tests

## Constraints

Must run on a single VM.

## Risks

Vendor lock-in.
"""

SAMPLE_AGENT = """# Agent Build Instructions

## Project Setup
```bash
echo setup
```

## Running Tests
```bash
echo test
```

## Build Commands
```bash
echo build
```

## Development Server
```bash
echo dev
```
"""


# ==============================================================================
# Environment Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point XDG config at an empty directory and clear SPECBRIDGE_* variables."""
    xdg = tmp_path / "xdg"
    xdg.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    for name in (
        "SPECBRIDGE_PROJECT_NAME",
        "SPECBRIDGE_SECTION_MAX_LENGTH",
        "SPECBRIDGE_LARGE_FILE_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)
    return xdg


# ==============================================================================
# Project Fixtures
# ==============================================================================


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """
    Provide a project with a complete set of planning artifacts.

    Creates:
    - _bmad-output/planning-artifacts/{prd,architecture,epics-and-stories}.md
    - .ralph/@AGENT.md
    - .specbridge.json naming the project "acme"
    """
    project = tmp_path / "project"
    artifacts = project / "_bmad-output" / "planning-artifacts"
    artifacts.mkdir(parents=True)
    (artifacts / "prd.md").write_text(SAMPLE_PRD)
    (artifacts / "architecture.md").write_text(SAMPLE_ARCHITECTURE)
    (artifacts / "epics-and-stories.md").write_text(SAMPLE_STORIES)

    loop_dir = project / ".ralph"
    loop_dir.mkdir()
    (loop_dir / "@AGENT.md").write_text(SAMPLE_AGENT)

    (project / ".specbridge.json").write_text('{"name": "acme"}')
    return project


@pytest.fixture
def config() -> SpecbridgeConfig:
    """Default configuration with a fixed project name."""
    return SpecbridgeConfig(name="acme")


@pytest.fixture
def stories_text() -> str:
    return SAMPLE_STORIES


@pytest.fixture
def prd_text() -> str:
    return SAMPLE_PRD


@pytest.fixture
def architecture_text() -> str:
    return SAMPLE_ARCHITECTURE


@pytest.fixture
def agent_text() -> str:
    return SAMPLE_AGENT
