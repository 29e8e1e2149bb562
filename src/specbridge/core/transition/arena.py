"""
Snapshot staging and swap.

The snapshot directory is never edited in place. A new tree is built in a
sibling ``<name>.new`` directory, checked, and only then swapped in, so a
failed copy leaves the previous snapshot untouched.

Example:
    >>> arena = SnapshotArena(Path(".ralph/specs"))
    >>> arena.discard_staging()
    >>> arena.stage_tree(Path("_bmad-output"))
    >>> arena.commit()
"""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

STAGING_SUFFIX = ".new"


class SnapshotError(Exception):
    """Raised when a staged snapshot cannot be verified or committed."""

    pass


class SnapshotArena:
    """Builds a replacement snapshot beside the live one and swaps it in."""

    def __init__(self, target: Path) -> None:
        self.target = target
        self.staging = target.with_name(target.name + STAGING_SUFFIX)

    def discard_staging(self) -> None:
        """Remove any staging directory left over from an interrupted run."""
        if self.staging.exists():
            logger.debug("Removing stale staging directory %s", self.staging)
            shutil.rmtree(self.staging)

    def stage_tree(self, source: Path) -> None:
        """Stage a full copy of ``source``, preserving structure."""
        self.discard_staging()
        shutil.copytree(source, self.staging, symlinks=True)

    def stage_entries(self, source: Path, names: list[str]) -> None:
        """Stage selected entries of ``source``; directories are copied whole."""
        self.discard_staging()
        self.staging.mkdir(parents=True)
        for name in names:
            src = source / name
            if src.is_dir():
                shutil.copytree(src, self.staging / name, symlinks=True)
            else:
                shutil.copy2(src, self.staging / name, follow_symlinks=False)

    def verify(self) -> None:
        if not self.staging.is_dir():
            raise SnapshotError(f"Staged snapshot missing: {self.staging}")

    def commit(self) -> None:
        """Replace the live snapshot with the staged one."""
        self.verify()
        if self.target.exists():
            shutil.rmtree(self.target)
        self.staging.rename(self.target)
        logger.debug("Committed snapshot %s", self.target)
