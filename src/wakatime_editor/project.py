#!/usr/bin/env python3
"""
Project name resolution from the .wakatime-project override file.

The file lives in the project root. Its first line renames the project and
an optional second line overrides the branch::

    project-override-name
    branch-override-name
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .heartbeat import DEFAULT_BRANCH

PROJECT_FILE = ".wakatime-project"


@dataclass(frozen=True)
class ProjectInfo:
    name: str
    branch: str = DEFAULT_BRANCH


class ProjectResolver:
    """Reads and writes the project override file."""

    def __init__(self, project_root: Union[str, Path], default_project: str):
        self.project_root = Path(project_root)
        self.default_project = default_project

    @property
    def project_file(self) -> Path:
        return self.project_root / PROJECT_FILE

    def read_project_file(self) -> Optional[List[str]]:
        """Lines of the override file, or None if it does not exist."""
        if not self.project_file.exists():
            return None
        with open(self.project_file, "r", encoding="utf-8", errors="replace") as f:
            return f.read().splitlines()

    def write_project_file(self, lines: Sequence[str]) -> None:
        """Create or rewrite the override file with the given lines."""
        with open(self.project_file, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")

    def resolve(self) -> ProjectInfo:
        """Project name and branch, falling back to the host default."""
        try:
            lines = self.read_project_file() or []
        except OSError as e:
            print(f"Warning: Could not read {self.project_file}: {e}")
            lines = []
        name = lines[0].strip() if lines else ""
        branch = lines[1].strip() if len(lines) > 1 else ""
        return ProjectInfo(
            name=name or self.default_project,
            branch=branch or DEFAULT_BRANCH,
        )
