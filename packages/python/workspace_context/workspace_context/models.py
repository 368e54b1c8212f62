"""Pydantic models describing scan policy and scan output."""

from __future__ import annotations

from typing import Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field


class IgnorePolicy(BaseModel):
    """
    Effective skip rules for one scan.

    - patterns: glob-like ignore patterns, each tested independently
    - keep_directories: root-relative POSIX directories (root is ".") whose
      contents are never skipped
    """

    model_config = ConfigDict(frozen=True)

    patterns: FrozenSet[str] = Field(default_factory=frozenset)
    keep_directories: FrozenSet[str] = Field(default_factory=frozenset)


class ScanResult(BaseModel):
    """Structure lines and file contents accumulated by a walk."""

    structure: List[str] = Field(default_factory=list)
    contents: Dict[str, str] = Field(default_factory=dict)

    @property
    def structure_text(self) -> str:
        return "".join(f"{line}\n" for line in self.structure)

    def to_file_details(self) -> "FileDetails":
        return FileDetails(structure=self.structure_text, contents=dict(self.contents))


class FileDetails(BaseModel):
    """Boundary payload handed to whoever builds the prompt."""

    structure: str = ""
    contents: Dict[str, str] = Field(default_factory=dict)
