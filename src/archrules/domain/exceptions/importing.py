"""Artifact import exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.exceptions.base import ArchRulesError

if TYPE_CHECKING:
    from pathlib import Path


class ArtifactImportError(ArchRulesError):
    """Error while importing sources into an artifact graph.

    Attributes:
        path: Source that failed to import
        reason: Why import failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to import {path}: {reason}")
