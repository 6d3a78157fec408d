"""Importer port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from archrules.domain.model.artifact_graph import ArtifactGraph


class ImporterPort(ABC):
    """Port for turning sources into an artifact graph.

    Infrastructure layer must provide implementation. All I/O happens
    here, before rules see the graph.
    """

    @abstractmethod
    def import_from(self, sources: Iterable[Path]) -> ArtifactGraph:
        """Import sources (files or directories).

        Args:
            sources: Locations to import

        Returns:
            Immutable ArtifactGraph

        Raises:
            ArtifactImportError: If any source cannot be imported
        """
        ...
