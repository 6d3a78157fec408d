"""Infrastructure adapters for external interfaces."""

from archrules.infrastructure.importer import ASTImporter

__all__ = [
    "ASTImporter",
]
