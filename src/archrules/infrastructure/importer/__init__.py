"""AST importer for Python source trees."""

from archrules.infrastructure.importer.ast_importer import ASTImporter
from archrules.infrastructure.importer.module_names import (
    compute_module_name,
    resolve_relative_import,
)

__all__ = [
    "ASTImporter",
    "compute_module_name",
    "resolve_relative_import",
]
