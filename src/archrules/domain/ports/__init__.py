"""Domain ports (interfaces/protocols)."""

from archrules.domain.ports.importer import ImporterPort
from archrules.domain.ports.reporter import ReporterProtocol

__all__ = [
    "ImporterPort",
    "ReporterProtocol",
]
