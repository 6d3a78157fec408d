"""Class element of the artifact graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.location import SourceLocation


@dataclass(frozen=True, slots=True)
class CodeClass:
    """Imported class definition.

    Attributes:
        name: Simple class name
        qualified_name: Full path (module.Class)
        module: Defining module name
        bases: Base class names (resolved where possible)
        dependencies: Qualified names the class refers to, in first-use order
        location: Where the class is defined, if known
    """

    name: str
    qualified_name: str
    module: str
    bases: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    location: SourceLocation | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")
        if not self.module:
            raise ValueError("module must not be empty")
        if self.qualified_name != f"{self.module}.{self.name}":
            raise ValueError(
                f"qualified_name '{self.qualified_name}' must be "
                f"'{self.module}.{self.name}'"
            )
        if self.qualified_name in self.dependencies:
            raise ValueError(f"class '{self.qualified_name}' must not depend on itself")

    @classmethod
    def of(
        cls,
        qualified_name: str,
        *,
        bases: tuple[str, ...] = (),
        dependencies: tuple[str, ...] = (),
        location: SourceLocation | None = None,
    ) -> CodeClass:
        """Create class from its qualified name.

        Raises:
            ValueError: If qualified_name has no module part
        """
        module, sep, name = qualified_name.rpartition(".")
        if not sep:
            raise ValueError(f"qualified_name '{qualified_name}' must contain a module")
        return cls(
            name=name,
            qualified_name=qualified_name,
            module=module,
            bases=bases,
            dependencies=dependencies,
            location=location,
        )

    def depends_on(self, qualified_name: str) -> bool:
        """Check if class refers to qualified_name."""
        return qualified_name in self.dependencies

    def describe(self) -> str:
        """Label used in violation messages."""
        if self.location is None:
            return f"Class <{self.qualified_name}>"
        return f"Class <{self.qualified_name}> in {self.location}"
