"""Generated Scala declarations.

Emitters build these values from the IR; ``render()`` turns them into raw
Scala source. Indentation is left to the formatter that runs afterwards.
"""

from dataclasses import dataclass, field
from typing import Union

from .naming import scala_string

SUM_TYPE_PARENTS = "scala.Product with scala.Serializable"


def annotation(description: str | None) -> str:
    """Render a description annotation line, or nothing."""
    if not description:
        return ""
    return f"@GQLDescription({scala_string(description)})\n"


@dataclass
class GeneratedField:
    """A ``name: Type`` parameter of a case class."""
    name: str
    type_expr: str
    description: str | None = None

    def render(self) -> str:
        return f"{annotation(self.description)}{self.name}: {self.type_expr}"


@dataclass
class GeneratedRecord:
    """A case class, optionally extending a sealed trait."""
    name: str
    fields: list[GeneratedField] = field(default_factory=list)
    description: str | None = None
    parent: str | None = None
    multiline: bool = False

    @property
    def has_annotations(self) -> bool:
        return bool(self.description) or any(f.description for f in self.fields)

    def shape(self) -> tuple:
        """Name and field signatures, ignoring annotations."""
        return (self.name, tuple((f.name, f.type_expr) for f in self.fields))

    def render(self) -> str:
        if self.multiline or any(f.description for f in self.fields):
            params = "(\n" + ",\n".join(f.render() for f in self.fields) + "\n)"
        else:
            params = "(" + ", ".join(f.render() for f in self.fields) + ")"
        extends = f" extends {self.parent}" if self.parent else ""
        return f"{annotation(self.description)}case class {self.name}{params}{extends}"


@dataclass
class GeneratedCase:
    """A nullary variant of a sum type (an enum value)."""
    name: str
    parent: str
    description: str | None = None

    @property
    def has_annotations(self) -> bool:
        return bool(self.description)

    def render(self) -> str:
        return f"{annotation(self.description)}case object {self.name} extends {self.parent}"


Variant = Union[GeneratedCase, GeneratedRecord]


@dataclass
class GeneratedSumType:
    """A sealed trait with its variants declared in the companion object."""
    name: str
    variants: list[Variant] = field(default_factory=list)
    description: str | None = None

    @property
    def has_annotations(self) -> bool:
        return bool(self.description) or any(v.has_annotations for v in self.variants)

    def shape(self) -> tuple:
        return (self.name, tuple(v.render() for v in self.variants))

    def render(self) -> str:
        lines = [
            f"{annotation(self.description)}sealed trait {self.name} extends {SUM_TYPE_PARENTS}",
            "",
            f"object {self.name} {{",
        ]
        lines.extend(variant.render() for variant in self.variants)
        lines.append("}")
        return "\n".join(lines)


Declaration = Union[GeneratedRecord, GeneratedSumType]
