"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that describe the parsed schema document
handed to the writer. The writer only reads these values.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from .errors import UnknownTypeError


@dataclass(frozen=True)
class IRNamedType:
    """A reference to a named type, e.g. ``User`` or ``Int!``."""
    name: str
    non_null: bool = False


@dataclass(frozen=True)
class IRListType:
    """A list wrapper around another type reference, e.g. ``[User!]!``."""
    of_type: "TypeRef"
    non_null: bool = False


TypeRef = Union[IRNamedType, IRListType]


@dataclass
class IRArgument:
    """Represents an argument to a field."""
    name: str
    type: TypeRef
    default_value: Any = None
    description: str | None = None


@dataclass
class IRField:
    """Represents a field in an object or input type."""
    name: str
    type: TypeRef
    arguments: list[IRArgument] = field(default_factory=list)
    description: str | None = None


@dataclass
class IREnumValue:
    """Represents a single value in a GraphQL enum."""
    name: str
    description: str | None = None


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[IREnumValue]
    description: str | None = None


@dataclass
class IRType:
    """Represents a GraphQL object type or input type."""
    name: str
    fields: list[IRField]
    description: str | None = None
    is_input: bool = False


@dataclass
class IRUnion:
    """Represents a GraphQL union; members are object type names."""
    name: str
    members: list[str]
    description: str | None = None


@dataclass
class IRSchemaDefinition:
    """The ``schema { query: ... }`` block. Unset names fall back to defaults."""
    query: str | None = None
    mutation: str | None = None
    subscription: str | None = None


Definition = Union[IRType, IREnum, IRUnion]


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema document.

    Definitions keep the order in which they were declared.
    """
    definitions: list[Definition] = field(default_factory=list)
    schema_definition: IRSchemaDefinition | None = None

    def add(self, definition: Definition):
        """Append a definition, keeping declaration order."""
        self.definitions.append(definition)

    @property
    def is_empty(self) -> bool:
        return not self.definitions

    @property
    def object_types(self) -> dict[str, IRType]:
        return {
            d.name: d for d in self.definitions
            if isinstance(d, IRType) and not d.is_input
        }

    @property
    def input_types(self) -> dict[str, IRType]:
        return {
            d.name: d for d in self.definitions
            if isinstance(d, IRType) and d.is_input
        }

    @property
    def enums(self) -> dict[str, IREnum]:
        return {d.name: d for d in self.definitions if isinstance(d, IREnum)}

    @property
    def unions(self) -> dict[str, IRUnion]:
        return {d.name: d for d in self.definitions if isinstance(d, IRUnion)}

    def get_definition(self, name: str) -> Definition | None:
        """Look up any definition by name."""
        for definition in self.definitions:
            if definition.name == name:
                return definition
        return None

    def get_object_type(self, name: str) -> IRType | None:
        """Look up an object (not input) type by name."""
        definition = self.get_definition(name)
        if isinstance(definition, IRType) and not definition.is_input:
            return definition
        return None

    def require_object_type(self, name: str, context: str) -> IRType:
        """Look up an object type, failing loudly when it does not exist."""
        object_type = self.get_object_type(name)
        if object_type is None:
            raise UnknownTypeError(name, context)
        return object_type
