"""GraphQL type references to Scala type expressions.

Nullable GraphQL types become ``Option[...]`` and lists become ``List[...]``,
composed in the order they are declared:

    Int!        -> Int
    Int         -> Option[Int]
    [Int!]!     -> List[Int]
    [Int]       -> Option[List[Option[Int]]]

Scalar names go through a ``ScalarRegistry``, which knows the built-in GraphQL
scalars and can be taught custom ones:

    registry = ScalarRegistry()
    registry.register("DateTime", "java.time.OffsetDateTime")
    map_type(IRNamedType("DateTime", non_null=True), registry)
    # -> "java.time.OffsetDateTime"
"""

from .ir import IRListType, IRNamedType, TypeRef

BUILTIN_SCALARS = {
    "Int": "Int",
    "Float": "Double",
    "String": "String",
    "Boolean": "Boolean",
    "ID": "String",
}


class ScalarRegistry:
    """Registry of GraphQL scalar name to Scala type name mappings.

    Names that are not registered map to themselves.
    """

    def __init__(self, mappings: dict[str, str] | None = None):
        self._mappings: dict[str, str] = {}
        self._register_defaults()
        for scalar_name, scala_type in (mappings or {}).items():
            self.register(scalar_name, scala_type)

    def _register_defaults(self):
        """Register the built-in GraphQL scalars."""
        for scalar_name, scala_type in BUILTIN_SCALARS.items():
            self.register(scalar_name, scala_type)

    def register(self, scalar_name: str, scala_type: str):
        """Register (or override) the Scala type used for a scalar."""
        self._mappings[scalar_name] = scala_type

    def get(self, scalar_name: str) -> str | None:
        """Get the registered Scala type, or None if not registered."""
        return self._mappings.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a mapping is registered for a scalar."""
        return scalar_name in self._mappings

    def resolve(self, type_name: str) -> str:
        """Return the Scala name for any GraphQL type name."""
        return self._mappings.get(type_name, type_name)


DEFAULT_SCALARS = ScalarRegistry()


def map_type(ref: TypeRef, scalars: ScalarRegistry | None = None) -> str:
    """Map a GraphQL type reference to a Scala type expression."""
    scalars = scalars or DEFAULT_SCALARS
    if isinstance(ref, IRListType):
        expr = f"List[{map_type(ref.of_type, scalars)}]"
    elif isinstance(ref, IRNamedType):
        expr = scalars.resolve(ref.name)
    else:
        raise TypeError(f"Expected a type reference, got {type(ref).__name__}")
    if ref.non_null:
        return expr
    return f"Option[{expr}]"
