"""Exceptions raised while turning a GraphQL schema into Scala code."""


class SchemaWriterError(Exception):
    """Base class for all schema writer errors."""


class UnknownTypeError(SchemaWriterError):
    """Raised when a referenced type is not defined in the schema."""

    def __init__(self, type_name: str, context: str):
        self.type_name = type_name
        self.context = context
        super().__init__(f"Unknown type '{type_name}' referenced by {context}")


class DuplicateDeclarationError(SchemaWriterError):
    """Raised when two different declarations would share one Scala name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Conflicting declarations named '{name}': "
            "rename one of the fields or types that produce it"
        )


class SchemaParseError(SchemaWriterError):
    """Raised when a schema file cannot be parsed."""


class ConfigError(SchemaWriterError):
    """Raised for invalid or unreadable writer configuration."""
