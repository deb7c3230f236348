"""GraphQL schema to Scala code generator."""

__version__ = "0.1.0"
