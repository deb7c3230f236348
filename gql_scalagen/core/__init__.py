"""Core modules for GraphQL to Scala code generation."""

from .arguments import extract_args, field_type_expr
from .config import WriterConfig, load_config
from .declarations import (
    GeneratedCase,
    GeneratedField,
    GeneratedRecord,
    GeneratedSumType,
)
from .emitters import (
    EmitContext,
    emit_enum,
    emit_input,
    emit_object,
    emit_query_or_mutation,
    emit_subscription,
    emit_union,
)
from .errors import (
    ConfigError,
    DuplicateDeclarationError,
    SchemaParseError,
    SchemaWriterError,
    UnknownTypeError,
)
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
    ScalafmtHook,
)
from .ir import (
    IRArgument,
    IREnum,
    IREnumValue,
    IRField,
    IRListType,
    IRNamedType,
    IRSchema,
    IRSchemaDefinition,
    IRType,
    IRUnion,
)
from .naming import safe_name
from .parser import SchemaParser, parse_schema
from .type_mapper import ScalarRegistry, map_type
from .writer import SchemaWriter, write

__all__ = [
    # Config
    "WriterConfig",
    "load_config",
    # Errors
    "ConfigError",
    "DuplicateDeclarationError",
    "SchemaParseError",
    "SchemaWriterError",
    "UnknownTypeError",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "ScalafmtHook",
    "HookRunner",
    # IR types
    "IRArgument",
    "IREnum",
    "IREnumValue",
    "IRField",
    "IRListType",
    "IRNamedType",
    "IRSchema",
    "IRSchemaDefinition",
    "IRType",
    "IRUnion",
    # Parser
    "SchemaParser",
    "parse_schema",
    # Mapping
    "ScalarRegistry",
    "map_type",
    "safe_name",
    "extract_args",
    "field_type_expr",
    # Generated declarations
    "GeneratedCase",
    "GeneratedField",
    "GeneratedRecord",
    "GeneratedSumType",
    # Emitters
    "EmitContext",
    "emit_enum",
    "emit_input",
    "emit_object",
    "emit_query_or_mutation",
    "emit_subscription",
    "emit_union",
    # Writer
    "SchemaWriter",
    "write",
]
