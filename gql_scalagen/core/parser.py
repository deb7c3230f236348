"""GraphQL schema parser using graphql-core.

Parses .graphql/.graphqls files (or SDL text) and produces an IRSchema.
"""

import os

from graphql import (
    EnumTypeDefinitionNode,
    GraphQLSyntaxError,
    InputObjectTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    SchemaDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    parse,
    print_ast,
)

from .errors import SchemaParseError
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
    TypeRef,
)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls")


def parse_schema(source: str, source_name: str = "<string>") -> IRSchema:
    """Parse SDL text into an IRSchema. Blank text gives an empty schema."""
    builder = _IRBuilder()
    builder.add_source(source, source_name)
    return builder.ir


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        builder = _IRBuilder()
        for file_path in self._collect_schema_files():
            with open(file_path, encoding="utf-8") as f:
                builder.add_source(f.read(), os.path.basename(file_path))
        return builder.ir

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(SCHEMA_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)


class _IRBuilder:
    """Accumulates definitions from one or more sources into a single IRSchema."""

    def __init__(self):
        self.ir = IRSchema()

    def add_source(self, source: str, source_name: str):
        if not source.strip():
            return
        try:
            ast = parse(source)
        except GraphQLSyntaxError as e:
            raise SchemaParseError(f"Error parsing {source_name}: {e.message}") from e
        self._process_ast(ast)

    def _process_ast(self, ast):
        """Process GraphQL AST and populate IR."""
        for definition in ast.definitions:
            if isinstance(definition, ObjectTypeDefinitionNode):
                self._process_object_type(definition)
            elif isinstance(definition, ObjectTypeExtensionNode):
                self._merge_extension_fields(definition)
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                self.ir.add(
                    IRType(
                        name=definition.name.value,
                        fields=self._process_fields(definition.fields),
                        description=_description(definition),
                        is_input=True,
                    )
                )
            elif isinstance(definition, EnumTypeDefinitionNode):
                self._process_enum(definition)
            elif isinstance(definition, UnionTypeDefinitionNode):
                self.ir.add(
                    IRUnion(
                        name=definition.name.value,
                        members=[t.name.value for t in definition.types or ()],
                        description=_description(definition),
                    )
                )
            elif isinstance(definition, SchemaDefinitionNode):
                self._process_schema_definition(definition)
            # Scalars, interfaces and directives are not generated

    def _process_object_type(self, node: ObjectTypeDefinitionNode):
        name = node.name.value
        fields = self._process_fields(node.fields)
        existing = self.ir.get_object_type(name)
        if existing is not None:
            # An earlier 'extend type' created it: base fields go first
            base_names = {f.name for f in fields}
            existing.fields = fields + [f for f in existing.fields if f.name not in base_names]
            existing.description = _description(node) or existing.description
        else:
            self.ir.add(IRType(name=name, fields=fields, description=_description(node)))

    def _merge_extension_fields(self, node: ObjectTypeExtensionNode):
        """Merge 'extend type' fields into the existing type, creating it if needed."""
        name = node.name.value
        extension_fields = self._process_fields(node.fields)
        existing = self.ir.get_object_type(name)
        if existing is None:
            self.ir.add(IRType(name=name, fields=extension_fields))
            return
        existing_names = {f.name for f in existing.fields}
        for field in extension_fields:
            if field.name not in existing_names:
                existing.fields.append(field)
                existing_names.add(field.name)

    def _process_enum(self, node: EnumTypeDefinitionNode):
        self.ir.add(
            IREnum(
                name=node.name.value,
                values=[
                    IREnumValue(name=v.name.value, description=_description(v))
                    for v in node.values or ()
                ],
                description=_description(node),
            )
        )

    def _process_schema_definition(self, node: SchemaDefinitionNode):
        schema_def = self.ir.schema_definition or IRSchemaDefinition()
        for operation_type in node.operation_types:
            setattr(schema_def, operation_type.operation.value, operation_type.type.name.value)
        self.ir.schema_definition = schema_def

    def _process_fields(self, field_nodes) -> list[IRField]:
        """Process field definitions into the IRField list."""
        fields = []
        for node in field_nodes or ():
            args = [
                IRArgument(
                    name=arg_node.name.value,
                    type=_convert_type(arg_node.type),
                    default_value=print_ast(arg_node.default_value)
                    if arg_node.default_value
                    else None,
                    description=_description(arg_node),
                )
                for arg_node in getattr(node, "arguments", None) or ()
            ]
            fields.append(
                IRField(
                    name=node.name.value,
                    type=_convert_type(node.type),
                    arguments=args,
                    description=_description(node),
                )
            )
        return fields


def _description(node) -> str | None:
    return node.description.value if node.description else None


def _convert_type(type_node: TypeNode, non_null: bool = False) -> TypeRef:
    """Convert a graphql-core type node into a nested IR type reference."""
    if isinstance(type_node, NonNullTypeNode):
        return _convert_type(type_node.type, non_null=True)
    if isinstance(type_node, ListTypeNode):
        return IRListType(of_type=_convert_type(type_node.type), non_null=non_null)
    if not isinstance(type_node, NamedTypeNode):
        raise SchemaParseError(f"Unsupported type reference: {type(type_node).__name__}")
    return IRNamedType(name=type_node.name.value, non_null=non_null)
