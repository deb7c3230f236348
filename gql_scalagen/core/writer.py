"""Scala source writer for GraphQL schemas.

Renders the whole document through a Jinja2 template:

    writer = SchemaWriter(WriterConfig(effect="zio.Task"))
    source = writer.write(schema)

The output groups data types under ``object Types`` and root operations under
``object Operations``. It is raw text; run it through a formatter such as
scalafmt (see ``hooks.ScalafmtHook``) for canonical layout.
"""

from dataclasses import dataclass

from jinja2 import Environment, PackageLoader, select_autoescape

from .arguments import extract_args
from .config import WriterConfig
from .declarations import Declaration, GeneratedRecord
from .emitters import (
    DEFAULT_EFFECT,
    EmitContext,
    emit_definition,
    emit_enum,
    emit_input,
    emit_object,
    emit_query_or_mutation,
    emit_subscription,
    emit_union,
)
from .errors import DuplicateDeclarationError
from .ir import IREnum, IRField, IRSchema, IRSchemaDefinition, IRType, IRUnion
from .type_mapper import ScalarRegistry

EMPTY_DOCUMENT = "\n"

TYPES_IMPORT = "import Types._"
ANNOTATIONS_IMPORT = "import caliban.schema.Annotations._"
STREAM_IMPORT = "import zio.stream.ZStream"


@dataclass
class RootTypes:
    """The object types serving as query, mutation and subscription roots."""
    query: IRType | None = None
    mutation: IRType | None = None
    subscription: IRType | None = None

    @property
    def names(self) -> set[str]:
        return {t.name for t in (self.query, self.mutation, self.subscription) if t is not None}


def resolve_root_types(schema: IRSchema) -> RootTypes:
    """Find the root operation types.

    Names given in the schema definition must exist; otherwise the default
    names are used when the schema defines them.
    """
    schema_def = schema.schema_definition or IRSchemaDefinition()

    def resolve(explicit: str | None, default: str, operation: str) -> IRType | None:
        if explicit is not None:
            return schema.require_object_type(explicit, f"the schema {operation} root")
        return schema.get_object_type(default)

    return RootTypes(
        query=resolve(schema_def.query, "Query", "query"),
        mutation=resolve(schema_def.mutation, "Mutation", "mutation"),
        subscription=resolve(schema_def.subscription, "Subscription", "subscription"),
    )


def union_member_names(schema: IRSchema) -> set[str]:
    """Names of the object types listed as members of some union."""
    return {member for union in schema.unions.values() for member in union.members}


class SchemaWriter:
    """Generates Scala case classes and sealed traits from a GraphQL IR."""

    TEMPLATE = "document.scala.j2"

    def __init__(self, config: WriterConfig | None = None):
        """Initialize the writer.

        Args:
            config: Writer options; defaults to ``WriterConfig()``
        """
        self.config = config or WriterConfig()
        self.scalars = ScalarRegistry(self.config.scalar_mappings)
        self.env = Environment(
            loader=PackageLoader("gql_scalagen", "templates"),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def _context(self, effect: str | None = None) -> EmitContext:
        return EmitContext(scalars=self.scalars, effect=effect or self.config.effect)

    def write(self, schema: IRSchema, effect: str | None = None) -> str:
        """Generate the Scala source for a whole schema document.

        Args:
            schema: The parsed schema
            effect: Wrapper for query/mutation results; defaults to the config value

        Raises:
            UnknownTypeError: if a union member or explicit root type is missing
            DuplicateDeclarationError: if two different declarations share a name
        """
        ctx = self._context(effect)
        roots = resolve_root_types(schema)
        types = self._collect_types(schema, roots, ctx)
        operations = self._collect_operations(roots, ctx)

        if not types and not operations:
            return EMPTY_DOCUMENT

        imports = []
        if types and operations:
            imports.append(TYPES_IMPORT)
        if any(d.has_annotations for d in types):
            imports.append(ANNOTATIONS_IMPORT)
        if roots.subscription is not None:
            imports.append(STREAM_IMPORT)

        template = self.env.get_template(self.TEMPLATE)
        return template.render(
            package_name=self.config.package_name,
            imports=imports,
            types=[d.render() for d in types],
            operations=[d.render() for d in operations],
        )

    def _collect_types(
        self, schema: IRSchema, roots: RootTypes, ctx: EmitContext
    ) -> list[Declaration]:
        """Emit every non-root definition, argument records first, in declaration order.

        Union members are declared only as variants of their union.
        """
        collected: dict[str, Declaration] = {}
        nested_names = roots.names | union_member_names(schema)
        for definition in schema.definitions:
            if isinstance(definition, IRType) and not definition.is_input and definition.name in nested_names:
                # Declared elsewhere; only the argument records are top-level data types
                _, declarations = emit_object(definition, ctx)
            else:
                declaration, args_records = emit_definition(definition, schema, ctx)
                declarations = [*args_records, declaration]
            for declaration in declarations:
                self._add_declaration(collected, declaration)
        return list(collected.values())

    @staticmethod
    def _add_declaration(collected: dict[str, Declaration], declaration: Declaration):
        existing = collected.get(declaration.name)
        if existing is None:
            collected[declaration.name] = declaration
        elif existing.shape() != declaration.shape():
            raise DuplicateDeclarationError(declaration.name)

    @staticmethod
    def _collect_operations(roots: RootTypes, ctx: EmitContext) -> list[GeneratedRecord]:
        operations = []
        if roots.query is not None:
            operations.append(emit_query_or_mutation(roots.query, ctx))
        if roots.mutation is not None:
            operations.append(emit_query_or_mutation(roots.mutation, ctx))
        if roots.subscription is not None:
            operations.append(emit_subscription(roots.subscription, ctx))
        return operations

    def write_object(self, object_type: IRType) -> str:
        """Generate the case class for one object type (argument records excluded)."""
        record, _ = emit_object(object_type, self._context())
        return record.render()

    def write_arguments(self, field: IRField) -> str:
        """Generate the argument record for a field, or "" when it has none."""
        args = extract_args(field, self.scalars)
        return args.render() if args is not None else ""

    def write_input_object(self, input_type: IRType) -> str:
        return emit_input(input_type, self._context()).render()

    def write_enum(self, enum: IREnum) -> str:
        return emit_enum(enum).render()

    def write_union(self, union: IRUnion, schema: IRSchema) -> str:
        sum_type, _ = emit_union(union, schema, self._context())
        return sum_type.render()

    def write_root_query_or_mutation_def(self, object_type: IRType, effect: str | None = None) -> str:
        """Generate a root query or mutation case class wrapping results in ``effect``."""
        return emit_query_or_mutation(object_type, self._context(effect)).render()

    def write_root_subscription_def(self, object_type: IRType) -> str:
        """Generate a root subscription case class with streamed results."""
        return emit_subscription(object_type, self._context()).render()


def write(schema: IRSchema, effect: str = DEFAULT_EFFECT) -> str:
    """Generate Scala source for a schema with the default configuration."""
    return SchemaWriter().write(schema, effect)
