"""Emitters turning IR definitions into generated Scala declarations.

Every emitter is a pure function. Argument records synthesized while walking
a type's fields are returned next to the type's own declaration rather than
collected in shared state.
"""

from dataclasses import dataclass, field
from typing import Callable

from .arguments import extract_args, field_type_expr
from .declarations import (
    Declaration,
    GeneratedCase,
    GeneratedField,
    GeneratedRecord,
    GeneratedSumType,
)
from .ir import Definition, IREnum, IRField, IRSchema, IRType, IRUnion
from .naming import safe_name
from .type_mapper import ScalarRegistry, map_type

DEFAULT_EFFECT = "zio.UIO"


@dataclass
class EmitContext:
    """Settings shared by the emitters for one generation run."""
    scalars: ScalarRegistry = field(default_factory=ScalarRegistry)
    effect: str = DEFAULT_EFFECT


def stream_of(result_expr: str) -> str:
    return f"ZStream[Any, Nothing, {result_expr}]"


def emit_fields(
    fields: list[IRField], ctx: EmitContext
) -> tuple[list[GeneratedField], list[GeneratedRecord]]:
    """Emit record fields plus the argument records they require."""
    generated = []
    args_records = []
    for ir_field in fields:
        args = extract_args(ir_field, ctx.scalars)
        if args is not None:
            args_records.append(args)
        generated.append(
            GeneratedField(
                name=safe_name(ir_field.name),
                type_expr=field_type_expr(ir_field, map_type(ir_field.type, ctx.scalars)),
                description=ir_field.description,
            )
        )
    return generated, args_records


def emit_object(
    object_type: IRType, ctx: EmitContext, parent: str | None = None
) -> tuple[GeneratedRecord, list[GeneratedRecord]]:
    """Emit a case class for an object type and its argument records."""
    fields, args_records = emit_fields(object_type.fields, ctx)
    record = GeneratedRecord(
        name=object_type.name,
        fields=fields,
        description=object_type.description,
        parent=parent,
    )
    return record, args_records


def emit_input(input_type: IRType, ctx: EmitContext) -> GeneratedRecord:
    """Emit a case class for an input type (input fields take no arguments)."""
    return GeneratedRecord(
        name=input_type.name,
        fields=[
            GeneratedField(
                name=safe_name(f.name),
                type_expr=map_type(f.type, ctx.scalars),
                description=f.description,
            )
            for f in input_type.fields
        ],
        description=input_type.description,
    )


def emit_enum(enum: IREnum) -> GeneratedSumType:
    """Emit a sealed trait with one case object per enum value."""
    return GeneratedSumType(
        name=enum.name,
        variants=[
            GeneratedCase(name=safe_name(v.name), parent=enum.name, description=v.description)
            for v in enum.values
        ],
        description=enum.description,
    )


def emit_union(
    union: IRUnion, schema: IRSchema, ctx: EmitContext
) -> tuple[GeneratedSumType, list[GeneratedRecord]]:
    """Emit a sealed trait with one case class per member type.

    Raises:
        UnknownTypeError: if a member is not an object type of the schema
    """
    variants = []
    args_records = []
    for member_name in union.members:
        member = schema.require_object_type(member_name, f"union '{union.name}'")
        record, member_args = emit_object(member, ctx, parent=union.name)
        variants.append(record)
        args_records.extend(member_args)
    sum_type = GeneratedSumType(
        name=union.name,
        variants=variants,
        description=union.description,
    )
    return sum_type, args_records


def _emit_root(object_type: IRType, ctx: EmitContext, wrap: Callable[[str], str]) -> GeneratedRecord:
    return GeneratedRecord(
        name=object_type.name,
        fields=[
            GeneratedField(
                name=safe_name(f.name),
                type_expr=field_type_expr(f, wrap(map_type(f.type, ctx.scalars))),
            )
            for f in object_type.fields
        ],
        multiline=True,
    )


def emit_query_or_mutation(object_type: IRType, ctx: EmitContext) -> GeneratedRecord:
    """Emit a root query or mutation; each field yields ``effect[Result]``."""
    return _emit_root(object_type, ctx, lambda result: f"{ctx.effect}[{result}]")


def emit_subscription(object_type: IRType, ctx: EmitContext) -> GeneratedRecord:
    """Emit a root subscription; each field yields a ``ZStream`` of results."""
    return _emit_root(object_type, ctx, stream_of)


def emit_definition(
    definition: Definition, schema: IRSchema, ctx: EmitContext
) -> tuple[Declaration, list[GeneratedRecord]]:
    """Emit the declaration for any non-root definition kind."""
    if isinstance(definition, IRType):
        if definition.is_input:
            return emit_input(definition, ctx), []
        return emit_object(definition, ctx)
    if isinstance(definition, IREnum):
        return emit_enum(definition), []
    if isinstance(definition, IRUnion):
        return emit_union(definition, schema, ctx)
    raise TypeError(f"Unsupported definition: {type(definition).__name__}")
