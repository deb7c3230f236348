"""Argument records for fields that take arguments.

A field ``user(id: Int): User`` is written as ``user: UserArgs => ...`` and
gets a companion ``case class UserArgs(id: Option[Int])``.
"""

from .declarations import GeneratedField, GeneratedRecord
from .ir import IRField
from .naming import args_type_name, safe_name
from .type_mapper import ScalarRegistry, map_type


def extract_args(field: IRField, scalars: ScalarRegistry | None = None) -> GeneratedRecord | None:
    """Build the argument record for a field, or None if it has no arguments."""
    if not field.arguments:
        return None
    return GeneratedRecord(
        name=args_type_name(field.name),
        fields=[
            GeneratedField(
                name=safe_name(arg.name),
                type_expr=map_type(arg.type, scalars),
                description=arg.description,
            )
            for arg in field.arguments
        ],
    )


def field_type_expr(field: IRField, result_expr: str) -> str:
    """Prefix a result type with the argument record when the field has arguments."""
    if field.arguments:
        return f"{args_type_name(field.name)} => {result_expr}"
    return result_expr
