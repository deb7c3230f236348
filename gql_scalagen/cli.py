"""Command-line interface for gql-scalagen."""

from pathlib import Path

import click

from .core.config import WriterConfig, load_config
from .core.errors import SchemaWriterError
from .core.hooks import AddHeaderHook, HookRunner, ScalafmtHook
from .core.parser import SchemaParser
from .core.writer import SchemaWriter, resolve_root_types


def parse_scalar_mappings(values: tuple[str, ...]) -> dict[str, str]:
    """Turn ``NAME=ScalaType`` options into a mapping."""
    mappings = {}
    for value in values:
        name, sep, scala_type = value.partition("=")
        if not sep or not name.strip() or not scala_type.strip():
            raise click.BadParameter(
                f"expected NAME=ScalaType, got '{value}'", param_hint="--scalar"
            )
        mappings[name.strip()] = scala_type.strip()
    return mappings


@click.group()
@click.version_option(package_name="gql-scalagen")
def main():
    """GraphQL to Scala code generator.

    Generate Scala case classes and operation signatures from GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory of .graphql/.graphqls files.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output Scala file (e.g., Client.scala).",
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True),
    help="JSON file with writer settings.",
)
@click.option(
    "--effect",
    "-e",
    default=None,
    help="Wrapper type for query/mutation results (default: zio.UIO).",
)
@click.option(
    "--package-name",
    "-p",
    default=None,
    help="Scala package for the generated file.",
)
@click.option(
    "--scalar",
    "scalars",
    multiple=True,
    help="Custom scalar mapping NAME=ScalaType; may be repeated.",
)
@click.option(
    "--header",
    default=None,
    help="Text to put at the top of the generated file.",
)
@click.option(
    "--scalafmt",
    is_flag=True,
    help="Format the output with the scalafmt binary.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    config_file: str | None,
    effect: str | None,
    package_name: str | None,
    scalars: tuple[str, ...],
    header: str | None,
    scalafmt: bool,
    verbose: bool,
):
    """Generate Scala code from a GraphQL schema.

    Examples:

        gql-scalagen generate --schema ./schema.graphql --output ./Client.scala

        gql-scalagen generate -s ./schema -o ./Api.scala -p com.example.api -e zio.Task
    """
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    try:
        config = load_config(config_file) if config_file else WriterConfig()
        scalar_mappings = None
        if scalars:
            scalar_mappings = {**config.scalar_mappings, **parse_scalar_mappings(scalars)}
        config = config.merged(
            effect=effect,
            package_name=package_name,
            scalar_mappings=scalar_mappings,
        )

        if verbose:
            click.echo(f"Schema: {schema_path}")
            click.echo(f"Output: {output_path}")
            click.echo(f"Effect: {config.effect}")

        click.echo("Parsing schema...")
        ir = SchemaParser(str(schema_path)).parse_all()
        if ir.is_empty:
            click.echo(f"Warning: no type definitions found in {schema_path}", err=True)

        if verbose:
            roots = resolve_root_types(ir)
            click.echo(f"  Object types: {len(ir.object_types)}")
            click.echo(f"  Input types: {len(ir.input_types)}")
            click.echo(f"  Enums: {len(ir.enums)}")
            click.echo(f"  Unions: {len(ir.unions)}")
            click.echo(f"  Root operations: {', '.join(sorted(roots.names)) or 'none'}")

        runner = HookRunner()
        if scalafmt:
            runner.add_post_hook(ScalafmtHook())
        if header:
            runner.add_post_hook(AddHeaderHook(header))

        click.echo("Generating code...")
        ir = runner.run_pre_hooks(ir)
        code = SchemaWriter(config).write(ir)
        code = runner.run_post_hooks(output_path.name, code)
    except SchemaWriterError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"  Lines: {len(code.splitlines())}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(code)

    click.echo(f"Done! Generated code in {output_path}")


if __name__ == "__main__":
    main()
