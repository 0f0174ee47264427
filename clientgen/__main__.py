"""Entry point: python -m clientgen

Reads a JSON schema document and writes a TypeScript client.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .errors import ClientGenError
from .generator import GeneratorOptions, TypeScriptGenerator
from .loader import load_schema
from .sinks import FileSink, StdoutSink
from .url_template import template_to_expression


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log generation progress.")
def main(verbose: bool) -> None:
    """Generate TypeScript API clients from schema documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the client to this file instead of stdout.")
@click.option("--no-import", "no_import", is_flag=True, help="Do not emit the axios import.")
def generate(schema_path: Path, output: Path | None, no_import: bool) -> None:
    """Generate a client from SCHEMA_PATH."""
    sink = FileSink(output) if output else StdoutSink()
    options = GeneratorOptions(transport_import=not no_import)
    try:
        schema = load_schema(schema_path)
        TypeScriptGenerator(schema, sink, options).render()
    except ClientGenError as e:
        raise click.ClickException(str(e)) from e
    if output:
        click.echo(f"Generated {output}", err=True)


@main.command()
@click.argument("url")
def template(url: str) -> None:
    """Show the expression and parameters of a URL template."""
    try:
        expression, args = template_to_expression(url)
    except ClientGenError as e:
        raise click.ClickException(str(e)) from e
    click.echo(expression)
    for arg in args:
        click.echo(f"{arg.name}: {arg.type}")


if __name__ == "__main__":
    main()
