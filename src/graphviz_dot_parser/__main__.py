"""CLI entry point for graphviz-dot-parser."""

import sys

import click

from graphviz_dot_parser.ir.graph import to_graph
from graphviz_dot_parser.parsers import parse


@click.command()
@click.argument("input", type=click.Path(exists=True, dir_okay=False))
def main(input: str) -> None:
    """Parse a DOT file and print the resulting graph."""
    try:
        with open(input, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"error: cannot read '{input}': {e}", err=True)
        sys.exit(1)

    try:
        graph = to_graph(parse(text))
    except ValueError as e:
        click.echo(f"Unable to parse, error: {e}", err=True)
        sys.exit(1)

    click.echo(repr(graph))


if __name__ == "__main__":
    main()
