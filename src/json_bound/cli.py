"""Command-line interface for json-bound."""

import logging
import sys
import click
from pathlib import Path
from . import __version__
from .combinators import document
from .errors import format_failure
from .primitives import any_
from .serialization import JSON_COMPACT, JSON_PRETTY
from .types import TransformationError


@click.group()
@click.version_option(version=__version__)
def main():
    """json-bound - Bidirectional JSON contracts."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--compact', '-c', is_flag=True, help='Emit compact JSON instead of pretty-printed')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), help='Output file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def reformat(input_file: Path, compact: bool, output: Path, verbose: bool):
    """Re-serialize a JSON document with the pretty or compact codec."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    source = document(any_(), JSON_PRETTY)
    target = document(any_(), JSON_COMPACT if compact else JSON_PRETTY)

    try:
        restored = source.restore(input_file.read_text(encoding='utf-8'))
        text = target.transform(restored)
    except TransformationError as e:
        click.echo(format_failure(e), err=True)
        sys.exit(1)

    if output:
        output.write_text(text, encoding='utf-8')
        click.echo(f"Wrote {target.config.name} document to {output}")
    else:
        click.echo(text)


if __name__ == '__main__':
    main()
