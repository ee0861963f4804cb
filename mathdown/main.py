"""
Command line interface.

    mathdown render notes.md -o notes.html --standalone --title "Notes"
    cat notes.md | mathdown render
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from mathdown import __version__
from mathdown.config.settings import get_settings
from mathdown.converters import get_renderer
from mathdown.utils.file_handler import FileHandler
from mathdown.utils.logger import setup_logger


# Status messages go to stderr so piped HTML stays clean
console = Console(stderr=True)
logger = setup_logger(__name__)


@click.group()
@click.version_option(__version__, prog_name="mathdown")
def cli():
    """mathdown - Render Markdown with TeX math to HTML."""
    pass


@cli.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(path_type=Path, allow_dash=True),
)
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write HTML to this file (default: stdout)",
)
@click.option(
    "--standalone",
    "-s",
    is_flag=True,
    help="Wrap the output in a complete HTML document",
)
@click.option(
    "--title",
    "-t",
    default="",
    help="Document title (with --standalone)",
)
@click.option(
    "--description",
    default="",
    help="Meta description (with --standalone)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def render(
    input_file: Optional[Path],
    output_file: Optional[Path],
    standalone: bool,
    title: str,
    description: str,
    verbose: bool,
) -> None:
    """
    Render a Markdown file (or stdin) to HTML.
    """
    settings = get_settings()

    if verbose:
        logger.setLevel("DEBUG")

    try:
        source = FileHandler.read_source(input_file, encoding=settings.output_encoding)
        renderer = get_renderer()

        if standalone:
            if not title and input_file is not None and str(input_file) != "-":
                title = input_file.stem
            output = renderer.render_document(source, title=title, description=description)
        else:
            output = renderer.render(source)

        if output_file is None:
            click.echo(output, nl=False)
            return

        FileHandler.write_file(output_file, output, encoding=settings.output_encoding)
        console.print(f"[green]✓[/green] Wrote HTML to: {output_file}")
        logger.info(f"Rendered {len(source)} characters to {output_file}")

    except Exception as e:
        logger.error(f"Error rendering markdown: {e}", exc_info=True)
        console.print(f"[bold red]❌ Error: {e}[/bold red]")
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
