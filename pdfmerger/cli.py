"""
Command-line interface for pdfmerger.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Tuple

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .exceptions import PDFMergerError
from .merger import PDFMerger
from .pages import ALL
from .utils import get_logger

console = Console()


def split_source(source: str) -> Tuple[str, str]:
    """Split ``path[:pages]`` into the path and its page selector."""

    if Path(source).is_file():
        return source, ALL
    path, sep, pages = source.rpartition(":")
    if not sep or not path or not pages or "/" in pages or "\\" in pages:
        return source, ALL
    return path, pages


def _build_merger(sources, clean=False, temp_dir=None) -> PDFMerger:
    merger = PDFMerger(clean, temp_dir=temp_dir)
    for source in sources:
        path, pages = split_source(source)
        merger.add_pdf(path, pages)
    return merger


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log every processed page')
def cli(verbose):
    """
    pdfmerger - Merge PDF files, or selected pages of them, into one PDF.

    Sources are given as PATH or PATH:PAGES, e.g. report.pdf:1,3,5-7.
    """
    if verbose:
        get_logger("pdfmerger").setLevel(logging.DEBUG)


@cli.command(name="merge")
@click.argument('sources', nargs=-1, required=True)
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF path',
    type=click.Path()
)
@click.option(
    '--clean',
    is_flag=True,
    help='Delete the source files after a successful merge'
)
@click.option(
    '--temp-dir',
    help='Directory for temporary files',
    type=click.Path(file_okay=False)
)
def merge(sources, output, clean, temp_dir):
    """
    Merge SOURCES into a single PDF.

    Examples:

        pdfmerger merge cover.pdf report.pdf:2-5 -o merged.pdf

        pdfmerger merge a.pdf:12-14,1-5 b.pdf --output combined.pdf
    """
    try:
        merger = _build_merger(sources, clean=clean, temp_dir=temp_dir)

        console.print(f"\n[bold cyan]Merging {len(merger)} PDF(s)...[/bold cyan]")
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console
        ) as progress:
            task = progress.add_task("Merging pages...", total=None)
            output_file = merger.merge("file", output)
            progress.update(task, completed=True)

        console.print(f"\n[bold green]✓ Successfully created:[/bold green] {output_file}")
        console.print(f"[dim]Output size: {os.path.getsize(output_file)} bytes[/dim]")
        console.print()

    except PDFMergerError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="plan")
@click.argument('sources', nargs=-1, required=True)
def show_plan(sources):
    """
    Show the page order a merge of SOURCES would produce.

    Example:

        pdfmerger plan a.pdf:2,1 b.pdf
    """
    try:
        plan = _build_merger(sources).plan()

        table = Table(title="Merge Plan")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Source", style="green")
        table.add_column("Page", style="magenta", justify="right")
        for index, planned in enumerate(plan, start=1):
            table.add_row(str(index), planned.source.name, str(planned.page))

        console.print(table)
        console.print(f"[dim]Total pages: {len(plan)}[/dim]")

    except PDFMergerError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


def main():
    cli()


if __name__ == '__main__':
    main()
