"""
Command-line interface for Page Organizer.
"""

import logging
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from page_organizer import __version__
from page_organizer.config import get_config
from page_organizer.exceptions import PageOrganizerException
from page_organizer.organizer import CUSTOM_PAGE_ORDER, PageOrganizer
from page_organizer.selector import parse_selector
from page_organizer.sorters import SortPreset, get_sorter
from page_organizer.types import OrganizeResult
from page_organizer.utils import (
    check_pdf_path,
    configure_logging,
    format_file_size,
    format_page_order,
    get_pdf_info,
)

console = Console()

PRESET_DESCRIPTIONS = {
    SortPreset.REVERSE_ORDER: "Last page first",
    SortPreset.DUPLEX_SORT: "Interleave fronts with reversed backs of a one-sided scan",
    SortPreset.BOOKLET_SORT: "Outer pages paired with inner pages for saddle-stitched booklets",
    SortPreset.SIDE_STITCH_BOOKLET_SORT: "Sheets of four ordered 4, 1, 2, 3",
    SortPreset.ODD_EVEN_SPLIT: "Odd pages, then even pages",
    SortPreset.REMOVE_FIRST: "Drop the first page",
    SortPreset.REMOVE_LAST: "Drop the last page",
    SortPreset.REMOVE_FIRST_AND_LAST: "Drop the first and last pages",
}


def _default_output(input_pdf, suffix):
    return os.path.join("output", f"{Path(input_pdf).stem}_{suffix}.pdf")


def _fail(message):
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}")
    sys.exit(1)


def _open(input_pdf, password):
    is_valid, error_msg = check_pdf_path(input_pdf)
    if not is_valid:
        _fail(error_msg)
    return PageOrganizer(input_pdf, password=password)


def _report(result: OrganizeResult):
    console.print(
        f"\n[bold green]✓ Wrote {result.pages_written} of {result.total_pages} pages:[/bold green] "
        f"{result.output_file}"
    )
    console.print(f"[dim]Page order: {format_page_order(result.page_order)}[/dim]")
    console.print()


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', count=True, help='Log progress (-vv for debug output)')
def cli(verbose):
    """
    Page Organizer CLI - Select, reorder and remove PDF pages.
    """
    if verbose >= 2:
        configure_logging(logging.DEBUG)
    elif verbose == 1:
        configure_logging(logging.INFO)
    else:
        try:
            level = get_config().logging.level
        except PageOrganizerException as e:
            _fail(e)
        configure_logging(level)


@cli.command(name="preview")
@click.option('--pages', '-n', 'total_pages', required=True, type=click.IntRange(min=0),
              help='Page count of the document')
@click.option('--selector', '-s', type=str, help="Page selector (e.g., '1-3,5,2n-1')")
@click.option('--preset', '-p', type=str, help='Sort preset name')
def preview(total_pages, selector, preset):
    """
    Show the page order a selector or preset produces, without a PDF.

    Examples:

        page-organizer preview -n 10 -s '2n-1'

        page-organizer preview -n 8 -p BOOKLET_SORT
    """
    if bool(selector) == bool(preset):
        _fail("Supply exactly one of --selector or --preset.")

    try:
        if selector:
            page_order = parse_selector(selector, total_pages)
        else:
            page_order = get_sorter(preset)(total_pages)
    except PageOrganizerException as e:
        _fail(e)

    console.print(" ".join(str(index + 1) for index in page_order))


@cli.command(name="presets")
def list_presets():
    """
    List the available sort presets.
    """
    table = Table(title="Sort Presets")
    table.add_column("Preset", style="cyan", no_wrap=True)
    table.add_column("Order for 8 pages", style="green")
    table.add_column("Description")

    for preset in SortPreset:
        table.add_row(
            preset.value,
            format_page_order(preset.sort(8)),
            PRESET_DESCRIPTIONS[preset],
        )
    table.add_row(CUSTOM_PAGE_ORDER, "-", "Order given by --selector")

    console.print()
    console.print(table)
    console.print()


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--password', type=str, default=None, help='Password for encrypted PDFs')
def show_info(input_pdf, password):
    """
    Display information about a PDF file.

    Example:

        page-organizer info input.pdf
    """
    try:
        info = get_pdf_info(input_pdf, password=password)
    except PageOrganizerException as e:
        _fail(e)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(info.file_size))
    table.add_row("Number of Pages", str(info.num_pages))
    table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")

    for label, value in (
        ("Title", info.title),
        ("Author", info.author),
        ("Subject", info.subject),
        ("Creator", info.creator),
        ("Producer", info.producer),
    ):
        if value:
            table.add_row(label, value)

    console.print()
    console.print(table)
    console.print()


@cli.command(name="select")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--selector', '-s', required=True, type=str,
              help="Pages to keep, in output order (e.g., '3,1-2,2n')")
@click.option('--output', '-o', type=click.Path(), help='Output PDF path')
@click.option('--password', type=str, default=None, help='Password for encrypted PDFs')
def select(input_pdf, selector, output, password):
    """
    Extract and rearrange pages with a page selector.

    Examples:

        page-organizer select input.pdf -s '1-3,7'

        page-organizer select input.pdf -s 'all,1' -o with_cover_again.pdf
    """
    try:
        organizer = _open(input_pdf, password)
        result = organizer.rearrange_pages(selector, output or _default_output(input_pdf, "selected"))
    except PageOrganizerException as e:
        _fail(e)
    _report(result)


@cli.command(name="sort")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--preset', '-p', required=True, type=str,
              help='Sort preset (see the presets command)')
@click.option('--selector', '-s', type=str, default=None,
              help='Page order for the CUSTOM_PAGE_ORDER preset')
@click.option('--output', '-o', type=click.Path(), help='Output PDF path')
@click.option('--password', type=str, default=None, help='Password for encrypted PDFs')
def sort(input_pdf, preset, selector, output, password):
    """
    Reorder pages with a named preset.

    Examples:

        page-organizer sort scan.pdf -p DUPLEX_SORT

        page-organizer sort input.pdf -p CUSTOM_PAGE_ORDER -s '2,1,3-10'
    """
    try:
        organizer = _open(input_pdf, password)
        destination = output or _default_output(input_pdf, preset.lower())
        result = organizer.sort_pages(preset, destination, selector=selector)
    except PageOrganizerException as e:
        _fail(e)
    _report(result)


@cli.command(name="remove")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--pages', '-r', required=True, type=str,
              help="Pages to remove (e.g., '1,5-6,2n')")
@click.option('--output', '-o', type=click.Path(), help='Output PDF path')
@click.option('--password', type=str, default=None, help='Password for encrypted PDFs')
def remove(input_pdf, pages, output, password):
    """
    Remove pages named by a page selector.

    Example:

        page-organizer remove input.pdf -r '1,10-12'
    """
    try:
        organizer = _open(input_pdf, password)
        to_remove = parse_selector(pages, organizer.num_pages)
        result = organizer.remove_pages(to_remove, output or _default_output(input_pdf, "removed"))
    except PageOrganizerException as e:
        _fail(e)
    _report(result)


@cli.command(name="remove-blank")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--threshold', '-t', type=click.IntRange(min=0), default=None,
              help='Pages with fewer text characters than this count as blank')
@click.option('--output', '-o', type=click.Path(), help='Output PDF path')
@click.option('--password', type=str, default=None, help='Password for encrypted PDFs')
def remove_blank(input_pdf, threshold, output, password):
    """
    Remove pages without images and without (enough) text.

    Example:

        page-organizer remove-blank scan.pdf -t 5
    """
    try:
        organizer = _open(input_pdf, password)
        result = organizer.remove_blank_pages(
            output or _default_output(input_pdf, "no_blanks"),
            threshold=threshold,
        )
    except PageOrganizerException as e:
        _fail(e)
    _report(result)


if __name__ == '__main__':
    cli()
