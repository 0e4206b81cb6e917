"""
Command-line interface for PDF Lexicon.
"""

import json
import os
import sys

import click
from rich.console import Console
from rich.progress import Progress, TextColumn, BarColumn, TimeRemainingColumn, TaskProgressColumn
from rich.table import Table

from pdf_lexicon import __version__
from pdf_lexicon.backends.pypdf_backend import PypdfBackend
from pdf_lexicon.diagnostics import count_operators, dump_operations, format_line
from pdf_lexicon.exceptions import PDFLexiconError
from pdf_lexicon.extractor import DictionaryExtractor, ErrorPolicy
from pdf_lexicon.layout import DEFAULT_PROFILE, LayoutProfile
from pdf_lexicon.serialization import write_entries
from pdf_lexicon.utils import configure_logging

console = Console()


def _fail(error):
    console.print(f"\n[bold red]✗ Error:[/bold red] {error}")
    sys.exit(1)


def _load_profile(profile_path):
    if profile_path is None:
        return DEFAULT_PROFILE
    return LayoutProfile.load(profile_path)


page_option = click.option(
    '--page',
    default=None,
    help='Only process this page (0-based index)',
    type=click.IntRange(min=0)
)
skip_option = click.option(
    '--skip',
    default=0,
    show_default=True,
    help='Number of leading pages to skip (front matter)',
    type=click.IntRange(min=0)
)
profile_option = click.option(
    '--profile',
    'profile_path',
    default=None,
    help='JSON layout profile overriding the default thresholds',
    type=click.Path(exists=True, dir_okay=False)
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    PDF Lexicon - Extract structured entries from dictionary PDFs.
    """
    pass


@cli.command(name="extract")
@click.argument('input_pdf', type=click.Path(exists=True))
@page_option
@skip_option
@click.option(
    '--output', '-o',
    default=None,
    help='Write the entries to this JSON file instead of printing them',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--on-error',
    default=ErrorPolicy.ABORT.value,
    show_default=True,
    help='What an extraction error skips',
    type=click.Choice([policy.value for policy in ErrorPolicy])
)
@profile_option
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def extract(input_pdf, page, skip, output, on_error, profile_path, verbose):
    """
    Extract dictionary entries from a PDF.

    Examples:

        pdf-lexicon extract dictionary.pdf --skip 3 -o entries.json

        pdf-lexicon extract dictionary.pdf --page 42

        pdf-lexicon extract dictionary.pdf --on-error skip-entry -o entries.json
    """
    configure_logging(verbose, console=console)
    try:
        extractor = DictionaryExtractor(
            input_pdf,
            profile=_load_profile(profile_path),
            policy=ErrorPolicy(on_error),
        )
        pages = extractor.select_pages(page, skip)

        console.print(f"\n[bold cyan]Extracting entries from {len(pages)} page(s)...[/bold cyan]")

        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeRemainingColumn(),
            console=console
        ) as progress:
            task = progress.add_task("Parsing pages", total=len(pages))

            def update_progress(current, total):
                progress.update(task, completed=current)

            result = extractor.extract(page, skip, progress_callback=update_progress)

        if output:
            write_entries(result, output)
        else:
            for entry in result.entries:
                console.print(entry)
            for alias in result.aliases:
                console.print(f"[dim]{alias.source} → {alias.target}[/dim]")

        summary = Table(title="Extraction Summary", show_header=False)
        summary.add_column("Property", style="cyan")
        summary.add_column("Value", style="green")
        summary.add_row("File", os.path.basename(input_pdf))
        summary.add_row("Pages", str(result.pages_processed))
        summary.add_row("Entries", str(len(result.entries)))
        summary.add_row("Aliases", str(len(result.aliases)))
        summary.add_row("Failures", str(len(result.failures)))
        console.print(summary)

        if result.failures:
            console.print(f"\n[bold yellow]⚠ Skipped {len(result.failures)} item(s):[/bold yellow]")
            for failure in result.failures[:10]:
                console.print(
                    f"  • page {failure.page} ({failure.stage}) "
                    f"{failure.error_type}: {failure.message}"
                )
            if len(result.failures) > 10:
                console.print(f"  ... and {len(result.failures) - 10} more")

        if output:
            console.print(f"\n[bold green]✓ Wrote {len(result.entries)} entries[/bold green]")
            console.print(f"[dim]Output file: {os.path.abspath(output)}[/dim]")
        console.print()

    except PDFLexiconError as e:
        _fail(e)
    except OSError as e:
        _fail(e)


@cli.command(name="dump-ops")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--page',
    required=True,
    help='Page to dump (0-based index)',
    type=click.IntRange(min=0)
)
def dump_ops(input_pdf, page):
    """
    Print the raw content stream operations of one page.

    Example:

        pdf-lexicon dump-ops dictionary.pdf --page 42
    """
    try:
        extractor = DictionaryExtractor(input_pdf)
        (index,) = extractor.select_pages(page)
        for line in dump_operations(extractor.document.get_page(index)):
            click.echo(line)
    except PDFLexiconError as e:
        _fail(e)


@cli.command(name="dump-lines")
@click.argument('input_pdf', type=click.Path(exists=True))
@page_option
@skip_option
@profile_option
@click.option('--verbose', '-v', is_flag=True, help='Show position, font and size of each line')
def dump_lines(input_pdf, page, skip, profile_path, verbose):
    """
    Print the reconstructed lines of the selected pages.

    Example:

        pdf-lexicon dump-lines dictionary.pdf --page 42 --verbose
    """
    try:
        extractor = DictionaryExtractor(input_pdf, profile=_load_profile(profile_path))
        for index in extractor.select_pages(page, skip):
            if verbose:
                click.echo(f"--- page {index} ---")
            for line in extractor.iter_lines(index):
                click.echo(format_line(line, verbose))
    except PDFLexiconError as e:
        _fail(e)


@cli.command(name="count-ops")
@click.argument('input_pdf', type=click.Path(exists=True))
def count_ops(input_pdf):
    """
    Count content stream operators over the whole document.

    Example:

        pdf-lexicon count-ops dictionary.pdf
    """
    try:
        document = PypdfBackend().load(input_pdf)
        counts = count_operators(document)

        table = Table(title="Operator Usage")
        table.add_column("Operator", style="cyan")
        table.add_column("Count", style="green", justify="right")
        for name, count in counts:
            table.add_row(name, str(count))
        console.print(table)
    except PDFLexiconError as e:
        _fail(e)


@cli.command(name="profile")
@click.option(
    '--output', '-o',
    default=None,
    help='Save the default profile to this file as a starting point',
    type=click.Path(dir_okay=False)
)
def show_profile(output):
    """
    Print the default layout profile as JSON.

    Example:

        pdf-lexicon profile -o my-dictionary.json
    """
    if output:
        DEFAULT_PROFILE.save(output)
        console.print(f"[bold green]✓ Saved default profile to {output}[/bold green]")
        return
    click.echo(json.dumps(DEFAULT_PROFILE.to_dict(), indent=2))


if __name__ == '__main__':
    cli()
