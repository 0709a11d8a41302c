import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from copreader import parser
from copreader.document_cache import LibraryCache
from copreader.errors import TransportError
from copreader.json_utils import json_dumps
from copreader.parser.navigation import outline
from copreader.sync import import_text, sync_library
from copreader.xlsx import write_workbook

try:
    __version__ = version("copreader")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

# Mapping from format names to file extensions.
EXTENSIONS = {"json": ".json", "yaml": ".yaml", "xlsx": ".xlsx"}

data_dir_option = click.option(
    "--data-dir",
    type=click.Path(file_okay=False, dir_okay=True),
    envvar="COPREADER_HOME",
    default=None,
    help="Directory holding the offline cache.",
)


def _cache(data_dir: Optional[str]) -> LibraryCache:
    return LibraryCache.in_directory(Path(data_dir) if data_dir else None)


def _read_source(source: str, remote: bool) -> str:
    """Return the library text from a local file or a remote document.

    Throws:
        click.ClickException: If the remote document cannot be fetched.
    """

    if not remote:
        return Path(source).read_text(encoding="utf-8")
    try:
        return parser.fetch_remote_text(source)
    except TransportError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="COPREADER_LOG_FILE",
)
@click.version_option(__version__, prog_name="copreader")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


@cli.command()
@click.argument("source")
@click.option(
    "--remote",
    is_flag=True,
    help="Treat SOURCE as the id of a shared Google Doc.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "xlsx"]),
    default="json",
    help="Output format.",
)
def convert(
    source: str,
    remote: bool = False,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Convert library text to structured data.

    Args:
        source: Path of the text file, or a document id with ``--remote``.
        remote: Fetch ``source`` from the remote document service.
        output_path: Optional file or directory path for the converted data.
            If a directory is provided, the file name is derived from
            ``source``.
        output_format: Format of the converted data.
    """

    library = parser.parse(_read_source(source, remote))

    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)
        if final_path.is_dir():
            stem = source if remote else Path(source).stem
            final_path = final_path / f"{stem}{EXTENSIONS[output_format]}"

    if output_format == "xlsx":
        if final_path is None:
            raise click.UsageError("Output file is required for xlsx format.")
        write_workbook(library, final_path)
        return

    if output_format == "json":
        content = json_dumps(library.to_dict(), indent=True)
    else:
        content = yaml.safe_dump(
            library.to_dict(), allow_unicode=True, sort_keys=False
        )

    if final_path:
        final_path.write_text(content, encoding="utf-8")
    else:
        click.echo(content)


@cli.command()
@click.argument("source")
@click.option(
    "--remote",
    is_flag=True,
    help="Treat SOURCE as the id of a shared Google Doc.",
)
def check(source: str, remote: bool = False) -> None:
    """Report lines that the parser dropped.

    Exits with status 1 when any line was dropped.
    """

    result = parser.parse_with_diagnostics(_read_source(source, remote))
    for diagnostic in result.diagnostics:
        click.echo(
            f"line {diagnostic.line_number}: {diagnostic.reason}: "
            f"{diagnostic.line}"
        )

    if result.diagnostics:
        click.echo(f"{len(result.diagnostics)} problem(s) found", err=True)
        sys.exit(1)
    click.echo("No problems found")


@cli.command()
@click.argument("doc_id", required=False, envvar="COPREADER_DOC_ID")
@data_dir_option
def sync(doc_id: Optional[str] = None, data_dir: Optional[str] = None) -> None:
    """Refresh the offline cache from a shared Google Doc.

    Without DOC_ID the document synced last time is used. When the
    document cannot be fetched the cached library is kept.
    """

    result = sync_library(_cache(data_dir), doc_id)

    if result.error is not None:
        if result.library.is_empty():
            raise click.ClickException(str(result.error))
        click.echo(
            f"Could not reach document {result.doc_id}; "
            "using the cached library.",
            err=True,
        )
    elif not result.doc_id:
        click.echo("No document id configured; using the cached library.")
    else:
        click.echo(
            f"Synced {len(result.library.categories)} categories "
            f"from {result.doc_id}"
        )


@cli.command("import")
@click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--doc-id", default=None, help="Remote document to remember.")
@data_dir_option
def import_file(
    file: Path, doc_id: Optional[str] = None, data_dir: Optional[str] = None
) -> None:
    """Parse a local text file and store it in the offline cache."""

    raw_text = file.read_text(encoding="utf-8")
    library = import_text(_cache(data_dir), raw_text, doc_id)
    click.echo(f"Imported {len(library.categories)} categories from {file}")


@cli.command()
@click.option("--book", "book_id", default=None, help="Book to display.")
@click.option(
    "--section",
    "section_id",
    default=None,
    help="Start the book display at this section.",
)
@data_dir_option
def show(
    book_id: Optional[str] = None,
    section_id: Optional[str] = None,
    data_dir: Optional[str] = None,
) -> None:
    """Print the cached library outline, or the parts of one book."""

    library = _cache(data_dir).load_library()

    if section_id and not book_id:
        found = parser.find_section(library, section_id)
        if found is None:
            raise click.ClickException(f"Unknown section: {section_id}")
        book_id = found[0].book_id

    if not book_id:
        if library.is_empty():
            click.echo("The library is empty.")
        for line in outline(library):
            click.echo(line)
        return

    book = parser.find_book(library, book_id)
    if book is None:
        raise click.ClickException(f"Unknown book: {book_id}")

    start = 0
    if section_id:
        index = parser.section_start_index(book, section_id)
        if index is None:
            raise click.ClickException(
                f"Section {section_id} has no parts in {book_id}"
            )
        start = index

    titles = {s.section_id: s.title for s in book.sections}
    parts = list(parser.iter_book_parts(book))
    current_section = None
    for idx, part in enumerate(parts[start:], start=start):
        if part.section_id != current_section:
            current_section = part.section_id
            for piece in parser.split_title_by_script(titles[current_section]):
                click.echo(f"== {piece}")
        click.echo(f"[{idx}] {part.part_id}")
        for lang, paragraphs in part.content.items():
            for text in paragraphs:
                click.echo(f"  {lang.value}: {text}")
