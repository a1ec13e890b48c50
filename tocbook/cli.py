import json
import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from attrs import asdict
from dotenv import load_dotenv

from tocbook import parser
from tocbook.book_info import BookInfo, ConfigError, load_book_info
from tocbook.clean import CleanError, clean_chapters
from tocbook.download import CRAWL_DELAY, download_chapters, make_session
from tocbook.package import (
    PackageError,
    check_tree,
    make_archive,
    write_package,
)
from tocbook.package.archive import EPUB_SUFFIX
from tocbook.parser.types import ChapterList

try:
    __version__ = version("tocbook")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="TOCBOOK_LOG_FILE",
)
@click.version_option(__version__, prog_name="tocbook")
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


def _check_epub_name(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[str]:
    """Reject output names that do not carry the EPUB extension."""

    if value is not None and Path(value).suffix != EPUB_SUFFIX:
        raise click.BadParameter(f"must end in {EPUB_SUFFIX}")
    return value


def _load_info(book_info: Optional[str]) -> BookInfo:
    """Load book metadata, turning configuration errors into CLI errors."""

    try:
        return load_book_info(Path(book_info) if book_info else None)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _read_chapters(listing: Path, info: BookInfo) -> ChapterList:
    """Parse a listing file, aborting the command on malformed input."""

    html = listing.read_text(encoding="utf-8")
    try:
        chapters = parser.parse_toc(html, info.unfinished_marker)
        check_tree(chapters, parser.TOC_FILE_NAME)
    except (parser.ListingError, PackageError) as exc:
        raise click.ClickException(f"{listing}: {exc}") from exc
    return chapters


@cli.command()
@click.option(
    "-c",
    "--chapter-file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="Saved table of contents page. Leave out to download it again.",
)
@click.option(
    "-d",
    "--chapter-directory",
    required=True,
    type=click.Path(file_okay=False, dir_okay=True),
    help="Directory for chapter files. Existing chapters are skipped.",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    required=True,
    type=click.Path(file_okay=True, dir_okay=False),
    callback=_check_epub_name,
    help="Name of the output file. Must end in .epub.",
)
@click.option(
    "-f",
    "--force-download",
    is_flag=True,
    default=False,
    help="Download chapters again even if their file exists.",
)
@click.option(
    "--book-info",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="YAML file overriding the book metadata.",
)
@click.option(
    "--delay",
    type=float,
    default=CRAWL_DELAY,
    show_default=True,
    help="Seconds to wait after each chapter download.",
)
@click.option(
    "--archive/--no-archive",
    default=True,
    show_default=True,
    help="Zip the package directory into the output file.",
)
def build(
    chapter_directory: str,
    output_file: str,
    chapter_file: Optional[str] = None,
    force_download: bool = False,
    book_info: Optional[str] = None,
    delay: float = CRAWL_DELAY,
    archive: bool = True,
) -> None:
    """Download the book's chapters and package them as an EPUB file.

    Args:
        chapter_directory: Directory receiving the chapter and package files.
        output_file: Path of the EPUB archive to create.
        chapter_file: Optional previously saved table of contents page.
        force_download: Download chapters even when their file exists.
        book_info: Optional YAML file with book metadata.
        delay: Pause after each chapter download, in seconds.
        archive: Whether to create the EPUB archive at the end.
    """

    info = _load_info(book_info)
    directory = Path(chapter_directory)
    output = Path(output_file)
    session = make_session(info.user_agent)

    # Obtain and parse the listing before any package file is written.
    if chapter_file:
        chapters = _read_chapters(Path(chapter_file), info)
        toc_path = parser.copy_toc(Path(chapter_file), directory)
    else:
        toc_path = parser.fetch_toc(directory, info.base_url, session)
        chapters = _read_chapters(toc_path, info)

    logging.info(
        "Found %d chapters, %d levels deep",
        parser.count_chapters(chapters),
        parser.max_depth(chapters),
    )

    if output.exists():
        output.unlink()

    download_chapters(
        chapters,
        directory,
        info.base_url,
        force=force_download,
        session=session,
        delay=delay,
    )

    try:
        clean_chapters(chapters, directory)
        write_package(chapters, directory, toc_path.name, info)
    except (CleanError, PackageError) as exc:
        raise click.ClickException(str(exc)) from exc

    if archive:
        make_archive(directory, output, chapters, toc_path.name)
        click.echo(f"Wrote {output}")
    else:
        click.echo(f"Wrote package files to {directory}")


def _format_tree(chapters: ChapterList, level: int = 0) -> list[str]:
    """Render chapters as indented lines, one per chapter."""

    lines = []
    for chapter in chapters:
        flag = " [unfinished]" if chapter.unfinished else ""
        lines.append(f"{'  ' * level}- {chapter.title} ({chapter.url}){flag}")
        lines.extend(_format_tree(chapter.children, level + 1))
    return lines


@cli.command()
@click.argument(
    "listing", type=click.Path(exists=True, file_okay=True, dir_okay=False)
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    help="Output format.",
)
@click.option(
    "--book-info",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="YAML file overriding the book metadata.",
)
def tree(
    listing: str,
    output_format: str = "text",
    book_info: Optional[str] = None,
) -> None:
    """Print the chapter tree of a saved table of contents page.

    Args:
        listing: Path of the table of contents page.
        output_format: Format of the printed tree.
        book_info: Optional YAML file with book metadata.
    """

    info = _load_info(book_info)
    chapters = _read_chapters(Path(listing), info)

    if output_format == "text":
        for line in _format_tree(chapters):
            click.echo(line)
        return

    data = [asdict(chapter) for chapter in chapters]
    if output_format == "json":
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        click.echo(yaml.safe_dump(data, allow_unicode=True, sort_keys=False))
