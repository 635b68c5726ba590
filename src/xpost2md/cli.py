"""Command-line interface for xpost2md."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console

from . import __version__
from .core.extractor import Extractor
from .logging_config import setup_logging
from .models.config import Xpost2mdConfig
from .models.document import DocumentKind
from .save import DocumentSaver

KIND_LABELS = {
    DocumentKind.ARTICLE: "Article",
    DocumentKind.THREAD: "Thread",
    DocumentKind.TWEET: "Tweet",
}


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="xpost2md",
        description="Convert a saved X.com tweet, thread or article page to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Save a page from the browser, then convert it
  xpost2md page.html --url https://x.com/jack/status/20

  # Write into a notes folder with YAML frontmatter
  xpost2md page.html --url https://x.com/jack/status/20 -o ~/notes --frontmatter

  # Print the Markdown or the structured record instead of saving
  xpost2md page.html --url https://x.com/jack/status/20 --stdout
  xpost2md page.html --url https://x.com/jack/status/20 --json
        """,
    )

    parser.add_argument(
        "page",
        nargs="?",
        help="Saved HTML page ('-' reads from stdin)",
    )

    parser.add_argument(
        "--url",
        "-u",
        help="URL the page was saved from (must be a /status/ page)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )

    # Output
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Output directory (default: current directory)",
    )
    output_group.add_argument(
        "--filename",
        default=None,
        help="File name to use instead of the suggested one",
    )
    output_group.add_argument(
        "--frontmatter",
        action="store_true",
        help="Prepend YAML frontmatter to the saved file",
    )
    output_group.add_argument(
        "--stdout",
        action="store_true",
        help="Print the Markdown instead of saving it",
    )
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print the structured record as JSON instead of saving",
    )
    output_group.add_argument(
        "--image-size",
        default=None,
        metavar="SIZE",
        help="Image size variant requested from the media CDN (default: large)",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress output",
    )

    return parser


def build_config(args: argparse.Namespace) -> Xpost2mdConfig:
    """Load the config file (if any) and apply command-line overrides."""
    base = Xpost2mdConfig.from_yaml_file(args.config) if args.config else Xpost2mdConfig()
    data = base.model_dump()

    if args.output_dir:
        data["output"]["directory"] = args.output_dir
    if args.frontmatter:
        data["output"]["frontmatter"] = True
    if args.image_size:
        data["render"]["image_size"] = args.image_size

    if args.verbose:
        data["log_level"] = "DEBUG"
    elif args.quiet:
        data["log_level"] = "ERROR"

    return Xpost2mdConfig.model_validate(data)


def read_page(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def run_extract(args: argparse.Namespace) -> int:
    """Run an extraction with given arguments."""
    console = Console(stderr=True)

    if not args.page or not args.url:
        console.print("[red]Error:[/red] Please provide a saved page and its --url")
        return 1

    try:
        config = build_config(args)
    except (ValidationError, OSError, ValueError) as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return 1

    setup_logging(config.log_level, str(config.log_file) if config.log_file else None)

    try:
        html = read_page(args.page)
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not read {args.page}: {e}")
        return 1

    result = Extractor(config).extract(html, args.url)
    if not result.success or result.document is None:
        console.print(f"[red]Error:[/red] {result.error or 'Failed to extract content.'}")
        return 1

    doc = result.document

    if args.json:
        Console().print_json(data=doc.to_dict())
        return 0

    if args.stdout:
        sys.stdout.write(DocumentSaver(config.output).render(doc))
        return 0

    try:
        path = DocumentSaver(config.output).save(doc, args.filename)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    if not args.quiet:
        console.print(f"[green]✓ {KIND_LABELS[doc.kind]} saved:[/green] {path}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_extract(args)


if __name__ == "__main__":
    sys.exit(main())
