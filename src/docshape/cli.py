"""
Command-line interface for docshape.
"""

import argparse
import logging
import sys

from rich.console import Console

console = Console()


def _add_output_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--on-malformed",
        choices=["raise", "skip", "empty"],
        default=None,
        help="How to treat top-level elements that are not objects (default: raise)",
    )
    parser.add_argument(
        "--only-drift",
        action="store_true",
        help="Only show fields with multiple datatypes or null/missing values",
    )
    parser.add_argument("--json", dest="json_output", help="Also write the nested report to this JSON file")
    parser.add_argument("--csv", dest="csv_output", help="Also write the flat report to this CSV file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docshape",
        description="docshape - Profile the field types of a document corpus",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Files command
    files_parser = subparsers.add_parser("files", help="Profile documents from JSON / JSON Lines files")
    files_parser.add_argument("files", nargs="+", help="JSON array or .jsonl files to process")
    _add_output_args(files_parser)

    # CouchDB command
    couch_parser = subparsers.add_parser("couchdb", help="Profile every document of a CouchDB database")
    couch_parser.add_argument("--url", help="Server URL, credentials included (default: $DOCSHAPE_COUCHDB_URL)")
    couch_parser.add_argument("--db", dest="database", help="Database name (default: $DOCSHAPE_COUCHDB_DB)")
    couch_parser.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Documents per request, 1-1000 (default: $DOCSHAPE_BATCH_SIZE or 1000)",
    )
    _add_output_args(couch_parser)

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from docshape import __version__
        console.print(f"docshape version {__version__}")
        return 0

    if not args.command:
        parser.print_help()
        return 0

    # Import here to avoid slow startup for --help
    from docshape import analyze, report
    from docshape.config import Settings
    from docshape.exceptions import DocShapeError
    from docshape.log import setup_logging
    from docshape.sources import CouchDBSource, iter_json_files

    try:
        settings = Settings.from_env()
        setup_logging(logging.DEBUG if args.verbose else settings.log_level)
        on_malformed = args.on_malformed or settings.on_malformed

        if args.command == "files":
            console.print(f"[bold blue]Reading {len(args.files)} files...[/bold blue]")
            documents = list(iter_json_files(args.files))

        elif args.command == "couchdb":
            url = args.url or settings.couchdb_url
            database = args.database or settings.couchdb_database
            batch_size = args.batch_size if args.batch_size is not None else settings.batch_size
            source = CouchDBSource(url, database, batch_size=batch_size)
            source.info()
            console.print(f"[bold blue]Fetching documents from {database}...[/bold blue]")
            documents = list(source)

        tree = analyze(documents, on_malformed=on_malformed, progress=True)
        report.print_report(tree, out=console, only_drift=args.only_drift, documents=len(documents))

        if args.json_output:
            report.export_json(tree, args.json_output)
        if args.csv_output:
            report.export_csv(tree, args.csv_output, only_drift=args.only_drift)

    except FileNotFoundError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130
    except DocShapeError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
