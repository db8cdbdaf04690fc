"""Command line entry point: render or export a bibliography."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .exporters import export_publications
from .renderer import render_embed, render_page
from .sources import load_publications
from .state import GROUPINGS, LibraryState
from .utils.error_handling import BibshelfError
from .utils.logging_setup import setup_logging, log_operation

OUTPUT_FORMATS = ("html", "embed", "bibtex", "csv", "json", "docx")


def build_parser() -> argparse.ArgumentParser:
    config = Config()
    ap = argparse.ArgumentParser(
        prog="bibshelf",
        description="Render a BibTeX/CSV bibliography as HTML, or export it.",
    )
    ap.add_argument("source", help="Path or http(s) URL of a .bib, .csv or .json file")
    ap.add_argument("--group", choices=GROUPINGS, default=config.DEFAULT_GROUPING,
                    help="Group publications by year (default) or by type")
    ap.add_argument("--search", default="", help="Only keep publications matching this text")
    ap.add_argument("--format", dest="fmt", choices=OUTPUT_FORMATS, default="html",
                    help="Output format (default: html page)")
    ap.add_argument("--title", default="Publications", help="Page / document title")
    ap.add_argument("--out", help="Output file (default: stdout; required for docx)")
    ap.add_argument("--log-dir", default=config.LOG_DIR)
    ap.add_argument("--log-level", default=config.LOG_LEVEL)
    return ap


def render_output(state: LibraryState, fmt: str, title: str = "Publications"):
    if fmt == "html":
        return render_page(state, title=title)
    if fmt == "embed":
        return render_embed(state)
    return export_publications(state.visible(), fmt)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir, args.log_level)

    if args.fmt == "docx" and not args.out:
        print("--out is required for docx output", file=sys.stderr)
        return 2

    try:
        publications, source_format = load_publications(args.source)
    except BibshelfError as e:
        logging.error(f"Load failed: {e}")
        print(str(e), file=sys.stderr)
        return 1

    if not publications:
        print(f"No publications found in the {source_format.upper()} file", file=sys.stderr)
        return 1

    state = LibraryState(publications=publications, source_format=source_format,
                         grouping=args.group, query=args.search)
    output = render_output(state, args.fmt, args.title)

    if args.out:
        path = Path(args.out)
        if isinstance(output, bytes):
            path.write_bytes(output)
        else:
            path.write_text(output, encoding="utf-8")
        log_operation("Output written", f"{path} ({args.fmt}, {len(state.visible())} publications)")
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
