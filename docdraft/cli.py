"""
Command-line interface for docdraft.

Usage:
    docdraft render draft.json --format html --output out.html
    docdraft render draft.json --format pdf
    docdraft info draft.json
    docdraft --log-level INFO --log-file docdraft.log render draft.json
    docdraft version
"""

import argparse
import logging
import sys
from pathlib import Path

from .exceptions import DocDraftError

EXTENSIONS = {
    "text": ".txt",
    "html": ".html",
    "pdf": ".pdf",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docdraft",
        description="docdraft - declarative rich-text document builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docdraft render draft.json --format html --output out.html
  docdraft render draft.json --format pdf
  docdraft info draft.json
  docdraft version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file (rotated at 10 MB)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Apply a draft and export it")
    render_parser.add_argument("input", help="Draft description (JSON)")
    render_parser.add_argument(
        "-f", "--format",
        choices=sorted(EXTENSIONS),
        default="html",
        help="Output format (default: html)"
    )
    render_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with new extension)"
    )
    render_parser.add_argument(
        "--strict-glyphs",
        action="store_true",
        help="Fail on list levels without a glyph"
    )
    render_parser.add_argument(
        "--no-reassert",
        action="store_true",
        help="Skip re-applying list item attributes after all blocks are inserted"
    )

    info_parser = subparsers.add_parser("info", help="Show draft summary")
    info_parser.add_argument("input", help="Draft description (JSON)")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _load(args, **overrides):
    from .loader import DraftLoader

    loader = DraftLoader.from_file(args.input)
    if overrides:
        loader.config = loader.config.with_overrides(**overrides)
    return loader.load()


def cmd_render(args):
    """Handle render command."""
    from .backend.memory import MemoryBackend
    from .renderers import HTMLRenderer, PDFRenderer, TextRenderer

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else input_path.with_suffix(EXTENSIONS[args.format])

    overrides = {}
    if args.strict_glyphs:
        overrides["strict_glyphs"] = True
    if args.no_reassert:
        overrides["reassert_list_attributes"] = False

    print(f"📄 Loading: {input_path}")
    draft = _load(args, **overrides)

    backend = MemoryBackend()
    draft.apply(backend)

    if args.format == "text":
        TextRenderer(backend).save(output_path)
    elif args.format == "html":
        HTMLRenderer(backend, title=input_path.stem).save(output_path)
    else:
        PDFRenderer(backend).save(output_path)

    print(f"✅ Saved: {output_path}")
    return 0


def cmd_info(args, console=None):
    """Handle info command."""
    from .backend.memory import MemoryBackend
    from .models import Image, ListItem, Paragraph, Rule
    from .utils.rich_logger import print_summary
    from rich.console import Console

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    draft = _load(args)
    backend = MemoryBackend()
    draft.apply(backend)

    leaves = [leaf for element in draft.children for leaf in element.children]
    stats = {
        "paragraphs": sum(isinstance(child, Paragraph) for child in draft.children),
        "list items": sum(isinstance(child, ListItem) for child in draft.children),
        "leaves": len(leaves),
        "characters": sum(len(block.text) for block in backend.blocks),
        "rules": sum(isinstance(leaf, Rule) for leaf in leaves),
        "images": sum(isinstance(leaf, Image) for leaf in leaves),
    }
    print_summary(console or Console(), str(input_path), stats)
    return 0


def cmd_version(args=None):
    """Handle version command."""
    from .version import __version__
    print(f"docdraft v{__version__}")
    return 0


def main(argv=None):
    """Main entry point for CLI."""
    from .utils.logger import add_file_handler
    from .utils.rich_logger import setup_logging

    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    if args.log_file:
        add_file_handler(logging.getLogger(), args.log_file, args.log_level)

    try:
        if args.command == "render":
            return cmd_render(args)
        elif args.command == "info":
            return cmd_info(args)
    except DocDraftError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
