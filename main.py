"""Command-line utility to render Sensei's Library Go diagrams as SVG.

Examples:
    # Render a diagram file to SVG
    python main.py corner.txt --output corner.svg

    # Read the diagram from stdin and print the SVG
    cat corner.txt | python main.py -

    # Larger font cells, and show the title and link map
    python main.py corner.txt -o corner.svg --font h=20,w=10 --links
"""

import argparse
import logging
import sys
from pathlib import Path

from diagram.config import parse_font_spec
from diagram.go_diagram import GoDiagram


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render Go diagrams in Sensei's Library ASCII format to SVG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "input",
        help="Path to diagram file, or '-' to read from stdin"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output SVG file path. If not specified, writes to stdout."
    )
    parser.add_argument(
        "--font",
        default="h=16,w=8",
        metavar="SPEC",
        help="Character cell size as h=HEIGHT,w=WIDTH in pixels (default: h=16,w=8)"
    )
    parser.add_argument(
        "--links",
        action="store_true",
        help="Print the diagram title and link map to stderr"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        font = parse_font_spec(args.font)
    except ValueError as e:
        parser.error(f"Invalid font specification: {e}")
        return 2

    if args.input == "-":
        text = sys.stdin.read()
    else:
        path = Path(args.input)
        if not path.is_file():
            parser.error(f"Diagram file not found: {path}")
            return 2
        text = path.read_text(encoding="utf-8")

    diagram = GoDiagram(text, font=font)
    output = diagram.create_svg()

    if args.output:
        Path(args.output).write_text(output.xml, encoding="utf-8")
    else:
        sys.stdout.write(output.xml)

    if args.links:
        print(f"Title: {diagram.get_title()}", file=sys.stderr)
        for anchor, url in diagram.get_linkmap().items():
            print(f"  [{anchor}] {url}", file=sys.stderr)

    if output.failed:
        print(diagram.failure_message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
