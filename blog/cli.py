"""Render a markdown file (or stdin) to an HTML fragment."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from blog.loader import load_markdown
from blog.markdown.config import UNTERMINATED_FENCE_POLICIES
from blog.markdown.exceptions import BlogPostLoadError, MarkdownError
from blog.markdown.renderer import render_and_highlight


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blog-render", description=__doc__)
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Markdown file path or http(s) URL; '-' or omitted reads stdin",
    )
    parser.add_argument("--no-highlight", action="store_true", help="Skip syntax highlighting")
    parser.add_argument(
        "--sanitize",
        action="store_true",
        help="Sanitize the output with bleach (use for untrusted markdown)",
    )
    parser.add_argument(
        "--unterminated-fence",
        choices=UNTERMINATED_FENCE_POLICIES,
        default="code",
        help="How to treat a code fence that is never closed (default: code)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.source == "-":
            text = sys.stdin.read()
        else:
            text = load_markdown(args.source)
    except BlogPostLoadError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    config = {
        "highlight": not args.no_highlight,
        "sanitize": args.sanitize,
        "unterminated_fence": args.unterminated_fence,
    }
    try:
        html = render_and_highlight(text, context={"config": config})
    except MarkdownError as exc:
        print(f"Failed to render {args.source}: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(html + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
