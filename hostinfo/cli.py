#!/usr/bin/env python3
import argparse
import logging
import sys

from rich.console import Console

from hostinfo.report import SECTIONS, show

console = Console()


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        console.print(f"[bold red]Error:[/] {message}\n")
        self.print_help()
        sys.exit(2)


def parse_args(argv=None):
    parser = RichParser(
        prog="hostinfo",
        description="hostinfo: report facts about the host OS, CPU and Python runtime",
        allow_abbrev=False,
    )

    parser.add_argument(
        "section",
        nargs="?",
        default="all",
        choices=["all", *SECTIONS],
        help="Which facts to report (default: all)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print machine-readable JSON"
    )
    parser.add_argument(
        "--root",
        default="/",
        help="Look for release files under this directory instead of /",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every probe decision"
    )

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    show(args.section, root=args.root, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
