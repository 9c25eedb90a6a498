"""Command-line front end for the translate plugin.

Runs one query through the same pipeline the launcher uses and prints the results.

Example:
    python translate_query.py "en>uk Hello world"
    python translate_query.py --json "de Good morning"
"""

from __future__ import annotations

import argparse
import json
import sys
from contextlib import suppress
from pathlib import Path
from typing import NoReturn

from core.lang.table import UnknownLanguageCodeError
from core.plugin import TranslatePlugin
from core.version import VERSION
from models.translation_models import TranslationResult


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = _ArgumentParser(
        description="Translate text with fuzzy language selection",
        epilog='Example: python translate_query.py "en>uk Hello"',
    )
    parser.add_argument("query", help="query in the form '[src>]dst text' (after the configured prefix)")
    parser.add_argument(
        "--config-dir",
        dest="config_dir",
        metavar="DIR",
        default=str(Path.cwd()),
        help="directory containing translate.ini (default: current directory)",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    parser.add_argument(
        "--select", type=int, metavar="N", help="write the title of result N (1-based) to stdout and exit"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


def render(results: list[TranslationResult], *, as_json: bool) -> str:
    if as_json:
        return json.dumps([result.to_dict() for result in results], ensure_ascii=False, indent=2)
    return "\n".join(f"{index}. {result.title}\n   {result.description}" for index, result in enumerate(results, 1))


def main(argv: list[str] | None = None) -> int:
    args: argparse.Namespace = parse_arguments(argv)
    try:
        plugin: TranslatePlugin = TranslatePlugin.init(args.config_dir, debug=args.debug)
    except UnknownLanguageCodeError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    try:
        results: list[TranslationResult] = plugin.get_matches(args.query)
    finally:
        plugin.close()

    if args.select is not None:
        if not 1 <= args.select <= len(results):
            print(f"Error: no result number {args.select}", file=sys.stderr)
            return 1
        sys.stdout.buffer.write(plugin.handler(results[args.select - 1]))
        sys.stdout.flush()
        return 0

    if not results:
        print("No translations.", file=sys.stderr)
        return 1
    print(render(results, as_json=args.json))
    return 0


if __name__ == "__main__":
    exit_code: int = 1
    with suppress(KeyboardInterrupt):
        exit_code = main()
    sys.exit(exit_code)
