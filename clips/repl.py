import argparse
import logging
import sys
from typing import Optional, TextIO

from clips.console import LineReader
from clips.parser import parse
from clips.runtime import evaluate
from clips.utils import ParseError

VERSION = "0.0.2"

logger = logging.getLogger(__name__)


def rep(line: str) -> str:
    """Reads, evaluates and renders one line. A line that does not parse renders as the parser diagnostic."""
    try:
        tree = parse(line)
    except ParseError as e:
        return str(e)
    return str(evaluate(tree))


def run(reader: LineReader, out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    print(f"Clips v{VERSION}", file=out)
    print("Press Ctrl+C to Exit\n", file=out)

    while True:
        try:
            line = reader.read_line()
        except EOFError:
            print(file=out)
            break
        except KeyboardInterrupt:
            print(file=out)
            logger.debug("Interrupted after %d lines", len(reader.history))
            break

        print(rep(line), file=out)


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="clips", description="Prefix-notation integer calculator")
    ap.add_argument("expression", nargs="?", default=None, help="evaluate one line and exit")
    ap.add_argument("--prompt", default="clips> ", help="input prompt (default: %(default)r)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log tokens and parsed trees")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.expression is not None:
        try:
            tree = parse(args.expression)
        except ParseError as e:
            print(e)
            return 1
        print(evaluate(tree))
        return 0

    run(LineReader(prompt=args.prompt, use_readline=sys.stdin.isatty()))
    return 0
