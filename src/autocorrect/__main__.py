from __future__ import annotations
import argparse, logging, os, sys
from typing import Iterable, TextIO

from . import config as CFG
from .engine import Engine
from .loader import split_data_arg
from .models import SuggestOptions


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="autocorrect", description="Autocorrect REPL (one phrase per line)")
    p.add_argument("--data", default=None, help="Comma-separated corpus files")
    p.add_argument("--prefix", action="store_true", help="Suggest prefix completions")
    p.add_argument("--whitespace", action="store_true", help="Suggest two-word splits")
    p.add_argument("--led", type=int, default=0, help="Max edit distance (0 disables)")
    p.add_argument("--gui", action="store_true", help="Serve the web front-end instead of the REPL")
    p.add_argument("--host", default=CFG.DEFAULT_HOST)
    p.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    p.add_argument("--verbose", action="store_true")
    return p


def run_repl(engine: Engine, lines: Iterable[str] | None = None, out: TextIO | None = None) -> int:
    """
    For each input line print its suggestions, one per line, in sorted order.
    Stops at EOF; a read error prints a single diagnostic and stops.
    """
    lines = sys.stdin if lines is None else lines
    out = sys.stdout if out is None else out
    try:
        for line in lines:
            for s in engine.suggest(line):
                print(s, file=out)
    except (OSError, UnicodeDecodeError):
        print(CFG.REPL_ERROR, file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["AUTOCORRECT_VERBOSE"] = "1"

    if not args.data and not args.gui:
        print(CFG.USAGE)
        return 1

    options = SuggestOptions(prefix=args.prefix, whitespace=args.whitespace, led=args.led)
    eng = Engine(options)
    try:
        eng.build(split_data_arg(args.data), verbose=args.verbose)
        if args.gui:
            # Lazy import: the REPL path never needs Flask
            from autocorrect_web.web import serve
            serve(eng, host=args.host, port=args.port, debug=args.verbose)
            return 0
        return run_repl(eng)
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
