import argparse
import logging
import sys
from typing import List, Optional

from .Config import DEPTH_LIMIT_DEFAULT, ParserConfig
from .Driver import argo, describe
from .Serializer import serialize

log = logging.getLogger("pyargo")

def _max_depth(text: str) -> int:
    try:
        depth = int(text)
        ParserConfig(max_depth=depth)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None
    return depth

def _pass_bytes_through(stream) -> None:
    # Undecodable bytes become lone surrogates on input and the same bytes again on output
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")

def _parse_file(stream, args) -> int:
    config = ParserConfig(max_depth=args.max_depth, allow_trailing=args.allow_trailing)
    result = argo(stream, config, name=args.file)
    if not result:
        message = describe(result.error)
        if message is not None:
            print(message)
        return 1
    print(serialize(result.value))
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    """Parse one file, print its canonical form. Exit status 0 on success, 1 otherwise."""
    ap = argparse.ArgumentParser(prog="pyargo", description="Parse and re-serialize an argo document")
    ap.add_argument("file", help="input file, or - for standard input")
    ap.add_argument("--max-depth", type=_max_depth, default=DEPTH_LIMIT_DEFAULT,
                    help=f"maximum map nesting depth (default {DEPTH_LIMIT_DEFAULT})")
    ap.add_argument("--allow-trailing", action="store_true",
                    help="ignore anything after the first value")
    ap.add_argument("-v", "--verbose", action="store_true", help="log parser diagnostics to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")

    _pass_bytes_through(sys.stdout)
    if args.file == "-":
        _pass_bytes_through(sys.stdin)
        return _parse_file(sys.stdin, args)
    try:
        with open(args.file, "r", encoding="utf-8", errors="surrogateescape", newline="") as fp:
            return _parse_file(fp, args)
    except OSError as exc:
        log.error("cannot read %s: %s", args.file, exc.strerror or exc)
        return 1

if __name__ == "__main__":
    sys.exit(main())
