import argparse
import logging
import sys

from .compiler import TARGETS, compile_source, read_source
from .errors import CompileError

logger = logging.getLogger(__name__)


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="rsprint",
        description="Compile a println-only Rust file to x86 assembly or C",
    )
    parser.add_argument("file", nargs="?", help="Rust source file to compile")
    parser.add_argument("--emit", choices=sorted(TARGETS), default="asm", help="Output language (default: asm)")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.file is None:
        print("Please supply the file to compile")
        return 0

    source = None
    try:
        source = read_source(args.file)
        logger.debug("compiling %s to %s", args.file, args.emit)
        output = compile_source(source, target=args.emit)
    except CompileError as err:
        print(err.render(source), file=sys.stderr)
        print("\nCompilation aborted due to errors", file=sys.stderr)
        return 1

    print(output)
    return 0
