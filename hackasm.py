# hackasm.py
#
# Usage: hackasm [-f hack|bin|png] [-o out] [-k] [-v] {asm input file}
#
# Writes a .hack file next to the input unless -o is given. With no input
# the small demo program below is assembled into temp.hack.
import argparse
import sys

from assembler import assemble, diagnose
from errors import AssemblyError
from logger import logger, setup_logging
from rom import output_path, write_bitmap, write_hack, write_rom
from source import prepare, read_source

DEFAULT_PROGRAM = """@42
D=A
@0
D;JGT"""

DEFAULT_OUTPUT = "temp.hack"

FORMATS = ("hack", "bin", "png")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="hackasm",
        description="Assemble Hack assembly into 16-bit machine code",
    )
    parser.add_argument("source", nargs="?",
                        help="assembly source file (default: built-in demo program)")
    parser.add_argument("-o", "--output",
                        help="output file (default: source name with the format's extension)")
    parser.add_argument("-f", "--format", choices=FORMATS, default="hack",
                        help="hack: text words, bin: raw big-endian ROM, png: ROM bitmap")
    parser.add_argument("--scale", type=int, default=1,
                        help="pixel scale for png output")
    parser.add_argument("-j", "--jobs", type=int, default=1,
                        help="worker processes used for encoding")
    parser.add_argument("-k", "--keep-going", action="store_true",
                        help="report every bad line instead of stopping at the first")
    parser.add_argument("--no-comments", action="store_true",
                        help="do not strip // comments")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every encoded word")
    parser.add_argument("-l", "--log",
                        help="also write the log to this file")
    return parser


def write_output(path, words, fmt, scale=1):
    if fmt == "hack":
        write_hack(path, words)
    elif fmt == "bin":
        write_rom(path, words)
    elif fmt == "png":
        write_bitmap(path, words, scale)
    else:
        raise ValueError(f"Unknown format {fmt}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.scale < 1:
        parser.error("--scale must be at least 1")
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    setup_logging(args.verbose, args.log)

    if args.source:
        try:
            raw = read_source(args.source)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"cannot read {args.source}: {e}")
            return 1
        out = args.output or output_path(args.source, args.format)
    else:
        raw = DEFAULT_PROGRAM.splitlines()
        out = args.output or output_path(DEFAULT_OUTPUT, args.format)

    lines = prepare(raw, strip_comments=not args.no_comments)

    if args.keep_going:
        words, errors = diagnose(lines, jobs=args.jobs)
        for e in errors:
            logger.error(str(e))
        if errors:
            logger.error(f"{len(errors)} error(s), nothing written")
            return 1
    else:
        try:
            words = assemble(lines, jobs=args.jobs)
        except AssemblyError as e:
            logger.error(str(e))
            return 1

    try:
        write_output(out, words, args.format, args.scale)
    except (OSError, ValueError) as e:
        logger.error(f"cannot write {out}: {e}")
        return 1

    logger.info(f"{len(words)} words -> {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
