#!/usr/bin/env python

"""
Command-line front end for intpoly. Run with --help for options.

Reads "0 0"-terminated pair lists and prints the polynomials they describe,
or folds them together with +, - or *:

    $ echo "5 2 3 0 0 0  1 1 0 0" | intpoly --op add
     +5x^2 +1x +3
"""

import sys
import argparse
from functools import reduce

from intpoly import common
from intpoly import logging
from intpoly import opts
from intpoly.parse import read_polynomials, format_pairs, PolyInputError

pairs = opts.Option("pairs", bool, False, description="Print results as coefficient/exponent pairs")

OPERATIONS = {
    "add": lambda a, b: a + b,
    "sub": lambda a, b: a - b,
    "mul": lambda a, b: a * b,
}

def render(p):
    if pairs.value:
        return format_pairs(p)
    return str(p)

def run(argv=None):
    """Entry point for the intpoly executable.

    This procedure reads sys.argv (or `argv`) and executes the requested
    operation.
    """

    parser = argparse.ArgumentParser(description='Integer polynomial calculator.')
    parser.add_argument("--op", choices=["show"] + sorted(OPERATIONS), default="show",
                        help="Print each input polynomial (show), or combine them all left to right; default=show")
    parser.add_argument("-o", "--output", metavar="FILE", default="-", help="Output file, use '-' for stdout (the default)")

    internal_opts = parser.add_argument_group("Options")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default="-", help="Input file (omit to use stdin)")
    args = parser.parse_args(argv)
    opts.read(args)

    try:
        with logging.task("reading input", file=args.file):
            with common.open_maybe_stdin(args.file) as f:
                polys = list(read_polynomials(f))
    except (PolyInputError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    logging.event("read {} polynomial(s)".format(len(polys)))

    if args.op == "show":
        results = polys
    elif not polys:
        print("Error: --op {} needs at least one polynomial".format(args.op), file=sys.stderr)
        sys.exit(1)
    else:
        with logging.task("computing", op=args.op):
            results = [reduce(OPERATIONS[args.op], polys)]

    with common.open_maybe_stdout(args.output) as out:
        for p in results:
            out.write(render(p))
            out.write("\n")

    logging.dump_profile()

if __name__ == "__main__":
    run()
