#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import Callable, Optional

from driver import evaluate, format_line, parse_u64
from power import InvalidArgument


def read_value(prompt: str, name: str,
               read: Callable[[str], str] = input) -> int:
    try:
        text = read(prompt)
    except EOFError:
        raise InvalidArgument(f"no value given for {name}")
    return parse_u64(text, name)


def main(argv: Optional[list] = None,
         read: Callable[[str], str] = input) -> int:
    parser = argparse.ArgumentParser(
        prog="fastexp", description="Compute base^exponent by squaring"
    )
    parser.add_argument("base", nargs="?", help="Base (prompted for if omitted)")
    parser.add_argument("exponent", nargs="?",
                        help="Exponent (prompted for if omitted)")
    parser.add_argument("-m", "--modulus",
                        help="Reduce modulo this value instead of 10^9+7 fallback")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.base is None:
            base = read_value("Enter the base : ", "base", read)
        else:
            base = parse_u64(args.base, "base")

        if args.exponent is None:
            exponent = read_value("Enter the exponent : ", "exponent", read)
        else:
            exponent = parse_u64(args.exponent, "exponent")

        modulus = None
        if args.modulus is not None:
            modulus = parse_u64(args.modulus, "modulus")

        evaluation = evaluate(base, exponent, modulus)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print()
    print(format_line(evaluation))
    return 0


if __name__ == "__main__":
    sys.exit(main())
