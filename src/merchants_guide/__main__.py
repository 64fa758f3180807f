"""Command line entry point: answers the queries found in an input file."""
import argparse
import logging
import sys

from .config import AppConfig
from .core import answer_file
from .errors import MerchantsGuideError


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog='merchants-guide',
        description="Answer merchant's guide queries about alien numerals and prices",
    )
    parser.add_argument('input', help='Path to the input file with statements')
    parser.add_argument('--debug', action='store_true', help='Enables debugging output.')
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=AppConfig.get_log_level(args.debug),
        format=AppConfig.LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        answer_file(args.input, sys.stdout)
    except MerchantsGuideError as e:
        sys.stdout.flush()
        location = f" (line {e.lineno})" if e.lineno is not None else ""
        print(f"error: {e}{location}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
