""" Command line entry point. """
import argparse
import logging
import sys

from forksh.constants import PROMPT
from forksh.shell import Shell

DEFAULT_VERBOSITY_LEVEL = logging.WARNING


def build_parser():
    parser = argparse.ArgumentParser(
        prog="forksh",
        description="A minimal shell: sequencing (;), pipes (|) and "
                    "single input/output redirection (<, >)."
    )
    parser.add_argument(
        "-c",
        metavar="COMMAND",
        dest="command",
        help="run one command line and exit with its status"
    )
    parser.add_argument(
        "-p", "--prompt",
        default=PROMPT,
        help=f"interactive prompt (default: {PROMPT!r})"
    )
    parser.add_argument("-v", "--verbose", default=0, action="count")
    return parser


def set_verbosity(verbose: int):
    level = max(DEFAULT_VERBOSITY_LEVEL - verbose * 10, logging.DEBUG)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="[%(process)d] %(name)s: %(message)s",
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    set_verbosity(args.verbose)

    sh = Shell(prompt=args.prompt)
    if args.command is not None:
        return sh.execute_line(args.command)
    return sh.run()


if __name__ == "__main__":
    sys.exit(main())
