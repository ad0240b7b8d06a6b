"""Command-line front end for logfacility.

Emits one message through the logging facade, mostly useful for
eyeballing colors and gating from a shell:

  logfacility info "deployed %s" v1.2
  logfacility -vv --name svc warn "slow response"
  logfacility -Q error "always shown"

-v raises the verbosity one step from NORMAL (up to DEBUG), -Q drops
it to SILENT, and --verbosity NAME sets it explicitly.
"""

import argparse
import sys

from logfacility._version import VERSION
from logfacility.levels import VerbosityLevel
from logfacility.logger import new_logger
from logfacility.settings import parse_verbosity, set_verbosity

LEVEL_COMMANDS = ("info", "warn", "error")


def _verbosity_type(value):
    """argparse type for --verbosity."""
    try:
        return parse_verbosity(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def resolve_verbosity(verbose=0, quiet=0, explicit=None):
    """Combine -v/-Q counts and --verbosity into a VerbosityLevel.

    An explicit level wins. Otherwise any -Q gives SILENT, and each -v
    steps up from NORMAL, capped at DEBUG.
    """
    if explicit is not None:
        return explicit
    if quiet:
        return VerbosityLevel.SILENT
    level = min(int(VerbosityLevel.NORMAL) + (verbose or 0),
                int(VerbosityLevel.DEBUG))
    return VerbosityLevel(level)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="logfacility",
        description="logfacility — emit a leveled, colored log message",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Values are passed as strings; use %s placeholders, or none\n"
            "at all to have them appended."
        ),
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"logfacility {VERSION}",
    )
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase verbosity (-v, -vv)")
    parser.add_argument("--quiet", "-Q", action="count", default=0,
                        help="Silence info and warnings")
    parser.add_argument("--verbosity", type=_verbosity_type, default=None,
                        metavar="LEVEL",
                        help="Set verbosity explicitly (silent, normal, warning, debug)")
    parser.add_argument("--name", metavar="NAME", default=None,
                        help="Label the message with a logger name")

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )
    for command in LEVEL_COMMANDS:
        sub = subparsers.add_parser(command, help=f"Emit a message via {command}()")
        sub.add_argument("message", help="Message or format template")
        sub.add_argument("values", nargs="*", help="Values for the template")
    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the logfacility CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    set_verbosity(resolve_verbosity(args.verbose, args.quiet, args.verbosity))

    logger = new_logger(args.name) if args.name else new_logger()
    emit = getattr(logger, args.command)
    emit(args.message, *args.values)
    return 0


if __name__ == "__main__":
    sys.exit(main())
