import argparse

from .durations import DEFAULT_MAX_LENGTH

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="msconv",
        description="Convert between duration strings and milliseconds",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeat for debug output)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser(
        "parse", help="Convert duration strings (e.g. 2h, '1.5 days') to milliseconds"
    )
    parse.add_argument("values", nargs="+", metavar="VALUE", help="Duration strings")
    parse.add_argument(
        "--max-length",
        type=int,
        default=DEFAULT_MAX_LENGTH,
        help="Longest accepted duration string",
    )

    fmt = subparsers.add_parser(
        "format", help="Render millisecond counts as duration strings"
    )
    fmt.add_argument(
        "values", nargs="+", type=float, metavar="MS", help="Millisecond counts"
    )
    fmt.add_argument(
        "--long", action="store_true", help="Spell out unit names (1 hour, 2 days)"
    )

    subparsers.add_parser("units", help="List supported units and their aliases")

    serve = subparsers.add_parser("serve", help="Run the conversion HTTP API")
    serve.add_argument("--host", default=DEFAULT_HOST, help="Host interface for the API")
    serve.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="Port to bind the HTTP server"
    )
    serve.add_argument(
        "--max-length",
        type=int,
        default=DEFAULT_MAX_LENGTH,
        help="Default longest accepted duration string",
    )

    return parser


def parse_args(argv):
    parser = create_parser()
    return parser.parse_args(argv)
