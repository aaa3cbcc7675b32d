"""Command line entry point: ircserv <port> <password>."""

import signal
import string
import sys

from .operators import load_operators
from .replies import RED, RESET
from .server import IRCServer, ServerError

OPERATORS_FILE = "ircd.conf"


class PortError(ValueError):
    """The port argument is not a usable port number."""


def parse_port(text: str) -> int:
    """Convert text of at most five decimal digits into the number to listen on."""
    if any(ch not in string.digits for ch in text):
        raise PortError("port argument has to be a number")
    if len(text) > 5:
        raise PortError("port argument has to fit in 16bit")
    return int(text) if text else 0


def _error(message: str) -> None:
    print(f"{RED}Error: {message}{RESET}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the server; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        _error("This program expects 2 arguments")
        return 1
    try:
        port = parse_port(args[0])
    except PortError as exc:
        _error(str(exc))
        return 2
    password = args[1]

    try:
        operators = load_operators(OPERATORS_FILE)
    except OSError:
        _error("open failed")
        return 3

    server = IRCServer(port, password, operators)
    previous = signal.signal(signal.SIGINT, lambda signum, frame: server.stop())
    try:
        server.serve_forever()
    except ServerError as exc:
        _error(str(exc))
        return 3
    finally:
        signal.signal(signal.SIGINT, previous)
    return 0