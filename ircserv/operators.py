"""Server operator accounts read from the operator configuration file."""

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike


@dataclass(frozen=True)
class ServerOperator:
    """One operator account: a name, its password and the host it may log in from."""

    name: str
    password: str
    host: str


def parse_operators(lines: Iterable[str]) -> list[ServerOperator]:
    """Read `name password host` lines; lines with fewer than three words are skipped.

    Words are separated by spaces only, and words past the third are ignored.
    """
    operators = []
    for line in lines:
        words = [word for word in line.rstrip("\n").split(" ") if word]
        if len(words) < 3:
            continue
        name, password, host = words[:3]
        operators.append(ServerOperator(name, password, host))
    return operators


def load_operators(path: str | PathLike[str]) -> list[ServerOperator]:
    """Load operator accounts from a file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8", newline="\n") as stream:
        return parse_operators(stream)