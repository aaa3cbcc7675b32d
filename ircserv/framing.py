"""Splitting the incoming byte stream into command lines and lines into words."""

BUFFER_SIZE = 512


class LineBuffer:
    """Accumulates received text for one connection and yields complete lines.

    A complete line is returned up to and including its '\\r', without the '\\n'.
    When the unfinished text reaches exactly BUFFER_SIZE characters it is cut
    into a line of its own, its last two characters replaced by CRLF.
    """

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Text received but not yet part of a complete line."""
        return self._buffer

    def feed(self, data: str) -> list[str]:
        """Add received text (cut at the first NUL) and return the completed lines."""
        self._buffer += data.partition("\0")[0]
        lines = []
        while (end := self._buffer.find("\r\n")) != -1:
            lines.append(self._buffer[: end + 1])
            self._buffer = self._buffer[end + 2 :]
        if len(self._buffer) == BUFFER_SIZE:
            lines.append(self._buffer[:-2] + "\r\n")
            self._buffer = ""
        return lines


def parse_command(line: str) -> list[str]:
    """Split a command line into words.

    Words are separated by spaces and a '\\r' ends a word. A word starting with
    ':' takes the rest of the line, less its last character.
    """
    args: list[str] = []
    i, n = 0, len(line)
    while i < n:
        while i < n and line[i] == " ":
            i += 1
        if i < n and line[i] == ":":
            args.append(line[i : n - 1])
            return args
        start = i
        while i < n and line[i] not in " \r":
            i += 1
        if start < i:
            args.append(line[start:i])
        i += 1
    return args