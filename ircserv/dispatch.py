"""Routing a received command line to the handler for its command."""

from . import channel_commands as channels
from . import session_commands as session
from .client import Client
from .framing import parse_command
from .mode import mode
from .state import ServerState

_HANDLERS = {
    "NICK": session.nick,
    "USER": session.user,
    "PING": session.pong,
    "QUIT": session.quit,
    "PRIVMSG": channels.privmsg,
    "JOIN": channels.join,
    "PART": channels.part,
    "MODE": mode,
    "KICK": channels.kick,
    "INVITE": channels.invite,
    "TOPIC": channels.topic,
    "OPER": session.oper,
    "KILL": session.kill,
}


def dispatch(state: ServerState, client: Client, line: str) -> None:
    """Run one command line for a client.

    Until the client has given the right password, every command other than
    PASS and CAP is answered as if an empty password had been given. Unknown
    commands are ignored.
    """
    args = parse_command(line)
    if not args:
        return
    command = args[0]
    if command == "PASS":
        session.pass_(state, client, args)
    elif not client.pass_ok and command != "CAP":
        session.pass_(state, client, ["PASS", ""])
    elif (handler := _HANDLERS.get(command)) is not None:
        handler(state, client, args)