"""The MODE command: querying and changing channel modes i, t, k, l and o."""

import re

from . import replies
from .channel import Channel
from .client import Client
from .state import ServerState

# Mode parameters start after the command name, the channel and the mode word.
_FIRST_TOKEN = 3
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def token_position(modes: str, option: str) -> int:
    """Index in the command's arguments of the parameter belonging to `option`.

    Every 'k', 'l' or 'o' met before `option` in the mode word takes one
    parameter, so each one pushes the position along by one.
    """
    position = _FIRST_TOKEN
    for ch in modes:
        if ch == option:
            return position
        if ch in "klo":
            position += 1
    return position


def _parameter(args: list[str], modes: str, option: str) -> str:
    position = token_position(modes, option)
    return args[position] if len(args) > position else ""


def _parse_limit(text: str) -> int | None:
    """Read a leading 32-bit integer from the text, or None if there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _current_modes(channel: Channel) -> str:
    flags = "+"
    params = []
    if channel.invite_only:
        flags += "i"
    if channel.topic_restricted:
        flags += "t"
    if channel.key:
        flags += "k"
        params.append(channel.key)
    if channel.limit != 0:
        flags += "l"
        params.append(str(channel.limit))
    return flags + "".join(" " + param for param in params)


def _toggle_operator(channel: Channel, adding: bool, target: Client | None) -> bool:
    """Grant or withdraw operator rights; False when nothing changes."""
    if target is None or not channel.is_member(target):
        return False
    if adding:
        if channel.is_operator(target):
            return False
        channel.add_operator(target)
        return True
    if not channel.is_operator(target):
        return False
    channel.remove_operator(target)
    return True


def mode(state: ServerState, client: Client, args: list[str]) -> None:
    """Show a channel's modes, or change them if the client is a channel operator."""
    nick = client.nickname
    if len(args) < 2:
        state.send(replies.err_needmoreparams(nick, "MODE"), client.fd)
        return

    name = args[1]
    modes = args[2] if len(args) >= 3 else ""

    channel = state.channels.get(name)
    if channel is None:
        return

    if not modes:
        state.send(replies.rpl_channelmodeis(nick, name, _current_modes(channel)), client.fd)
        return

    if not channel.is_operator(client):
        state.send(replies.err_chanoprivsneeded(nick, name), client.fd)
        return

    sign = modes[0]
    if sign not in ("+", "-"):
        return
    adding = sign == "+"

    flags = sign
    params: list[str] = []

    if "i" in modes:
        channel.invite_only = adding
        if not adding:
            channel.clear_invited()
        flags += "i"

    if "t" in modes:
        channel.topic_restricted = adding
        flags += "t"

    if "k" in modes:
        key = _parameter(args, modes, "k") if adding else ""
        channel.key = key
        flags += "k"
        if adding:
            params.append(key)

    if "l" in modes:
        if adding:
            text = _parameter(args, modes, "l")
            limit = _parse_limit(text)
            if limit is not None:
                channel.limit = limit
                flags += "l"
                params.append(text)
        else:
            channel.limit = 0
            flags += "l"

    if "o" in modes:
        target_nick = _parameter(args, modes, "o")
        if _toggle_operator(channel, adding, state.client_by_nick(target_nick)):
            flags += "o"
            params.append(target_nick)

    change = flags + "".join(" " + param for param in params)
    message = replies.mode_msg(nick, client.username, name, change)
    for fd in channel.member_fds():
        state.send(message, fd)