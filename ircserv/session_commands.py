"""Connection and registration commands: PASS, NICK, USER, PING, QUIT, OPER and KILL."""

import string
from collections.abc import Iterable

from . import replies
from .channel_commands import part
from .client import Client
from .state import ServerState, Status

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def valid_nick(nickname: str) -> bool:
    """Nicknames hold digits, 'A' to ']' and 'a' to '}' only."""
    return all(
        "0" <= ch <= "9" or "A" <= ch <= "]" or "a" <= ch <= "}" for ch in nickname
    )


def nick_taken(clients: Iterable[Client], nickname: str) -> bool:
    """True if any client already has this nickname, ignoring ASCII case."""
    wanted = nickname.translate(_ASCII_LOWER)
    return any(client.nickname.translate(_ASCII_LOWER) == wanted for client in clients)


def pass_(state: ServerState, client: Client, args: list[str]) -> None:
    """Check the connection password."""
    nick = client.nickname
    if len(args) < 2:
        state.send(replies.err_needmoreparams(nick, "PASS"), client.fd, Status.AUTH_FAILED)
        return
    if client.authenticated:
        state.send(replies.err_alreadyregistered(nick), client.fd)
        return
    if args[1] != state.password:
        state.send(replies.err_passwdmismatch(nick), client.fd, Status.AUTH_FAILED)
        return
    client.pass_ok = True


def nick(state: ServerState, client: Client, args: list[str]) -> None:
    """Set or change the client's nickname."""
    current = client.nickname
    nickname = args[1] if len(args) >= 2 else ""
    failure = Status.OK if client.authenticated else Status.AUTH_FAILED

    if not nickname:
        if client.authenticated:
            state.send(replies.print_nick(current, client.username), client.fd)
        else:
            state.send(replies.err_nonicknamegiven(current), client.fd)
    elif not valid_nick(nickname):
        state.send(replies.err_erroneusnickname(current, nickname), client.fd, failure)
    elif nick_taken(state.clients.values(), nickname):
        state.send(replies.err_nicknameinuse(current, nickname), client.fd, failure)
    else:
        if client.authenticated:
            message = replies.nick_change(current, client.username, nickname)
            for fd in state.clients:
                state.send(message, fd)
        client.nickname = nickname
        if not client.authenticated and client.username:
            state.validate_auth(client)


def user(state: ServerState, client: Client, args: list[str]) -> None:
    """Set the username; registration completes once a nickname is known."""
    username = args[1] if len(args) >= 2 else ""

    if client.authenticated:
        state.send(replies.err_alreadyregistered(client.nickname), client.fd)
    elif not username:
        state.send(
            replies.err_needmoreparams(client.nickname, "USER"), client.fd, Status.AUTH_FAILED
        )
    else:
        client.username = username

    if client.nickname != "*" and not client.authenticated:
        state.validate_auth(client)


def pong(state: ServerState, client: Client, args: list[str]) -> None:
    """Answer a PING with a PONG carrying the same token."""
    if len(args) < 2:
        state.send(replies.err_needmoreparams(client.nickname, "PONG"), client.fd)
    else:
        state.send(replies.pong_msg(args[1]), client.fd)


def quit(state: ServerState, client: Client, args: list[str]) -> None:
    """Leave every channel, tell everyone, and close the client's connection."""
    reason = args[1] if len(args) >= 2 else ":thank you britney"

    # The PART arguments accumulate across channels, so every call names the
    # first channel left.
    part_args: list[str] = []
    for name, channel in sorted(state.channels.items()):
        if channel.is_member(client):
            part_args += ["PART", name, reason]
            part(state, client, part_args)

    message = replies.quit_msg(client.nickname, client.username, reason)
    for fd in state.clients:
        if fd != client.fd:
            state.send(message, fd)
    state.send(message, client.fd, Status.QUIT)


def oper(state: ServerState, client: Client, args: list[str]) -> None:
    """Log in as a server operator."""
    if client.is_operator:
        return
    nick = client.nickname
    if len(args) < 3:
        state.send(replies.err_needmoreparams(nick, "OPER"), client.fd)
        return

    name, password = args[1], args[2]
    if not state.host_matches(name, client.ip_address):
        state.send(replies.err_nooperhost(nick), client.fd)
        return
    if not state.password_matches(name, password):
        state.send(replies.err_passwdmismatch(nick), client.fd)
        return

    client.is_operator = True
    state.send(replies.rpl_youreoper(nick), client.fd)


def kill(state: ServerState, client: Client, args: list[str]) -> None:
    """Disconnect another client; only server operators may do so."""
    nick = client.nickname
    if len(args) < 2:
        state.send(replies.err_needmoreparams(nick, "KILL"), client.fd)
        return

    target = state.client_by_nick(args[1])
    if target is None:
        state.send(replies.err_nosuchnick(nick, args[1]), client.fd)
        return
    if not client.is_operator:
        state.send(replies.err_noprivileges(nick), client.fd)
        return

    reason = args[2] if len(args) >= 3 else "killed"
    quit(state, target, ["QUIT", reason])