"""Channel commands: JOIN, PART, KICK, INVITE, TOPIC and PRIVMSG."""

from . import replies
from .client import Client
from .state import ServerState


def valid_channel_name(name: str) -> bool:
    """A channel name is '#' followed by at least one ASCII letter or digit, and nothing else."""
    if not name.startswith("#") or len(name) == 1:
        return False
    return all(ch.isascii() and ch.isalnum() for ch in name[1:])


def _broadcast(state: ServerState, fds: list[int], message: str) -> None:
    for fd in fds:
        state.send(message, fd)


def join(state: ServerState, client: Client, args: list[str]) -> None:
    """Join a channel, creating it with the client as operator if it does not exist."""
    nick = client.nickname
    if len(args) < 2:
        state.send(replies.err_needmoreparams(nick, "JOIN"), client.fd)
        return

    name = args[1]
    key = args[2] if len(args) > 2 else ""

    if not valid_channel_name(name):
        state.send(replies.err_badchanmask(name), client.fd)
        return

    channel = state.channels.get(name)
    if channel is None:
        channel = state.create_channel(name, client)
        state.send(replies.join_msg(nick, client.username, name), client.fd)
        state.send(replies.rpl_namreply(nick, name, channel.names_list()), client.fd)
        state.send(replies.rpl_endofnames(nick, name), client.fd)
        return

    if channel.key != key:
        state.send(replies.err_badchannelkey(nick, name), client.fd)
        return
    if channel.limit == channel.member_count:
        state.send(replies.err_channelisfull(nick, name), client.fd)
        return
    if channel.invite_only:
        if not channel.is_invited(client):
            state.send(replies.err_inviteonlychan(nick, name), client.fd)
            return
        channel.remove_invited(client)

    channel.add_member(client)
    _broadcast(state, channel.member_fds(), replies.join_msg(nick, client.username, name))
    if channel.topic:
        state.send(replies.rpl_topic(nick, name, channel.topic), client.fd)
    state.send(replies.rpl_namreply(nick, name, channel.names_list()), client.fd)
    state.send(replies.rpl_endofnames(nick, name), client.fd)


def part(state: ServerState, client: Client, args: list[str]) -> None:
    """Leave a channel; the channel is deleted when its last member leaves."""
    nick = client.nickname
    if len(args) < 2:
        state.send(replies.err_needmoreparams(nick, "PART"), client.fd)
        return

    name = args[1]
    reason = args[2] if len(args) >= 3 else ":bye britney"

    channel = state.channels.get(name)
    if channel is None:
        state.send(replies.err_nosuchchannel(nick, name), client.fd)
        return
    if not channel.is_member(client):
        state.send(replies.err_notonchannel(nick, name), client.fd)
        return

    _broadcast(
        state, channel.member_fds(), replies.part_msg(nick, client.username, name, reason)
    )
    if channel.member_count == 1:
        state.delete_channel(name)
    else:
        channel.remove_member(client)


def kick(state: ServerState, client: Client, args: list[str]) -> None:
    """Remove a member from a channel; only channel operators may do so."""
    nick = client.nickname
    if len(args) < 3:
        state.send(replies.err_needmoreparams(nick, "KICK"), client.fd)
        return

    name = args[1]
    target_nick = args[2]
    message = args[3] if len(args) >= 4 else ":" + nick

    channel = state.channels.get(name)
    if channel is None:
        state.send(replies.err_nosuchchannel(nick, name), client.fd)
        return
    if not channel.is_member(client):
        state.send(replies.err_notonchannel(nick, name), client.fd)
        return
    target = state.client_by_nick(target_nick)
    if target is None or not channel.is_member(target):
        state.send(replies.err_usernotinchannel(nick, name, target_nick), client.fd)
        return
    if not channel.is_operator(client):
        state.send(replies.err_chanoprivsneeded(nick, name), client.fd)
        return

    _broadcast(
        state,
        channel.member_fds(),
        replies.kick_msg(nick, client.username, name, target_nick, message),
    )
    if channel.is_operator(target):
        channel.remove_operator(target)
    channel.remove_member(target)


def invite(state: ServerState, client: Client, args: list[str]) -> None:
    """Invite a user to a channel the client operates."""
    nick = client.nickname
    if len(args) < 3:
        state.send(replies.err_needmoreparams(nick, "JOIN"), client.fd)
        return

    target_nick = args[1]
    name = args[2]

    target = state.client_by_nick(target_nick)
    if target is None:
        state.send(replies.err_nosuchnick(nick, target_nick), client.fd)
        return
    channel = state.channels.get(name)
    if channel is None:
        state.send(replies.err_nosuchchannel(nick, name), client.fd)
        return
    if not channel.is_member(client):
        state.send(replies.err_notonchannel(nick, name), client.fd)
        return
    if not channel.is_operator(client):
        state.send(replies.err_chanoprivsneeded(nick, name), client.fd)
        return
    if channel.is_member(target):
        state.send(replies.err_useronchannel(nick, target_nick, name), client.fd)
        return

    channel.add_invited(target)
    state.send(replies.rpl_inviting(nick, target_nick, name), client.fd)
    state.send(replies.invite_msg(nick, client.username, target_nick, name), target.fd)


def topic(state: ServerState, client: Client, args: list[str]) -> None:
    """Show or change a channel's topic."""
    nick = client.nickname
    if len(args) < 2:
        state.send(replies.err_needmoreparams(nick, "TOPIC"), client.fd)
        return

    name = args[1]
    new_topic = args[2] if len(args) >= 3 else ""

    channel = state.channels.get(name)
    if channel is None:
        state.send(replies.err_nosuchchannel(nick, name), client.fd)
        return
    if not channel.is_member(client):
        state.send(replies.err_notonchannel(nick, name), client.fd)
        return
    if not new_topic:
        state.send(replies.print_topic(nick, client.username, channel.topic), client.fd)
        return
    if channel.topic_restricted and not channel.is_operator(client):
        state.send(replies.err_chanoprivsneeded(nick, name), client.fd)
        return

    channel.topic = new_topic
    _broadcast(
        state, channel.member_fds(), replies.topic_msg(nick, client.username, name, new_topic)
    )


def privmsg(state: ServerState, client: Client, args: list[str]) -> None:
    """Send a message to a user, or to every other member of a channel."""
    nick = client.nickname
    if len(args) < 2:
        state.send(replies.err_needmoreparams(nick, "PRIVMSG"), client.fd)
        return

    target = args[1]
    message = args[2] if len(args) >= 3 else ""

    if not message:
        state.send(replies.err_notexttosend(nick), client.fd)
        return

    line = replies.privmsg_msg(nick, client.username, target, message)

    if not target.startswith("#"):
        recipient = state.client_by_nick(target)
        if recipient is None:
            state.send(replies.err_nosuchnick(nick, target), client.fd)
            return
        state.send(line, recipient.fd)
        return

    channel = state.channels.get(target)
    if channel is None:
        state.send(replies.err_nosuchchannel(nick, target), client.fd)
        return
    _broadcast(state, [fd for fd in channel.member_fds() if fd != client.fd], line)