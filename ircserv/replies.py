"""Numeric replies, relayed messages and terminal colours used by the server."""

SERVER_NAME = "britney-spears"
SERVER_VERSION = "1.0"
CREATION_DAY = "25/12/JESUSBD"
SERVER_HOST = "127.0.0.1"

RESET = "\033[0m"
BOLD = "\033[1m"
UNDERLINE = "\033[4m"

BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BLACK_BG = "\033[40m"
RED_BG = "\033[41m"
GREEN_BG = "\033[42m"
YELLOW_BG = "\033[43m"
BLUE_BG = "\033[44m"
PURPLE_BG = "\033[45m"
CYAN_BG = "\033[46m"
WHITE_BG = "\033[47m"

CRLF = "\r\n"

_MOTD_ART_HEAD = (
    "-  _          _ _                                                    \n"
    "- | |        (_) |                                                   \n"
    "- | |__  _ __ _| |_ _ __   ___ _   _   ___ _ __   ___  __ _ _ __ ___ \n"
    "- | '_ \\| '__| | __| '_ \\ / _ \\ | | | / __| '_ \\ / _ \\/ _` | '__/ __|\n"
    "- | |_) | |  | | |_| | | |  __/ |_| | \\__ \\ |_) |  __/ (_| | |  \\__ \\\n"
)

_MOTD_ART_TAIL = (
    "- |_.__/|_|  |_|\\__|_| |_|\\___|\\__, | |___/ .__/ \\___|\\__,_|_|  |___/\n"
    "-                               __/ |     | |                        \n"
    "-                              |___/      |_|                        \r\n"
)


def _numeric(code: str, client: str, rest: str) -> str:
    return f":{SERVER_NAME} {code} {client} {rest}{CRLF}"


def _prefix(nick: str, user: str) -> str:
    return f":{nick}!{user}@{SERVER_HOST}"


def rpl_welcome(client: str) -> str:
    return _numeric("001", client, ":It's britney bitch")


def rpl_yourhost(client: str) -> str:
    return _numeric(
        "002", client, f":Your host is {SERVER_NAME}, running in version {SERVER_VERSION}"
    )


def rpl_created(client: str) -> str:
    return _numeric("003", client, f":This server was created {CREATION_DAY}")


def rpl_myinfo(client: str) -> str:
    return _numeric("004", client, f":{SERVER_NAME} {SERVER_VERSION}")


def rpl_channelmodeis(client: str, channel: str, modes: str) -> str:
    return _numeric("324", client, f"{channel} {modes}")


def rpl_topic(client: str, channel: str, topic: str) -> str:
    return _numeric("332", client, f"{channel} {topic}")


def rpl_inviting(client: str, target: str, channel: str) -> str:
    return _numeric("341", client, f"{target} {channel}")


def rpl_namreply(client: str, channel: str, members: str) -> str:
    return _numeric("353", client, f"= {channel} :{members}")


def rpl_endofnames(client: str, channel: str) -> str:
    return _numeric("366", client, f"{channel} :End of /NAMES list.")


def rpl_endofbanlist(client: str, channel: str) -> str:
    return _numeric("368", client, f"{channel} :End of Channel Ban List")


def rpl_motdstart(client: str) -> str:
    return _numeric("375", client, f":- {SERVER_NAME} Message of the day -")


def rpl_motd(client: str) -> str:
    """First part of the message of the day; it is not CRLF terminated."""
    return f":{SERVER_NAME} 372 {client} :\n{_MOTD_ART_HEAD}"


def rpl_motd_tail() -> str:
    """Remaining lines of the message of the day, ending in CRLF."""
    return _MOTD_ART_TAIL


def rpl_endofmotd(client: str) -> str:
    return _numeric("376", client, ":- End of /MOTD command.")


def rpl_youreoper(client: str) -> str:
    return _numeric("381", client, ":You are now an IRC operator")


def err_nosuchnick(client: str, target: str) -> str:
    return _numeric("401", client, f"{target} :No such nick")


def err_nosuchchannel(client: str, channel: str) -> str:
    return _numeric("403", client, f"{channel} :No such channel")


def err_cannotsendtochan(client: str, channel: str) -> str:
    return _numeric("404", client, f"{channel} :Cannot send to channel")


def err_notexttosend(client: str) -> str:
    return _numeric("412", client, ":No text to send")


def err_nonicknamegiven(client: str) -> str:
    return _numeric("431", client, ":No nickname given")


def err_erroneusnickname(client: str, nickname: str) -> str:
    return _numeric("432", client, f"{nickname}:Erroneus nickname")


def err_nicknameinuse(client: str, nickname: str) -> str:
    return _numeric("433", client, f"{nickname} :Nickname is already in use")


def err_usernotinchannel(client: str, channel: str, user: str) -> str:
    # This reply goes out without the server prefix.
    return f" 441 {client} {channel} {user} :User is not on that channel{CRLF}"


def err_notonchannel(client: str, channel: str) -> str:
    return _numeric("442", client, f"{channel} :You're not on that channel")


def err_useronchannel(client: str, nick: str, channel: str) -> str:
    return _numeric("443", client, f"{nick} {channel}:Is already on channel")


def err_needmoreparams(client: str, command: str) -> str:
    return _numeric("461", client, f"{command} :Not enough parameters")


def err_alreadyregistered(client: str) -> str:
    return _numeric("462", client, ":You may not reregister")


def err_passwdmismatch(client: str) -> str:
    return _numeric("464", client, ":Password incorrect")


def err_channelisfull(client: str, channel: str) -> str:
    return _numeric("471", client, f"{channel} :Cannot join channel (+l)")


def err_inviteonlychan(client: str, channel: str) -> str:
    return _numeric("473", client, f"{channel} :Cannot join channel (+i)")


def err_badchannelkey(client: str, channel: str) -> str:
    return _numeric("475", client, f"{channel} :Cannot join channel (+k)")


def err_badchanmask(channel: str) -> str:
    return f":{SERVER_NAME} 476 {channel} :Bad Channel Mask{CRLF}"


def err_noprivileges(client: str) -> str:
    return _numeric("481", client, ":Permission Denied- You're not an IRC operator")


def err_chanoprivsneeded(client: str, channel: str) -> str:
    return _numeric("482", client, f"{channel} :You're not channel operator")


def err_nooperhost(client: str) -> str:
    return _numeric("491", client, ":No Oper block for your host")


def privmsg_msg(nick: str, user: str, target: str, message: str) -> str:
    return f"{_prefix(nick, user)} PRIVMSG {target} {message}{CRLF}"


def quit_msg(nick: str, user: str, reason: str) -> str:
    return f"{_prefix(nick, user)} QUIT {reason}{CRLF}"


def nick_change(old_nick: str, user: str, new_nick: str) -> str:
    return f"{_prefix(old_nick, user)} NICK :{new_nick}{CRLF}"


def pong_msg(token: str) -> str:
    return f":{SERVER_NAME} PONG {token}{CRLF}"


def join_msg(nick: str, user: str, channel: str) -> str:
    return f"{_prefix(nick, user)} JOIN :{channel}{CRLF}"


def part_msg(nick: str, user: str, channel: str, reason: str) -> str:
    return f"{_prefix(nick, user)} PART {channel} {reason}{CRLF}"


def kick_msg(nick: str, user: str, channel: str, target: str, message: str) -> str:
    return f"{_prefix(nick, user)} KICK {channel} {target} {message}{CRLF}"


def invite_msg(nick: str, user: str, target: str, channel: str) -> str:
    return f"{_prefix(nick, user)} INVITE {target} :{channel}{CRLF}"


def topic_msg(nick: str, user: str, channel: str, topic: str) -> str:
    return f"{_prefix(nick, user)} TOPIC {channel} {topic}{CRLF}"


def mode_msg(nick: str, user: str, channel: str, mode: str) -> str:
    return f"{_prefix(nick, user)} MODE {channel} {mode}{CRLF}"


def print_nick(nick: str, user: str) -> str:
    return f"{_prefix(nick, user)} NICK :{nick}{CRLF}"


def print_topic(nick: str, user: str, topic: str) -> str:
    return f"{_prefix(nick, user)} TOPIC :{topic}{CRLF}"