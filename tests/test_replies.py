import pytest

from ircserv import replies


def test_welcome_wire_format():
    assert replies.rpl_welcome("bob") == ":britney-spears 001 bob :It's britney bitch\r\n"


def test_yourhost_mentions_server_and_version():
    line = replies.rpl_yourhost("bob")
    assert line.startswith(":britney-spears 002 bob :Your host is ")
    assert replies.SERVER_NAME in line and replies.SERVER_VERSION in line


def test_created_mentions_creation_day():
    assert replies.rpl_created("bob").endswith(f"{replies.CREATION_DAY}\r\n")


def test_join_message_uses_server_host():
    line = replies.join_msg("bob", "bobby", "#room")
    assert line == f":bob!bobby@{replies.SERVER_HOST} JOIN :#room\r\n"


def test_pong_contains_token():
    assert replies.pong_msg("abc") == f":{replies.SERVER_NAME} PONG abc\r\n"


def test_usernotinchannel_has_no_server_prefix():
    line = replies.err_usernotinchannel("bob", "#room", "eve")
    assert line.startswith(" 441 bob #room eve ")
    assert not line.startswith(":")


def test_erroneusnickname_has_no_space_before_colon():
    assert replies.err_erroneusnickname("*", "b@d").endswith("b@d:Erroneus nickname\r\n")


def test_badchanmask_has_no_client_field():
    assert replies.err_badchanmask("room").startswith(":britney-spears 476 room ")


def test_namreply_layout():
    line = replies.rpl_namreply("bob", "#room", "@bob eve")
    assert line.endswith(" 353 bob = #room :@bob eve\r\n")


def test_motd_head_is_not_crlf_terminated():
    head = replies.rpl_motd("bob")
    assert head.startswith(":britney-spears 372 bob :\n")
    assert not head.endswith("\r\n")
    art = head.split("\n")[1:-1]
    assert len(art) == 5
    assert all(line.startswith("-") for line in art)


def test_motd_tail_ends_in_crlf():
    tail = replies.rpl_motd_tail()
    assert tail.endswith("\r\n")
    assert len(tail.rstrip("\r\n").split("\n")) == 3


@pytest.mark.parametrize(
    "line,code",
    [
        (replies.rpl_myinfo("c"), "004"),
        (replies.rpl_channelmodeis("c", "#r", "+i"), "324"),
        (replies.rpl_topic("c", "#r", "t"), "332"),
        (replies.rpl_inviting("c", "t", "#r"), "341"),
        (replies.rpl_endofnames("c", "#r"), "366"),
        (replies.rpl_endofbanlist("c", "#r"), "368"),
        (replies.rpl_motdstart("c"), "375"),
        (replies.rpl_endofmotd("c"), "376"),
        (replies.rpl_youreoper("c"), "381"),
        (replies.err_nosuchnick("c", "t"), "401"),
        (replies.err_nosuchchannel("c", "#r"), "403"),
        (replies.err_cannotsendtochan("c", "#r"), "404"),
        (replies.err_notexttosend("c"), "412"),
        (replies.err_nonicknamegiven("c"), "431"),
        (replies.err_nicknameinuse("c", "n"), "433"),
        (replies.err_notonchannel("c", "#r"), "442"),
        (replies.err_useronchannel("c", "n", "#r"), "443"),
        (replies.err_needmoreparams("c", "JOIN"), "461"),
        (replies.err_alreadyregistered("c"), "462"),
        (replies.err_passwdmismatch("c"), "464"),
        (replies.err_channelisfull("c", "#r"), "471"),
        (replies.err_inviteonlychan("c", "#r"), "473"),
        (replies.err_badchannelkey("c", "#r"), "475"),
        (replies.err_noprivileges("c"), "481"),
        (replies.err_chanoprivsneeded("c", "#r"), "482"),
        (replies.err_nooperhost("c"), "491"),
    ],
)
def test_numeric_replies_are_prefixed_and_terminated(line, code):
    assert line.startswith(f":{replies.SERVER_NAME} {code} c ")
    assert line.endswith("\r\n")


@pytest.mark.parametrize(
    "line,verb",
    [
        (replies.privmsg_msg("n", "u", "t", ":hi"), "PRIVMSG"),
        (replies.quit_msg("n", "u", ":bye"), "QUIT"),
        (replies.nick_change("n", "u", "m"), "NICK"),
        (replies.part_msg("n", "u", "#r", ":bye"), "PART"),
        (replies.kick_msg("n", "u", "#r", "t", ":go"), "KICK"),
        (replies.invite_msg("n", "u", "t", "#r"), "INVITE"),
        (replies.topic_msg("n", "u", "#r", "t"), "TOPIC"),
        (replies.mode_msg("n", "u", "#r", "+i"), "MODE"),
        (replies.print_nick("n", "u"), "NICK"),
        (replies.print_topic("n", "u", "t"), "TOPIC"),
    ],
)
def test_relayed_messages_carry_user_prefix(line, verb):
    assert line.startswith(f":n!u@{replies.SERVER_HOST} {verb} ")
    assert line.endswith("\r\n")


def test_nick_change_and_print_nick():
    assert replies.nick_change("old", "u", "new").endswith("NICK :new\r\n")
    assert replies.print_nick("me", "u").endswith("NICK :me\r\n")