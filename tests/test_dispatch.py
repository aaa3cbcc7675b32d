import pytest

from ircserv import replies
from ircserv.dispatch import dispatch
from ircserv.state import Reply, ServerState, Status


@pytest.fixture
def state():
    return ServerState("password")


@pytest.fixture
def client(state):
    return state.add_client(4, "127.0.0.1")


def test_command_before_pass_is_refused(state, client):
    dispatch(state, client, "NICK bob\r")
    assert state.take_replies() == [
        Reply(replies.err_passwdmismatch("*"), Status.AUTH_FAILED, 4)
    ]
    assert client.nickname == "*"


def test_cap_before_pass_is_ignored(state, client):
    dispatch(state, client, "CAP LS 302\r")
    assert state.take_replies() == []
    assert not client.pass_ok


def test_pass_without_argument(state, client):
    dispatch(state, client, "PASS\r")
    assert state.take_replies() == [
        Reply(replies.err_needmoreparams("*", "PASS"), Status.AUTH_FAILED, 4)
    ]


def test_registration_sequence(state, client):
    for line in ("PASS password\r", "NICK bob\r", "USER bob 0 * :Bob\r"):
        dispatch(state, client, line)
    sent = state.take_replies()
    assert client.authenticated
    assert client.username == "bob"
    assert sent[0].message.startswith(replies.rpl_welcome("bob"))
    assert all(reply.target_fd == 4 for reply in sent)


def test_ping_after_pass(state, client):
    dispatch(state, client, "PASS password\r")
    dispatch(state, client, "PING tok\r")
    assert state.take_replies() == [Reply(replies.pong_msg("tok"), Status.OK, 4)]


def test_unknown_and_lowercase_commands_ignored(state, client):
    client.pass_ok = True
    dispatch(state, client, "WHOIS bob\r")
    dispatch(state, client, "nick bob\r")
    assert state.take_replies() == []
    assert client.nickname == "*"


def test_blank_line_does_nothing(state, client):
    dispatch(state, client, "   \r")
    assert state.take_replies() == []


def test_join_routed_to_channel_handler(state, client):
    client.pass_ok = True
    client.nickname = "bob"
    dispatch(state, client, "JOIN #room\r")
    assert "#room" in state.channels
    assert state.channels["#room"].is_operator(client)