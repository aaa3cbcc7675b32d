from ircserv.framing import BUFFER_SIZE, LineBuffer, parse_command


def test_complete_line_keeps_carriage_return():
    buffer = LineBuffer()
    assert buffer.feed("NICK bob\r\n") == ["NICK bob\r"]
    assert buffer.pending == ""


def test_several_lines_in_one_feed():
    buffer = LineBuffer()
    assert buffer.feed("PASS x\r\nNICK bob\r\nUSER b") == ["PASS x\r", "NICK bob\r"]
    assert buffer.pending == "USER b"


def test_line_split_across_feeds():
    buffer = LineBuffer()
    assert buffer.feed("PI") == []
    assert buffer.feed("NG tok") == []
    assert buffer.feed("en\r\n") == ["PING token\r"]


def test_bare_newline_does_not_end_line():
    buffer = LineBuffer()
    assert buffer.feed("NICK bob\n") == []
    assert buffer.pending == "NICK bob\n"


def test_nul_truncates_received_data():
    buffer = LineBuffer()
    assert buffer.feed("PING x\0junk\r\n") == []
    assert buffer.feed("\r\n") == ["PING x\r"]


def test_full_buffer_is_flushed_as_a_line():
    buffer = LineBuffer()
    lines = buffer.feed("a" * BUFFER_SIZE)
    assert len(lines) == 1
    assert len(lines[0]) == BUFFER_SIZE
    assert lines[0].endswith("\r\n")
    assert lines[0][:-2] == "a" * (BUFFER_SIZE - 2)
    assert buffer.pending == ""


def test_buffer_over_size_is_kept():
    buffer = LineBuffer()
    assert buffer.feed("a" * (BUFFER_SIZE + 1)) == []
    assert len(buffer.pending) == BUFFER_SIZE + 1


def test_parse_simple_command():
    assert parse_command("JOIN #chan key\r") == ["JOIN", "#chan", "key"]


def test_parse_collapses_spaces():
    assert parse_command("   JOIN    #chan   \r") == ["JOIN", "#chan"]


def test_parse_trailing_parameter():
    assert parse_command("PRIVMSG bob :hello there\r") == ["PRIVMSG", "bob", ":hello there"]


def test_parse_trailing_without_carriage_return_drops_last_char():
    assert parse_command("TOPIC #c :abc") == ["TOPIC", "#c", ":ab"]


def test_parse_empty_and_blank():
    assert parse_command("") == []
    assert parse_command("   \r") == []


def test_parse_round_trip_with_line_buffer():
    buffer = LineBuffer()
    lines = buffer.feed("KICK #room bob :go away\r\nPING tok\r\n")
    assert [parse_command(line) for line in lines] == [
        ["KICK", "#room", "bob", ":go away"],
        ["PING", "tok"],
    ]