import pytest

from ircserv.operators import ServerOperator, load_operators, parse_operators


def test_parse_single_line():
    result = parse_operators(["admin password 127.0.0.1"])
    assert result == [ServerOperator("admin", "password", "127.0.0.1")]


def test_parse_skips_short_and_empty_lines():
    lines = ["", "   ", "admin", "admin password", "root secret 10.0.0.1"]
    assert parse_operators(lines) == [ServerOperator("root", "secret", "10.0.0.1")]


def test_parse_collapses_repeated_spaces_and_ignores_extra_words():
    result = parse_operators(["  admin   password   127.0.0.1  extra words\n"])
    assert result == [ServerOperator("admin", "password", "127.0.0.1")]


def test_parse_keeps_order():
    lines = ["a password h1", "b secret h2"]
    assert [op.name for op in parse_operators(lines)] == ["a", "b"]


def test_load_from_file(tmp_path):
    conf = tmp_path / "ircd.conf"
    conf.write_text("admin password 127.0.0.1\n\nbroken line\nroot secret localhost\n")
    result = load_operators(conf)
    assert result == [
        ServerOperator("admin", "password", "127.0.0.1"),
        ServerOperator("root", "secret", "localhost"),
    ]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_operators(tmp_path / "missing.conf")