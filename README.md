# ircserv

A small IRC server for local networks and testing. Clients connect over TCP,
authenticate with a connection password, pick a nickname and a username, and
can then chat privately or in channels.

## Running

```
ircserv <port> <password>
```

`port` must be made of digits only and be at most five characters long.
The server listens on the loopback address `127.0.0.1` and runs until it
receives an interrupt (Ctrl-C).

Exit codes:

- `1`: wrong number of arguments
- `2`: the port argument is not valid
- `3`: the server could not start or failed while running (for example the
  operator file cannot be opened or the port cannot be bound)

## Server operators

At start-up the server reads `ircd.conf` from the current directory. Each
line holds three words separated by spaces: an operator name, its password
and the host it is allowed to connect from. Lines with fewer than three words
are ignored, and words past the third are ignored.

```
admin password 127.0.0.1
```

A client whose address matches the host can then become an operator with
`OPER admin password`, which allows the `KILL` command.

## Registration

A client must send `PASS` with the server password first; any other command
before that (except `CAP`, which is ignored) is treated as a wrong password.
Registration completes once both `NICK` and `USER` have been given; the server
then sends the welcome replies and the message of the day. A wrong password,
an invalid or taken nickname, or a missing username during registration closes
the connection.

Nicknames may contain letters, digits and the characters `[ \ ] { | }`.
Nicknames are compared without regard to ASCII case.

## Commands

| Command   | Use |
|-----------|-----|
| `PASS`    | `PASS <password>` |
| `NICK`    | `NICK <nickname>`: set or change the nickname |
| `USER`    | `USER <username> ...` |
| `PING`    | `PING <token>`: answered with `PONG <token>` |
| `QUIT`    | `QUIT [:reason]`: leave every channel and disconnect |
| `PRIVMSG` | `PRIVMSG <nick or #channel> :<text>` |
| `JOIN`    | `JOIN <#channel> [key]`: joining a channel that does not exist creates it, with you as its operator |
| `PART`    | `PART <#channel> [:reason]`: the channel is removed when its last member leaves |
| `TOPIC`   | `TOPIC <#channel> [:topic]`: show or set the topic |
| `INVITE`  | `INVITE <nick> <#channel>`: channel operators only |
| `KICK`    | `KICK <#channel> <nick> [:reason]`: channel operators only |
| `MODE`    | `MODE <#channel> [(+\|-)modes] [arguments]` |
| `OPER`    | `OPER <name> <password>` |
| `KILL`    | `KILL <nick> [:reason]`: server operators only |

Unknown commands are ignored. Channel names start with `#` followed by one or
more ASCII letters or digits.

### Channel modes

- `i`: invite only; removing it also clears the invitation list
- `t`: only channel operators may change the topic
- `k <key>`: a key is needed to join
- `l <limit>`: maximum number of members
- `o <nick>`: give or take channel operator status

`MODE <#channel>` with no modes shows the current ones; only channel operators
may change them. Mode arguments are taken in the order in which `k`, `l` and
`o` appear in the mode string.

## Using it from Python

`ircserv.server.IRCServer(port, password, operators)` runs the server with
`serve_forever()` and ends it with `stop()`. Its `feed(fd, data)` method
handles data as if received on connection `fd` and returns the list of
`ircserv.state.Reply` objects (message, status, target descriptor) that would
be sent, which makes the protocol easy to drive without sockets. Operator
accounts can be read with `ircserv.operators.load_operators(path)`.

## Limits

- `JOIN`, `PART` and `PRIVMSG` take a single channel or nickname, not a
  comma-separated list.
- There are no user modes, no `NAMES`, `LIST`, `WHO` or `WHOIS`, and no
  server-to-server links.
- The server listens on the loopback address only.

## Tests

```
pip install -e .[test]
pytest
```