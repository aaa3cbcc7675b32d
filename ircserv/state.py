"""Shared server state: clients, channels, operators and pending replies."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from . import replies
from .channel import Channel
from .client import Client
from .operators import ServerOperator


class Status(IntEnum):
    """What happens to the target connection once a reply is sent."""

    OK = 0
    AUTH_FAILED = 1
    QUIT = 2


@dataclass(frozen=True)
class Reply:
    """A message queued for one connection."""

    message: str
    status: Status
    target_fd: int


class ServerState:
    """Everything the command handlers read and change."""

    def __init__(self, password: str, operators: Iterable[ServerOperator] = ()) -> None:
        self.password = password
        self.operators: list[ServerOperator] = list(operators)
        self.clients: dict[int, Client] = {}
        self.channels: dict[str, Channel] = {}
        self.replies: list[Reply] = []

    def add_client(self, fd: int, ip_address: str) -> Client:
        """Register a new connection; clients stay ordered by descriptor."""
        client = Client(fd=fd, ip_address=ip_address)
        self.clients[fd] = client
        self.clients = dict(sorted(self.clients.items()))
        return client

    def remove_client(self, fd: int) -> None:
        self.clients.pop(fd, None)

    def send(self, message: str, target_fd: int, status: Status = Status.OK) -> None:
        """Queue a message for a connection."""
        self.replies.append(Reply(message, status, target_fd))

    def take_replies(self) -> list[Reply]:
        """Return the queued replies and empty the queue."""
        taken, self.replies = self.replies, []
        return taken

    def client_by_nick(self, nickname: str) -> Client | None:
        return next(
            (client for client in self.clients.values() if client.nickname == nickname),
            None,
        )

    def validate_auth(self, client: Client) -> None:
        """Mark the client registered and queue the welcome burst and MOTD."""
        client.authenticated = True
        nick = client.nickname
        self.send(
            replies.rpl_welcome(nick)
            + replies.rpl_yourhost(nick)
            + replies.rpl_created(nick)
            + replies.rpl_myinfo(nick),
            client.fd,
        )
        self.send(replies.rpl_motdstart(nick) + replies.rpl_motd(nick), client.fd)
        self.send(replies.rpl_motd_tail() + replies.rpl_endofmotd(nick), client.fd)

    def create_channel(self, name: str, creator: Client) -> Channel:
        channel = Channel(name, creator)
        self.channels[name] = channel
        return channel

    def delete_channel(self, name: str) -> None:
        self.channels.pop(name, None)

    def host_matches(self, name: str, host: str) -> bool:
        return any(op.name == name and op.host == host for op in self.operators)

    def password_matches(self, name: str, password: str) -> bool:
        return any(op.name == name and op.password == password for op in self.operators)