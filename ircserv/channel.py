"""An IRC channel with its members, operators and invitations."""

from dataclasses import InitVar, dataclass, field

from .client import Client


def _without_nick(users: list[Client], nickname: str) -> list[Client]:
    return [u for u in users if u.nickname != nickname]


@dataclass(eq=False)
class Channel:
    """A channel created by `creator`, who starts as its only member and operator.

    `member_count` is tracked apart from `members`: it goes up by one on every
    add and down by one on every remove, whatever the member list holds.
    """

    name: str
    creator: InitVar[Client]
    topic: str = ""
    key: str = ""
    limit: int = 0
    invite_only: bool = False
    topic_restricted: bool = False
    member_count: int = field(default=1, init=False)
    members: list[Client] = field(default_factory=list, init=False)
    operators: list[Client] = field(default_factory=list, init=False)
    invited: list[Client] = field(default_factory=list, init=False)

    def __post_init__(self, creator: Client) -> None:
        self.operators.append(creator)
        self.members.append(creator)

    def add_member(self, user: Client) -> None:
        self.members.append(user)
        self.member_count += 1

    def remove_member(self, user: Client) -> None:
        """Drop every member sharing the user's nickname, and their operator rights."""
        self.members = _without_nick(self.members, user.nickname)
        self.member_count -= 1
        if self.is_operator(user):
            self.remove_operator(user)

    def add_operator(self, user: Client) -> None:
        self.operators.append(user)

    def remove_operator(self, user: Client) -> None:
        self.operators = _without_nick(self.operators, user.nickname)

    def add_invited(self, user: Client) -> None:
        self.invited.append(user)

    def remove_invited(self, user: Client) -> None:
        self.invited = _without_nick(self.invited, user.nickname)

    def clear_invited(self) -> None:
        self.invited.clear()

    def is_invited(self, user: Client | None) -> bool:
        return any(u is user for u in self.invited)

    def is_member(self, user: Client | None) -> bool:
        return any(u is user for u in self.members)

    def is_operator(self, user: Client | None) -> bool:
        return any(u is user for u in self.operators)

    def member_fds(self) -> list[int]:
        return [member.fd for member in self.members]

    def names_list(self) -> str:
        """Space separated nicknames, operators marked with '@'."""
        return " ".join(
            ("@" if self.is_operator(member) else "") + member.nickname
            for member in self.members
        )