"""A connected IRC client."""

from dataclasses import dataclass


@dataclass(eq=False)
class Client:
    """State of one connection; compared by identity."""

    fd: int = -1
    ip_address: str = "0.0.0.0"
    nickname: str = "*"
    username: str = ""
    pass_ok: bool = False
    authenticated: bool = False
    is_operator: bool = False