"""The network side of the server: the listening socket and the event loop."""

import selectors
import socket
import threading
from dataclasses import replace

from .client import Client
from .dispatch import dispatch
from .framing import BUFFER_SIZE, LineBuffer
from .operators import ServerOperator
from .replies import BLUE_BG, CYAN, GREEN, RED, RESET, YELLOW_BG
from .state import Reply, ServerState, Status

BACKLOG = 10
TIMEOUT = 2.0
LISTEN_HOST = "127.0.0.1"


class ServerError(Exception):
    """A socket operation the server depends on failed."""


def _clip(message: str) -> str:
    """Cut an outgoing message to the send buffer and at its first NUL."""
    if len(message) >= BUFFER_SIZE:
        message = message[: BUFFER_SIZE - 1] + "\r\n"
    return message.partition("\0")[0]


def _outgoing(queued: list[Reply]) -> list[Reply]:
    """Clip queued replies; nothing after the first closing reply is sent."""
    result = []
    for reply in queued:
        result.append(replace(reply, message=_clip(reply.message)))
        if reply.status != Status.OK:
            break
    return result


class IRCServer:
    """An IRC server listening on the loopback interface."""

    def __init__(
        self,
        port: int,
        password: str,
        operators: tuple[ServerOperator, ...] | list[ServerOperator] = (),
        poll_timeout: float = TIMEOUT,
    ) -> None:
        self.port = port
        self.state = ServerState(password, operators)
        self._poll_timeout = poll_timeout
        self._buffers: dict[int, LineBuffer] = {}
        self._sockets: dict[int, socket.socket] = {}
        self._selector: selectors.BaseSelector | None = None
        self._stopped = threading.Event()

    def feed(self, fd: int, data: bytes | str) -> list[Reply]:
        """Handle data received on a connection and return the replies to send."""
        client = self.state.clients.get(fd)
        if client is None:
            client = self.state.add_client(fd, "0.0.0.0")
        text = data.decode("latin-1") if isinstance(data, bytes) else data
        buffer = self._buffers.setdefault(fd, LineBuffer())
        for line in buffer.feed(text):
            dispatch(self.state, client, line)
        return _outgoing(self.state.take_replies())

    def stop(self) -> None:
        """Ask the event loop to finish."""
        self._stopped.set()

    def serve_forever(self) -> None:
        """Listen and serve clients until stop() is called."""
        listener = self._open_listener()
        self._selector = selectors.DefaultSelector()
        self._selector.register(listener, selectors.EVENT_READ)
        print(f"{GREEN}Server is listening on fd {listener.fileno()}{RESET}")
        try:
            while not self._stopped.is_set():
                try:
                    events = self._selector.select(self._poll_timeout)
                except OSError as exc:
                    if self._stopped.is_set():
                        break
                    raise ServerError("Poll system call failed") from exc
                if self._stopped.is_set():
                    break
                for key, _ in events:
                    print(f"{BLUE_BG}[{key.fd}] ready for lecture{RESET}\n")
                    if key.fileobj is listener:
                        self._accept(listener)
                    elif key.fd in self._sockets:
                        self._read(key.fd)
        finally:
            for fd in list(self._sockets):
                self._end_connection(fd)
            self._selector.close()
            self._selector = None
            listener.close()
        print()
        print(f"{GREEN}Server closed connection{RESET}")

    def _open_listener(self) -> socket.socket:
        try:
            listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise ServerError("Socket system call failed") from exc
        try:
            try:
                listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            except OSError as exc:
                raise ServerError("Setsockopt system call failed") from exc
            try:
                # The port is carried in 16 bits on the wire.
                listener.bind((LISTEN_HOST, self.port & 0xFFFF))
            except (OSError, OverflowError) as exc:
                raise ServerError("Bind system call failed") from exc
            try:
                listener.listen(BACKLOG)
            except OSError as exc:
                raise ServerError("Listen system call failed") from exc
        except ServerError:
            listener.close()
            raise
        return listener

    def _accept(self, listener: socket.socket) -> None:
        try:
            conn, address = listener.accept()
        except OSError as exc:
            raise ServerError("Accept system call failed") from exc
        fd = conn.fileno()
        self._sockets[fd] = conn
        assert self._selector is not None
        self._selector.register(conn, selectors.EVENT_READ)
        self.state.add_client(fd, address[0])
        print(f"{GREEN}New connection on fd {fd}{RESET}")

    def _read(self, fd: int) -> None:
        try:
            data = self._sockets[fd].recv(BUFFER_SIZE)
        except OSError as exc:
            self._end_connection(fd)
            raise ServerError("Recv system call failed") from exc
        if not data:
            print(f"{GREEN}Client {fd} disconnected from server{RESET}")
            self._end_connection(fd)
            return
        print(f"{CYAN}{data.decode('latin-1')}{RESET}")
        print(f"bytes read = {len(data)}\n")
        self._deliver(self.feed(fd, data))

    def _deliver(self, outgoing: list[Reply]) -> None:
        for reply in outgoing:
            fd = reply.target_fd
            print(f"{YELLOW_BG}[{fd}] is going to receive the following buffer{RESET}\n")
            print(f"{CYAN}{reply.message}{RESET}", end="")
            conn = self._sockets.get(fd)
            try:
                if conn is None:
                    raise OSError("connection is closed")
                sent = conn.send(reply.message.encode("latin-1", errors="replace"))
                print(f"bytes sent = {sent}\n")
            except OSError:
                self._end_connection(fd)
                print(f"{RED}Error: Send failed for fd {fd}{RESET}")
            if reply.status != Status.OK:
                if reply.status == Status.AUTH_FAILED:
                    print(f"{GREEN}Client {fd} failed auth{RESET}")
                else:
                    client: Client | None = self.state.clients.get(fd)
                    name = client.nickname if client else "*"
                    print(f"{GREEN}Client {name} left server{RESET}")
                self._end_connection(fd)
                break

    def _end_connection(self, fd: int) -> None:
        self.state.remove_client(fd)
        self._buffers.pop(fd, None)
        conn = self._sockets.pop(fd, None)
        if conn is None:
            return
        if self._selector is not None:
            try:
                self._selector.unregister(conn)
            except (KeyError, ValueError):
                pass
        conn.close()