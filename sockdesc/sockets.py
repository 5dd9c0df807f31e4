"""Socket kinds built on :class:`Descriptor`: stream, datagram and accepted."""

from __future__ import annotations

import abc
import contextlib
import errno
import os
import re
import socket
from types import TracebackType

from sockdesc.descriptor import Descriptor

_PORT_DIGITS = re.compile(r"[0-9]+")
MAX_PORT = 0xFFFF
ANY_ADDRESS = "0.0.0.0"


def _invalid(message: str | None = None) -> OSError:
    """An ``OSError`` carrying ``EINVAL``."""
    return OSError(errno.EINVAL, message or os.strerror(errno.EINVAL))


def parse_address(address: str) -> tuple[str, int]:
    """Split ``"host:port"`` at the first colon into ``(host, port)``.

    The port is the run of decimal digits right after the colon; anything
    after those digits is ignored.  Raises :class:`ValueError` when there is
    no colon, no digits, or the port does not fit in 16 bits.
    """
    host, sep, rest = address.partition(":")
    if not sep:
        raise ValueError(f"address {address!r} has no ':port' part")
    match = _PORT_DIGITS.match(rest)
    if match is None:
        raise ValueError(f"address {address!r} has no port number")
    port = int(match.group())
    if port > MAX_PORT:
        raise ValueError(f"port {port} in {address!r} is out of range")
    return host, port


def _endpoint(address: str, port: int | None) -> tuple[str, int]:
    """Return ``(address, port)``, parsing ``"host:port"`` when no port is given."""
    if port is not None:
        return address, port
    try:
        return parse_address(address)
    except ValueError as exc:
        raise _invalid(str(exc)) from exc


def _check_port(port: int, *, allow_zero: bool = False) -> int:
    lowest = 0 if allow_zero else 1
    if not lowest <= port <= MAX_PORT:
        raise _invalid(f"port {port} is not usable")
    return port


def _ipv4(address: str) -> str:
    """Return ``address`` if it is a dotted IPv4 address, else raise EINVAL."""
    try:
        socket.inet_pton(socket.AF_INET, address)
    except (OSError, ValueError) as exc:
        raise _invalid(f"invalid IPv4 address {address!r}") from exc
    return address


class Socket(Descriptor):
    """A descriptor that is a network or local socket."""

    def __init__(self, sock: socket.socket | None = None) -> None:
        super().__init__()
        self._sock = sock

    def fileno(self) -> int:
        return -1 if self._sock is None else self._sock.fileno()

    def _release(self) -> None:
        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()

    def _attach(self, sock: socket.socket) -> None:
        """Close whatever is held and take ownership of ``sock``."""
        self.close()
        self._sock = sock

    def _ensure_open(self) -> None:
        if self.closed:
            self.open()

    @property
    def _socket(self) -> socket.socket:
        self._require_open()
        assert self._sock is not None
        return self._sock

    def shutdown(self) -> None:
        """Stop further receives on the socket; does nothing when closed."""
        if self._sock is not None:
            self._sock.shutdown(socket.SHUT_RD)

    def read(self, size: int) -> bytes:
        return self._socket.recv(size)

    def write(self, data: bytes) -> int:
        return self._socket.send(data)


def _bind_inet(target: Socket, address: str, port: int | None) -> None:
    """Bind an IPv4 socket, opening it first; an empty address means any."""
    address, port = _endpoint(address, port)
    target._ensure_open()
    _check_port(port)
    host = _ipv4(address) if address else ANY_ADDRESS
    target._socket.bind((host, port))


class BoundSocket(Socket):
    """A socket that can be bound to a local address."""

    @abc.abstractmethod
    def bind(self, address: str) -> None:
        """Bind to ``address``, opening the socket first if needed."""


class DatagramSocket(BoundSocket):
    """A message-oriented socket addressed per message."""

    @abc.abstractmethod
    def read_from(self, size: int) -> tuple[bytes, str]:
        """Receive one message of at most ``size`` bytes and its sender."""

    @abc.abstractmethod
    def write_to(self, data: bytes, address: str) -> int:
        """Send ``data`` to ``address``; return the number of bytes sent."""


class Acceptor(Socket):
    """A connection handed out by :meth:`StreamSocket.accept`."""

    def __init__(
        self,
        sock: socket.socket,
        peer_address: str = "",
        peer_port: int = 0,
    ) -> None:
        super().__init__(sock)
        self._peer_address = peer_address
        self._peer_port = peer_port

    def open(self) -> None:
        """An accepted connection cannot be reopened; check it is still open."""
        self._require_open()

    def peer(self) -> str:
        """Address of the remote end, empty when not known."""
        return self._peer_address

    def peer_port(self) -> int:
        """Port of the remote end, 0 when not known."""
        return self._peer_port

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        with contextlib.suppress(OSError):
            self.shutdown()
        self.close()


class StreamSocket(BoundSocket):
    """A connection-oriented socket that can listen, accept and connect."""

    def listen(self, max_connections: int = -1) -> None:
        """Start listening; ``-1`` asks for the system's maximum backlog."""
        sock = self._socket
        if max_connections == -1:
            max_connections = socket.SOMAXCONN
        sock.listen(max_connections)

    @abc.abstractmethod
    def accept(self) -> Acceptor:
        """Wait for and return the next incoming connection."""

    @abc.abstractmethod
    def connect(self, address: str) -> None:
        """Connect to ``address``, opening the socket first if needed."""

    def disconnect(self) -> None:
        """Drop the connection by closing the socket."""
        self.close()