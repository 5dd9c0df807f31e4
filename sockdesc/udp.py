"""UDP over IPv4 as a :class:`DatagramSocket`."""

from __future__ import annotations

import socket

from sockdesc.sockets import (
    DatagramSocket,
    _bind_inet,
    _check_port,
    _endpoint,
    _invalid,
)


class UdpSocket(DatagramSocket):
    """A UDP/IPv4 socket; peers are written as ``"a.b.c.d:port"``."""

    def open(self) -> None:
        """Close any held socket and create a fresh UDP socket."""
        self._attach(
            socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        )

    def bind(self, address: str, port: int | None = None) -> None:
        """Bind the receiving end; port 0 or a bad address raise EINVAL."""
        _bind_inet(self, address, port)

    def read_from(self, size: int) -> tuple[bytes, str]:
        """Receive one datagram of at most ``size`` bytes.

        Returns the payload and the sender as ``"host:port"``.
        """
        data, (host, port) = self._socket.recvfrom(size)
        return data, f"{host}:{port}"

    def write_to(self, data: bytes, address: str, port: int | None = None) -> int:
        """Send ``data`` to ``address`` and ``port``; return bytes sent.

        Without ``port`` the address is parsed as ``"host:port"``.
        """
        sock = self._socket
        address, port = _endpoint(address, port)
        _check_port(port, allow_zero=True)
        try:
            host = socket.inet_ntoa(socket.inet_aton(address))
        except (OSError, ValueError) as exc:
            raise _invalid(f"invalid IPv4 address {address!r}") from exc
        return sock.sendto(data, (host, port))