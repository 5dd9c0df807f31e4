import errno
import socket

import pytest

from sockdesc.sockets import parse_address
from sockdesc.udp import UdpSocket


@pytest.fixture
def port() -> int:
    probe = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]
    finally:
        probe.close()


def _errno_of(call, *args) -> int:
    with pytest.raises(OSError) as info:
        call(*args)
    return info.value.errno


def test_open_and_close_track_descriptor():
    sock = UdpSocket()
    assert sock.closed
    sock.open()
    assert sock.fileno() >= 0
    sock.open()
    assert sock.fileno() >= 0
    sock.close()
    assert sock.fileno() == -1


@pytest.mark.parametrize(
    "args", [("127.0.0.1", 0), ("127.0.0.1",), ("bogus", 9999)]
)
def test_bad_bind_is_invalid(args):
    with UdpSocket() as sock:
        assert _errno_of(sock.bind, *args) == errno.EINVAL


@pytest.mark.parametrize(
    "args", [(b"data", "bogus", 9999), (b"data", "127.0.0.1")]
)
def test_bad_write_to_is_invalid(args):
    with UdpSocket() as sock:
        sock.open()
        assert _errno_of(sock.write_to, *args) == errno.EINVAL


def test_closed_socket_raises():
    sock = UdpSocket()
    assert _errno_of(sock.read_from, 4096) == errno.EINVAL
    assert _errno_of(sock.write_to, b"data", "127.0.0.1", 9999) == errno.EINVAL


def test_echo_round_trip(port):
    with UdpSocket() as server, UdpSocket() as client:
        server.bind("127.0.0.1", port)
        client.open()
        message = b"ping"
        assert client.write_to(message, "127.0.0.1", port) == len(message)

        request, sender = server.read_from(4096)
        assert request == message
        host, sender_port = parse_address(sender)
        assert host == "127.0.0.1"
        assert sender_port != port

        assert server.write_to(request, sender) == len(message)
        assert client.read_from(4096) == (message, f"127.0.0.1:{port}")


@pytest.mark.parametrize(
    "bind_args, payload, size, expected",
    [
        (lambda p: (f"127.0.0.1:{p}",), b"bye", 4096, b"bye"),
        (lambda p: ("", p), b"abcdef", 3, b"abc"),
    ],
)
def test_receive(port, bind_args, payload, size, expected):
    with UdpSocket() as server, UdpSocket() as client:
        server.bind(*bind_args(port))
        client.open()
        client.write_to(payload, f"127.0.0.1:{port}")
        assert server.read_from(size)[0] == expected