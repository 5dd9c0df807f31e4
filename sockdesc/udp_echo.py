"""Echo over UDP: an interactive client and a server."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from sockdesc.descriptor import error_description
from sockdesc.udp import UdpSocket

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9999
BUFFER_SIZE = 4096
FAREWELL = "bye"


def _describe(exc: OSError) -> str:
    return error_description(exc.errno) if exc.errno else str(exc)


def _words(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated words from ``lines``."""
    for line in lines:
        yield from line.split()


def _open(sock: UdpSocket) -> int:
    try:
        sock.open()
    except OSError as exc:
        print(
            f"Failed to open UDP socket: {exc.errno} {_describe(exc)}",
            file=sys.stderr,
        )
        return exc.errno or 1
    return 0


def _converse(client: UdpSocket, host: str, port: int, words: Iterator[str]) -> None:
    response = ""
    while response != FAREWELL:
        print("REQUEST: ", end="", flush=True)
        request = next(words, None)
        if request is None:
            print()
            return
        try:
            client.write_to(request.encode(), host, port)
        except OSError as exc:
            print(
                f"Failed to write to {host}:{port} with result "
                f"{exc.errno} {_describe(exc)}",
                file=sys.stderr,
            )
            return
        try:
            data, _ = client.read_from(BUFFER_SIZE)
        except OSError as exc:
            print(
                f"Failed to read with result {exc.errno} {_describe(exc)}",
                file=sys.stderr,
            )
            return
        response = data.decode(errors="replace")
        print(f"Received {response}")


def client_main(argv: list[str] | None = None) -> int:
    """Send each word read from standard input and print the echo, until 'bye'."""
    parser = argparse.ArgumentParser(
        prog="udp-client",
        description="Send words from standard input to a UDP echo server.",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="server IPv4 address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    args = parser.parse_args(argv)

    with UdpSocket() as client:
        code = _open(client)
        if code:
            return code
        _converse(client, args.host, args.port, _words(sys.stdin))
    return 0


def _echo(server: UdpSocket) -> None:
    request = ""
    while request != FAREWELL:
        try:
            data, sender = server.read_from(BUFFER_SIZE)
        except OSError as exc:
            print(
                f"Failed to read with result {exc.errno} {_describe(exc)}",
                file=sys.stderr,
            )
            return
        request = data.decode(errors="replace")
        print(f"Received {request}")
        try:
            server.write_to(data, sender)
        except OSError as exc:
            print(
                f"Failed to write to {sender} with result "
                f"{exc.errno} {_describe(exc)}",
                file=sys.stderr,
            )
            return


def server_main(argv: list[str] | None = None) -> int:
    """Echo every datagram back to its sender until 'bye' arrives."""
    parser = argparse.ArgumentParser(
        prog="udp-server",
        description="Echo UDP datagrams until 'bye' is received.",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="IPv4 address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to bind")
    args = parser.parse_args(argv)

    with UdpSocket() as server:
        code = _open(server)
        if code:
            return code
        try:
            server.bind(args.host, args.port)
        except OSError as exc:
            print(
                f"Failed to bind to {args.host}:{args.port} with result "
                f"{exc.errno} {_describe(exc)}",
                file=sys.stderr,
            )
            return exc.errno or 1
        _echo(server)
    return 0