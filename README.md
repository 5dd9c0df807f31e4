# sockdesc

Small, object-oriented wrappers around POSIX socket descriptors. Each socket
object owns one descriptor. Closing the object, or leaving a `with` block,
closes the descriptor.

The package is made of these modules:

- `sockdesc.descriptor`
  - `Descriptor` is the base for every object that owns a descriptor. It has
    `open`, `close`, `read(size)`, `write(data)` and `fileno()`, and a
    `closed` property.
  - `error_description(code)` returns the system's text for an errno value.
- `sockdesc.sockets`
  - `Socket`, `BoundSocket`, `StreamSocket`, `DatagramSocket` and `Acceptor`
    are the shared socket layers.
  - `parse_address("host:port")` splits an address into `(host, port)`. It
    raises `ValueError` when the address has no colon, has no port digits, or
    has a port above 65535.
- `sockdesc.udp`
  - `UdpSocket` works over IPv4 UDP, with `open`, `bind`, `read_from` and
    `write_to`.
- `sockdesc.udp_echo`
  - The UDP echo client and server commands.

When the operating system reports a failure, it is raised as `OSError` with
the errno attached. Using a socket that is not open raises `OSError` with
`EINVAL`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the UDP socket

```python
from sockdesc.udp import UdpSocket

with UdpSocket() as server:
    server.bind("127.0.0.1", 9999)
    data, sender = server.read_from(4096)   # sender is "host:port"
    server.write_to(data, sender)
```

Addresses:

- `bind` accepts an address and a port, or a single `"host:port"` string.
- An empty host binds to all interfaces.
- Binding to port 0 raises `OSError(EINVAL)`.

`write_to(data, address, port)` sends one datagram. If you leave out the
port, the address is parsed as `"host:port"`.

## Echo commands

Start the server first, then run the client against it:

```
sockdesc-udp-server [--host 127.0.0.1] [--port 9999]
sockdesc-udp-client [--host 127.0.0.1] [--port 9999]
```

What each command does:

- **Server:** binds to the given address. It sends every datagram back to its
  sender and stops once it receives `bye`.
- **Client:** reads words from standard input, one at a time. It sends each
  word to the server and prints the reply. It stops when the reply is `bye`
  or when input ends.

## What is not included

The package has no concrete TCP socket and no concrete UNIX-domain socket
classes. `StreamSocket` and the `Acceptor` it hands out are abstract layers.
No class here implements `accept` or `connect`, so the package provides:

- no stream client or server;
- no UNIX-domain echo commands.

UDP is the only working transport.