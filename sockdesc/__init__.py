"""Object-oriented wrappers around socket descriptors, with a UDP socket and UDP echo commands."""

__version__ = "0.1.0"