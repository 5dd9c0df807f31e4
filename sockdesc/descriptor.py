"""Ownership of an operating-system file descriptor with plain read and write."""

from __future__ import annotations

import abc
import errno
import os
from types import TracebackType


def error_description(code: int) -> str:
    """Return the system's text for the error number ``code``."""
    return os.strerror(code)


class Descriptor(abc.ABC):
    """Owns one file descriptor; ``-1`` means nothing is open.

    Errors are raised as :class:`OSError` carrying the system error number.
    Using a descriptor that is not open raises ``OSError(EINVAL)``.
    """

    def __init__(self, fd: int = -1) -> None:
        self._fd = fd

    def __enter__(self) -> Descriptor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fileno={self.fileno()})"

    def fileno(self) -> int:
        """Return the owned descriptor number, or -1 when closed."""
        return self._fd

    @property
    def closed(self) -> bool:
        return self.fileno() == -1

    @abc.abstractmethod
    def open(self) -> None:
        """Acquire a fresh descriptor, closing any one already held."""

    def close(self) -> None:
        """Close the descriptor if one is held; closing twice is harmless.

        If the system refuses to close it, the descriptor stays held and
        the error is raised.
        """
        if not self.closed:
            self._release()

    def _release(self) -> None:
        os.close(self._fd)
        self._fd = -1

    def _require_open(self) -> None:
        if self.closed:
            raise OSError(errno.EINVAL, os.strerror(errno.EINVAL))

    def read(self, size: int) -> bytes:
        """Read at most ``size`` bytes; an empty result means end of input."""
        self._require_open()
        return os.read(self._fd, size)

    def write(self, data: bytes) -> int:
        """Write ``data`` and return how many bytes were accepted."""
        self._require_open()
        return os.write(self._fd, data)