import os
import select
import logging

from .keys import KeyDecoder


logger = logging.getLogger("termask")


class InputReader:
    """Non-blocking access to the bytes on an input file descriptor.

    All waiting for input happens in ``poll()``. Reading never blocks,
    provided that it's only done after ``poll()`` reported that data is ready.
    """

    def __init__(self, fd):
        self._fd = fd
        self._decoder = KeyDecoder()
        self._closed = False

    @property
    def fd(self):
        return self._fd

    @property
    def closed(self):
        """Whether the other end closed the stream (we've read an EOF)."""
        return self._closed

    def poll(self, timeout=None):
        """Wait until data is available or the timeout (in seconds) expires.

        A timeout of None blocks until there is data. Returns whether
        data is ready to be read.
        """
        if self._closed:
            return False
        ready, _, _ = select.select([self._fd], [], [], timeout)
        return bool(ready)

    def read_available(self, max_bytes=1024):
        """Get whatever bytes are currently buffered, up to max_bytes."""
        bb = os.read(self._fd, max_bytes)
        if not bb:
            logger.info("input stream closed")
            self._closed = True
        return bb

    def read_keys(self, timeout=None, max_bytes=1024):
        """Poll, read and decode in one go.

        Returns a (possibly empty) list of logical keys. An escape sequence
        that is still incomplete when the poll times out is flushed, so that
        a lonely press of the escape key gets through.
        """
        if self.poll(timeout):
            bb = self.read_available(max_bytes)
            return self._decoder.decode(bb, flush=self._closed)
        elif self._decoder.pending:
            return self._decoder.decode(b"", flush=True)
        return []
