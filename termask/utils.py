import socket
import logging

logger = logging.getLogger("termask")

PORT = 12013


class UDPHandler(logging.Handler):
    """Send log records over UDP.

    The terminal is busy with prompts, so logs are sent elsewhere. Run
    ``termask --listen`` in another terminal to see them.
    """

    udp_address = ("127.0.0.1", PORT)

    def __init__(self):
        super().__init__()
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record):
        msg = self.format(record)
        bb = msg.encode()
        size = 2**10
        while bb:
            bb1 = bb[:size]
            bb = bb[size:]
            try:
                self._socket.sendto(bb1, self.udp_address)
            except OSError:
                self.handleError(record)
                break

    def close(self):
        self._socket.close()
        super().close()


def enable_udp_logging(level=logging.DEBUG):
    """Attach a UDPHandler to the termask logger (once)."""
    logger.setLevel(level)
    for handler in logger.handlers:
        if isinstance(handler, UDPHandler):
            return handler
    handler = UDPHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return handler


def listen_to_logs():
    """Called from ``termask --listen``

    This way we can see the logs from another process, so it does not get mixed up with the prompts.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", PORT))

    while True:
        data, addr = sock.recvfrom(2**20)
        print(data.decode())
