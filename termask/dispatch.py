"""
The character dispatch loop.

Keys are read from an input reader and passed, one at a time and in
order of arrival, to a handler. The handler returns False (or None) to
ask for more keys; anything else is the result, which ends the loop.

The bookkeeping is a tiny state machine that knows nothing about I/O,
so that it can be tested (and driven) without a terminal:

    READING --key--> CONTINUING --key--> ... --key--> MATCHED
"""

import logging


logger = logging.getLogger("termask")

# How long each poll waits for input, in seconds. Short enough to stay
# responsive, long enough to not spin.
POLL_INTERVAL = 0.1

READING = "reading"
CONTINUING = "continuing"
MATCHED = "matched"


def transition(state, key, handler):
    """Feed one key to the handler: (state, key) -> (new_state, result)."""
    if state == MATCHED:
        raise RuntimeError("Cannot feed keys after a match.")
    result = handler(key)
    if result is False or result is None:
        return CONTINUING, None
    return MATCHED, result


class CharDispatcher:
    """Holds the state of one dispatch run."""

    def __init__(self, handler):
        self._handler = handler
        self.state = READING
        self.result = None

    @property
    def done(self):
        return self.state == MATCHED

    def feed(self, keys):
        """Feed a sequence of keys. Returns True when the handler produced a result.

        Keys after the one that produced a result are not consumed.
        """
        for key in keys:
            if not key:
                continue
            self.state, result = transition(self.state, key, self._handler)
            if self.state == MATCHED:
                self.result = result
                return True
        return False


def read_char(reader, handler, poll_interval=POLL_INTERVAL):
    """Run the dispatch loop on the given reader until the handler gives a result.

    There is no time limit; the loop only ends when the handler says so
    (or when the input is closed, which raises EOFError).
    """
    dispatcher = CharDispatcher(handler)
    logger.info("dispatch loop started")
    try:
        while not dispatcher.feed(reader.read_keys(poll_interval)):
            if reader.closed:
                raise EOFError("Input was closed while waiting for a key.")
    finally:
        logger.info(f"dispatch loop stopped in state {dispatcher.state}")
    return dispatcher.result
