import tty  # Unix
import logging
import termios  # Unix

from ._context import TerminalContext


logger = logging.getLogger("termask")


def patch_lflag(attrs: int) -> int:
    # ISIG stays on, so that Ctrl-C still raises KeyboardInterrupt.
    return attrs & ~(termios.ECHO | termios.ICANON | termios.IEXTEN)


def patch_iflag(attrs: int) -> int:
    return attrs & ~(
        # Disable XON/XOFF flow control on output and input.
        # (Don't capture Ctrl-S and Ctrl-Q.)
        # Like executing: "stty -ixon."
        termios.IXON
        | termios.IXOFF
        |
        # Don't translate carriage return into newline on input.
        termios.ICRNL
        | termios.INLCR
        | termios.IGNCR
    )


class UnixTerminalContext(TerminalContext):

    def __init__(self, **kwargs):
        self._ori_term_attr = None
        super().__init__(**kwargs)

    def _store_terminal_mode(self):
        try:
            self._ori_term_attr = termios.tcgetattr(self.fd_in)
        except termios.error:
            # Not a tty, nothing to store or to patch.
            self._ori_term_attr = None

    def _set_terminal_mode(self):
        if self._ori_term_attr is None:
            return

        newattr = termios.tcgetattr(self.fd_in)
        newattr[tty.LFLAG] = patch_lflag(newattr[tty.LFLAG])
        newattr[tty.IFLAG] = patch_iflag(newattr[tty.IFLAG])

        # VMIN defines the number of characters read at a time in
        # non-canonical mode. It seems to default to 1 on Linux, but on
        # Solaris and derived operating systems it defaults to 4. (This is
        # because the VMIN slot is the same as the VEOF slot, which
        # defaults to ASCII EOT = Ctrl-D = 4.)
        newattr[tty.CC][termios.VMIN] = 1
        newattr[tty.CC][termios.VTIME] = 0

        termios.tcsetattr(self.fd_in, termios.TCSANOW, newattr)
        logger.debug("terminal switched to raw mode")

    def _reset_terminal_mode(self):
        if self._ori_term_attr is not None:
            try:
                termios.tcsetattr(self.fd_in, termios.TCSANOW, self._ori_term_attr)
            except termios.error as err:
                logger.error(f"Could not restore terminal mode: {err}")
            else:
                logger.debug("terminal mode restored")
            self._ori_term_attr = None
