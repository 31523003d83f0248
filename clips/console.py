import logging

logger = logging.getLogger(__name__)


class LineReader:
    """Reads one line of input per call and keeps an append-only history of every line read.

    With use_readline, lines are also added to the readline history so they can be recalled with the
    arrow keys. Platforms without the readline module just lose line editing.
    """

    def __init__(self, prompt: str = "clips> ", use_readline: bool = False) -> None:
        self.prompt = prompt
        self.history: list[str] = []
        self._readline = _load_readline() if use_readline else None

    def read_line(self) -> str:
        """Raises EOFError at the end of input"""
        line = input(self.prompt)
        self.add_history(line)
        return line

    def add_history(self, line: str) -> None:
        self.history.append(line)
        if self._readline is not None:
            self._readline.add_history(line)


def _load_readline():
    try:
        import readline
    except ImportError:
        logger.debug("readline is not available, line editing is disabled")
        return None
    # every line goes into the history, blank ones and repeats included
    readline.set_auto_history(False)
    return readline
