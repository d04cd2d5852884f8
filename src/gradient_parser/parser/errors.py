"""Parser error types."""


class ParseError(Exception):
    """Raised when gradient source cannot be parsed.

    ``source`` is the complete text handed to the parser and ``remaining`` is
    what was still unconsumed when the error was detected.
    """

    def __init__(self, message: str, source: str = "", remaining: str | None = None):
        self.message = message
        self.source = source
        self.remaining = remaining
        super().__init__(f"{source}: {message}")

    @property
    def position(self) -> int | None:
        """Offset into ``source`` where parsing stopped, if known."""
        if self.remaining is None:
            return None
        return len(self.source) - len(self.remaining)
