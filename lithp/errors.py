class LithpError(Exception):
    """ Base class for all lithp host-level errors"""
    pass


class LithpSyntaxError(LithpError):
    """ Raised when source text does not match the grammar"""

    def __init__(
        self,
        filename: str,
        row: int,
        col: int,
        expected: list[str],
        found: str,
        reason: str | None = None,
    ):
        self.filename = filename
        self.row = row
        self.col = col
        self.expected = expected
        self.found = found
        self.reason = reason
        super().__init__(f"{filename}:{row}:{col}: error: {self.description}")

    @property
    def description(self) -> str:
        if self.reason is not None:
            return f"{self.reason} at {self.found}"
        if len(self.expected) == 1:
            wanted = self.expected[0]
        else:
            wanted = "one of " + ", ".join(self.expected[:-1]) + " or " + self.expected[-1]
        return f"expected {wanted} at {self.found}"


class LithpConfigError(LithpError):
    """ Raised when an explicitly supplied setting is invalid"""
