"""Exception hierarchy for bottomify codec errors."""


class BottomError(Exception):
    """Base exception for all bottomify errors."""


class DecodeError(BottomError):
    """Raised when a text fragment does not match any token in the table."""

    def __init__(self, fragment: str) -> None:
        """Store the offending fragment and build the display message from it."""
        super().__init__(f"Cannot decode character {fragment}")
        self.fragment = fragment
