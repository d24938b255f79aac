"""Error type raised throughout the package."""


class GemError(Exception):
    """Raised when an operation cannot be carried out as requested."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message