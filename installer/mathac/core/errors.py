class MathAutoCorrectError(Exception):
    """Base class for installer errors."""


class HostConnectionError(MathAutoCorrectError):
    """Word could not be started or its automation layer is unavailable."""


class EntryNotFoundError(MathAutoCorrectError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Math AutoCorrect entry not found: {self.name}"


class EntryTableError(MathAutoCorrectError):
    """The proposed entry table could not be read."""
