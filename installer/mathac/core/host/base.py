from abc import ABC, abstractmethod
from collections.abc import Iterator


class AutoCorrectStore(ABC):
    """Named-entry table of the host application.

    Names are passed exactly as the host stores them, i.e. with the leading
    backslash.
    """

    @abstractmethod
    def entries(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` for every entry currently defined."""
        raise NotImplementedError

    @abstractmethod
    def get(self, name: str) -> str:
        """Return the value of ``name``; raises ``EntryNotFoundError``."""
        raise NotImplementedError

    @abstractmethod
    def add(self, name: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove ``name``; raises ``EntryNotFoundError`` if it is absent."""
        raise NotImplementedError
