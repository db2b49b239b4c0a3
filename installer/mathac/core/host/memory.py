from collections.abc import Iterator, Mapping

from mathac.core.errors import EntryNotFoundError
from mathac.core.host.base import AutoCorrectStore


class InMemoryStore(AutoCorrectStore):
    """Dictionary-backed store.

    Keeps a log of mutating calls in ``operations`` as ``("add", name,
    value)`` / ``("delete", name)`` tuples so callers can inspect what a
    run did.
    """

    def __init__(self, initial: Mapping[str, str] | None = None):
        self._entries: dict[str, str] = dict(initial or {})
        self.operations: list[tuple] = []

    def entries(self) -> Iterator[tuple[str, str]]:
        yield from list(self._entries.items())

    def get(self, name: str) -> str:
        try:
            return self._entries[name]
        except KeyError:
            raise EntryNotFoundError(name) from None

    def add(self, name: str, value: str) -> None:
        self.operations.append(("add", name, value))
        self._entries[name] = value

    def delete(self, name: str) -> None:
        self.operations.append(("delete", name))
        if name not in self._entries:
            raise EntryNotFoundError(name)
        del self._entries[name]

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)
