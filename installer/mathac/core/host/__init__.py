from mathac.core.host.base import AutoCorrectStore
from mathac.core.host.memory import InMemoryStore
from mathac.core.host.word import WordAutoCorrectStore, open_word_store

__all__ = ["AutoCorrectStore", "InMemoryStore", "WordAutoCorrectStore", "open_word_store"]
