"""Value types shared by the entry table, the reconciler and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Mode(str, Enum):
    """How to treat a proposed entry whose name already exists in Word."""
    SKIP = "skip"
    INTERACTIVE = "interactive"
    FORCE = "force"


class EntryAction(str, Enum):
    ADDED = "added"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass(frozen=True)
class ProposedEntry:
    """A shorthand the installer wants present in the Math AutoCorrect table.

    ``name`` is stored without the leading backslash. When ``reference`` is
    set, the value is copied from that existing entry so the new shorthand
    renders exactly like Word's own (e.g. ``\\overbar`` for ``\\vinculum``);
    ``symbol`` is the fallback glyph.
    """
    name: str
    symbol: str
    reference: str = ""
    category: str = ""


@dataclass
class EntryOutcome:
    name: str
    action: EntryAction
    value: str | None = None
    detail: str | None = None


@dataclass
class ReconcileResult:
    outcomes: list[EntryOutcome] = field(default_factory=list)

    def record(self, outcome: EntryOutcome) -> EntryOutcome:
        self.outcomes.append(outcome)
        return outcome

    def count(self, *actions: EntryAction) -> int:
        return sum(1 for o in self.outcomes if o.action in actions)

    @property
    def added(self) -> int:
        # Overwrites are reported as additions, matching the summary wording
        return self.count(EntryAction.ADDED, EntryAction.OVERWRITTEN)

    @property
    def overwritten(self) -> int:
        return self.count(EntryAction.OVERWRITTEN)

    @property
    def skipped(self) -> int:
        return self.count(EntryAction.SKIPPED)

    @property
    def invalid(self) -> int:
        return self.count(EntryAction.INVALID)

    @property
    def failed(self) -> int:
        return self.count(EntryAction.FAILED)

    def to_dict(self) -> dict:
        return {
            "added": self.added,
            "overwritten": self.overwritten,
            "skipped": self.skipped,
            "invalid": self.invalid,
            "failed": self.failed,
        }
