"""Reconcile proposed Math AutoCorrect entries against the host table.

For every proposed entry the reconciler resolves the value to install,
decides between add, skip and overwrite according to the run's ``Mode`` and
applies the decision to the store. Failures are isolated per entry: one bad
entry is logged and recorded, and the run moves on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping

from mathac.core.host.base import AutoCorrectStore
from mathac.core.models import EntryAction, EntryOutcome, Mode, ProposedEntry, ReconcileResult
from mathac.core.names import normalize_name, reference_key, snapshot_key, strip_marker

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


def snapshot_entries(store: AutoCorrectStore) -> dict[str, str]:
    """Read the host table once, keyed by name without the backslash."""
    return {snapshot_key(name): value for name, value in store.entries()}


def resolve_value(entry: ProposedEntry, snapshot: Mapping[str, str]) -> tuple[str, str | None]:
    """Return ``(value, detail)`` for ``entry``.

    ``detail`` is set when a reference could not be resolved and the raw
    symbol was used instead.
    """
    if not entry.reference:
        return entry.symbol, None

    key = reference_key(entry.reference)
    if key in snapshot:
        logger.info("Using value from existing entry '%s' for '%s'", key, entry.name)
        return snapshot[key], None

    logger.warning("Referenced existing entry '%s' not found for '%s'", key, entry.name)
    return entry.symbol, f"reference '{key}' not found, used symbol"


def should_overwrite(
    name: str,
    existing: str,
    value: str,
    mode: Mode,
    confirm: Confirm | None,
) -> bool:
    """Conflict policy for a name that is already defined."""
    if mode is Mode.FORCE:
        logger.info("Overwriting existing entry: %s", name)
        return True

    if mode is Mode.INTERACTIVE:
        if existing == value:
            logger.info("Entry '%s' already exists with the same value. Skipping.", name)
            return False
        if confirm is None:
            raise ValueError("interactive mode requires a confirm callback")
        if confirm(f"Entry '{name}' already exists with a different value ({existing} -> {value})."):
            return True
        logger.info("Skipping entry: %s", name)
        return False

    logger.info("Skipping existing entry: %s", name)
    return False


def _is_valid(name: str, value: str | None) -> bool:
    return len(name) > 1 and bool(value)


def apply_entry(
    store: AutoCorrectStore,
    entry: ProposedEntry,
    snapshot: Mapping[str, str],
    mode: Mode,
    confirm: Confirm | None = None,
) -> EntryOutcome:
    """Decide and apply a single entry. Never raises for host errors."""
    try:
        value, detail = resolve_value(entry, snapshot)
        name = normalize_name(entry.name)

        key = strip_marker(entry.name)
        exists = key in snapshot
        if exists and not should_overwrite(entry.name, snapshot[key], value, mode, confirm):
            return EntryOutcome(name=name, action=EntryAction.SKIPPED, value=value, detail=detail)

        if not _is_valid(name, value):
            logger.error("Skipping %s: name or value doesn't meet length requirements", name)
            return EntryOutcome(
                name=name,
                action=EntryAction.INVALID,
                value=value,
                detail="name or value doesn't meet length requirements",
            )

        if exists:
            try:
                store.delete(name)
            except Exception as e:
                logger.error("Error removing existing entry %s: %s", name, e)

        store.add(name, value)
        logger.info("Added: %s", name)
        action = EntryAction.OVERWRITTEN if exists else EntryAction.ADDED
        return EntryOutcome(name=name, action=action, value=value, detail=detail)
    except Exception as e:
        logger.error("Failed to add %s: %s", entry.name, e)
        return EntryOutcome(name=entry.name, action=EntryAction.FAILED, detail=str(e))


def reconcile(
    store: AutoCorrectStore,
    proposed: Iterable[ProposedEntry],
    mode: Mode = Mode.SKIP,
    confirm: Confirm | None = None,
    snapshot: Mapping[str, str] | None = None,
) -> ReconcileResult:
    """Apply ``proposed`` to ``store`` and return the per-entry outcomes.

    ``snapshot`` defaults to the store's current contents. It is not
    refreshed while the run progresses, so references resolve against what
    Word had before the run started.
    """
    if mode is Mode.INTERACTIVE and confirm is None:
        raise ValueError("interactive mode requires a confirm callback")
    if snapshot is None:
        snapshot = snapshot_entries(store)

    result = ReconcileResult()
    for entry in proposed:
        result.record(apply_entry(store, entry, snapshot, mode, confirm))
    return result
