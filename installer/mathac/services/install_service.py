import logging
from collections.abc import Sequence

from mathac.config import settings
from mathac.core.entries import load_entries
from mathac.core.host.base import AutoCorrectStore
from mathac.core.models import Mode, ProposedEntry, ReconcileResult
from mathac.core.reconciler import Confirm, reconcile, snapshot_entries

logger = logging.getLogger(__name__)

_START_MESSAGES = {
    Mode.SKIP: "Adding new Math AutoCorrect entries (skipping existing entries)...",
    Mode.INTERACTIVE: (
        "Adding Math AutoCorrect entries "
        "(interactive mode - will prompt before overwriting existing entries)..."
    ),
    Mode.FORCE: "Adding and updating Math AutoCorrect entries (force overwrite mode)...",
}


def start_message(mode: Mode) -> str:
    return _START_MESSAGES[mode]


def summary_message(mode: Mode, result: ReconcileResult) -> str:
    if mode is Mode.INTERACTIVE:
        return f"Successfully added {result.added} Math AutoCorrect entries in interactive mode."
    if mode is Mode.FORCE:
        return f"Successfully added/updated {result.added} Math AutoCorrect entries (force mode)."
    return (
        f"Successfully added {result.added} new Math AutoCorrect entries "
        f"(skipped {result.skipped} existing entries)."
    )


def install_entries(
    store: AutoCorrectStore,
    mode: Mode = Mode.SKIP,
    confirm: Confirm | None = None,
    entries: Sequence[ProposedEntry] | None = None,
) -> ReconcileResult:
    """Snapshot ``store``, then reconcile the proposed table against it.

    ``entries`` defaults to the configured table (``MATHAC_ENTRIES_FILE``)
    or the packaged one.
    """
    logger.info("Retrieving existing Math AutoCorrect entries...")
    snapshot = snapshot_entries(store)
    logger.info("Found %d existing Math AutoCorrect entries.", len(snapshot))

    if entries is None:
        entries = load_entries(settings.entries_path)
    logger.info("Found %d Math AutoCorrect entries to process.", len(entries))

    result = reconcile(store, entries, mode=mode, confirm=confirm, snapshot=snapshot)
    if result.invalid or result.failed:
        logger.warning(
            "%d entries failed validation, %d entries could not be added",
            result.invalid, result.failed,
        )
    logger.debug("Run totals: %s", result.to_dict())
    return result
