from unittest.mock import patch

from mathac.core.host.memory import InMemoryStore
from mathac.core.models import Mode, ProposedEntry, ReconcileResult, EntryOutcome, EntryAction
from mathac.services.install_service import install_entries, start_message, summary_message


def _result(added: int = 0, skipped: int = 0) -> ReconcileResult:
    result = ReconcileResult()
    for i in range(added):
        result.record(EntryOutcome(name=f"\\a{i}", action=EntryAction.ADDED))
    for i in range(skipped):
        result.record(EntryOutcome(name=f"\\s{i}", action=EntryAction.SKIPPED))
    return result


def test_summary_message_per_mode():
    result = _result(added=3, skipped=2)
    assert summary_message(Mode.SKIP, result) == (
        "Successfully added 3 new Math AutoCorrect entries (skipped 2 existing entries)."
    )
    assert summary_message(Mode.INTERACTIVE, result) == (
        "Successfully added 3 Math AutoCorrect entries in interactive mode."
    )
    assert summary_message(Mode.FORCE, result) == (
        "Successfully added/updated 3 Math AutoCorrect entries (force mode)."
    )


def test_start_message_mentions_mode():
    assert "skipping existing entries" in start_message(Mode.SKIP)
    assert "interactive mode" in start_message(Mode.INTERACTIVE)
    assert "force overwrite mode" in start_message(Mode.FORCE)


def test_install_entries_uses_given_entries():
    store = InMemoryStore({"\\infty": "∞", "\\union": "∪"})
    entries = [
        ProposedEntry("infinity", "∞", "\\infty"),
        ProposedEntry("union", "∪", "\\cup"),
    ]

    result = install_entries(store, Mode.SKIP, entries=entries)

    assert result.added == 1
    assert result.skipped == 1
    assert store.as_dict()["\\infinity"] == "∞"


def test_install_entries_defaults_to_packaged_table():
    store = InMemoryStore()
    with patch("mathac.services.install_service.settings") as mock_settings:
        mock_settings.entries_path = None
        result = install_entries(store, Mode.FORCE)

    assert result.added > 90
    assert store.as_dict()["\\rad"] == "㎭"
    # No references resolve on an empty Word table, so every symbol is used as-is
    assert store.as_dict()["\\infinity"] == "∞"
