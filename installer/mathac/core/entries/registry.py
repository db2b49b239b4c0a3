import json
import logging
from pathlib import Path

from mathac.core.errors import EntryTableError
from mathac.core.models import ProposedEntry

logger = logging.getLogger(__name__)

BUILTIN_DIR = Path(__file__).parent / "builtin"
DEFAULT_TABLE_ID = "math_symbols"


def _read_table(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise EntryTableError(f"Entry table not found: {path}") from e
    except (OSError, ValueError) as e:
        raise EntryTableError(f"Failed to read entry table {path}: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("categories"), list):
        raise EntryTableError(f"Entry table {path} has no 'categories' list")
    return data


def _build_entry(row: dict, category: str) -> ProposedEntry | None:
    """Build one entry from a table row, or None if the row is malformed."""
    if not isinstance(row, dict):
        return None
    name = row.get("name")
    symbol = row.get("symbol", "")
    reference = row.get("reference") or ""
    if not isinstance(name, str) or not isinstance(symbol, str) or not isinstance(reference, str):
        return None
    return ProposedEntry(
        name=name.strip(),
        symbol=symbol.strip(),
        reference=reference.strip(),
        category=category,
    )


def parse_table(data: dict, source: str = "<table>") -> list[ProposedEntry]:
    """Flatten a ``{"categories": [{"name", "entries": [...]}]}`` table."""
    entries: list[ProposedEntry] = []
    for category in data.get("categories", []):
        if not isinstance(category, dict):
            logger.warning("Ignoring malformed category in %s: %r", source, category)
            continue
        category_name = str(category.get("name") or "Missing")
        for row in category.get("entries") or []:
            entry = _build_entry(row, category_name)
            if entry is None:
                logger.warning("Ignoring malformed entry in %s (%s): %r", source, category_name, row)
                continue
            entries.append(entry)
    return entries


def discover_tables() -> list[str]:
    """Return the ids of the packaged entry tables."""
    if not BUILTIN_DIR.exists():
        return []
    return sorted(p.stem for p in BUILTIN_DIR.glob("*.json"))


def get_table_path(table_id: str = DEFAULT_TABLE_ID) -> Path:
    path = BUILTIN_DIR / f"{table_id}.json"
    if not path.exists():
        raise EntryTableError(f"Unknown entry table: {table_id}")
    return path


def load_entries(path: Path | None = None, table_id: str = DEFAULT_TABLE_ID) -> list[ProposedEntry]:
    """Load the proposed entries.

    ``path`` points at an alternative table file; otherwise the packaged
    table ``table_id`` is used.
    """
    table_path = path or get_table_path(table_id)
    entries = parse_table(_read_table(table_path), source=str(table_path))
    logger.debug("Loaded %d proposed entries from %s", len(entries), table_path)
    return entries
