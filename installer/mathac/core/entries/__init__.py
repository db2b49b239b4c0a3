from mathac.core.entries.registry import discover_tables, load_entries, parse_table

__all__ = ["discover_tables", "load_entries", "parse_table"]
