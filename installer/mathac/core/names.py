"""Shorthand name handling.

Math AutoCorrect names are written with a leading backslash (``\\alpha``).
The snapshot of existing entries is keyed without it; names sent to Word
carry exactly one.
"""

ESCAPE_MARKER = "\\"
QUOTE_MARKER = "`"


def normalize_name(name: str) -> str:
    """Return ``name`` with exactly one leading escape marker."""
    return ESCAPE_MARKER + name.lstrip(ESCAPE_MARKER)


def strip_marker(name: str) -> str:
    """Drop leading escape markers (``\\infty`` -> ``infty``)."""
    return name.lstrip(ESCAPE_MARKER)


def reference_key(reference: str) -> str:
    """Snapshot key for an entry reference.

    References may be wrapped in back-ticks as quoted literals; both the
    escape marker and the back-ticks are removed. Negated forms such as
    ``/\\le`` do not start with the marker and are looked up as written.
    """
    return strip_marker(strip_marker(reference).strip(QUOTE_MARKER))


def snapshot_key(name: str) -> str:
    """Key under which an entry read from Word is stored in the snapshot."""
    if name.startswith(ESCAPE_MARKER):
        return name[len(ESCAPE_MARKER):]
    return name
