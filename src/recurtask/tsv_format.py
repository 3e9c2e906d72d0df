"""Tab-separated output for scheduled rows."""

from typing import Iterable

from .core.schedule import OutputRow


def format_row(row: OutputRow) -> str:
    """One tab-separated line, no trailing newline."""
    return "\t".join(row.fields())


def format_rows(rows: Iterable[OutputRow]) -> str:
    """All rows, one per line, each ending in a newline. No header."""
    return "".join(f"{format_row(r)}\n" for r in rows)
