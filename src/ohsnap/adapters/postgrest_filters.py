"""Helpers for building PostgREST filter values."""


def contains_pattern(term: str) -> str:
    """Build an ILIKE pattern matching the literal term anywhere."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def quoted(value: str) -> str:
    """Quote a value for use inside an ``or`` logic filter."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
