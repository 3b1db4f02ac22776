"""
Text renderings of a connection set: JSON export and a plain table.
"""

import json
from typing import List

from .connection_engine import Connection

TABLE_HEADER = "Connection"


def connections_to_json(connections: List[Connection]) -> str:
    """Serialize connections as a JSON array of pair keys (2-space indent)."""
    return json.dumps([c.key for c in connections], indent=2)


def render_connections_table(connections: List[Connection]) -> str:
    """
    Render connections as a single-column text table.

    Example:
        +------------+
        | Connection |
        +------------+
        | alice-bob  |
        +------------+
    """
    rows = [c.key for c in connections]
    width = max([len(TABLE_HEADER)] + [len(r) for r in rows])
    border = f"+{'-' * (width + 2)}+"

    lines = [border, f"| {TABLE_HEADER.ljust(width)} |", border]
    lines.extend(f"| {row.ljust(width)} |" for row in rows)
    if rows:
        lines.append(border)
    return "\n".join(lines)
