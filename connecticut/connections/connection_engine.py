"""
Connection detection over a list of identifiers and their followers.

A connection (a, b) is recorded when b follows a and both are in the input
list. All functions here are pure: no network, no state, inputs untouched.
"""

from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple


class Connection(NamedTuple):
    """A (source, follower) pair where follower follows source."""

    source: str
    follower: str

    @property
    def key(self) -> str:
        return format_connection_key(self.source, self.follower)


def format_connection_key(source: str, follower: str) -> str:
    """Format a connection as the pair key shown in tables and exports."""
    return f"{source}-{follower}"


def parse_identifier_input(raw: Optional[str]) -> List[str]:
    """
    Turn raw multi-line text into the input list.

    Each line is stripped and blank lines are dropped. Duplicates are kept.

    Args:
        raw: Text with one identifier per line

    Returns:
        Identifiers in input order
    """
    if not raw:
        return []
    return [line.strip() for line in raw.split("\n") if line.strip()]


def detect_connections(
    identifiers: List[str],
    follower_map: Mapping[str, Iterable[str]]
) -> List[Connection]:
    """
    Find every (a, b) with a and b in identifiers and b a follower of a.

    Args:
        identifiers: Input list (duplicates allowed)
        follower_map: Followers per identifier; a missing entry means none

    Returns:
        Unique connections ordered by source input order, then follower order
    """
    members = set(identifiers)
    found: Dict[Connection, None] = {}

    for source in identifiers:
        for follower in follower_map.get(source, ()):
            if follower in members:
                found.setdefault(Connection(source, follower), None)

    return list(found)


def count_new_connections(
    previous: Optional[Iterable[Connection]],
    current: Optional[Iterable[Connection]]
) -> int:
    """
    Count connections in current that were not in previous.

    Returns 0 when either side is absent (no earlier run to compare with).
    """
    if previous is None or current is None:
        return 0
    return len(set(current) - set(previous))


def compute_connections(
    identifiers: List[str],
    follower_map: Mapping[str, Iterable[str]],
    previous: Optional[Iterable[Connection]] = None
) -> Tuple[List[Connection], int]:
    """Detect connections and count how many are new against previous."""
    connections = detect_connections(identifiers, follower_map)
    return connections, count_new_connections(previous, connections)
