"""
Caller-owned state for connection runs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .connection_engine import Connection


class RunStatus(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"


@dataclass
class RunState:
    """
    Everything a caller keeps between runs.

    connections holds the latest successful result and previous_connections
    the one before it; a failed run leaves both untouched.
    """
    status: RunStatus = RunStatus.IDLE
    identifiers: List[str] = field(default_factory=list)
    connections: Optional[List[Connection]] = None
    previous_connections: Optional[List[Connection]] = None
    new_connection_count: int = 0
    error: Optional[str] = None
    failed_identifier: Optional[str] = None

    @property
    def is_resolving(self) -> bool:
        return self.status == RunStatus.RESOLVING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "resolving": self.is_resolving,
            "identifiers": list(self.identifiers),
            "connections": None if self.connections is None else [c.key for c in self.connections],
            "previous_connection_count": (
                None if self.previous_connections is None else len(self.previous_connections)
            ),
            "new_connections": self.new_connection_count,
            "error": self.error,
            "failed_identifier": self.failed_identifier
        }


@dataclass
class RunResult:
    """Outcome of one successful run."""
    identifiers: List[str]
    connections: List[Connection]
    new_connection_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifiers": list(self.identifiers),
            "connections": [c.key for c in self.connections],
            "new_connections": self.new_connection_count
        }
