"""
Connection detection between the accounts of one input list.

Resolves followers for every identifier, records which pairs inside the list
follow each other and counts how many of them are new since the last run.
"""

from .connection_engine import (
    Connection,
    compute_connections,
    count_new_connections,
    detect_connections,
    format_connection_key,
    parse_identifier_input
)
from .run_state import RunResult, RunState, RunStatus
from .connection_runner import ConnectionRunner
from .connection_export import connections_to_json, render_connections_table
from .connection_graph import (
    build_connection_graph,
    connection_graph_to_dict,
    layout_connection_graph
)

__all__ = [
    'Connection',
    'compute_connections',
    'count_new_connections',
    'detect_connections',
    'format_connection_key',
    'parse_identifier_input',
    'RunResult',
    'RunState',
    'RunStatus',
    'ConnectionRunner',
    'connections_to_json',
    'render_connections_table',
    'build_connection_graph',
    'connection_graph_to_dict',
    'layout_connection_graph'
]
