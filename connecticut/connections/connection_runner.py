"""
Runs connection detection end to end for one batch of identifiers.

Resolves followers one identifier at a time in input order, then hands the
follower map to the connection engine. Any resolution failure aborts the
whole batch.
"""

import time
from typing import Dict, Optional, Set
import bittensor as bt

from connecticut.clients.follower_client import FollowerClient
from connecticut.utils.error_handling import (
    EmptyInput,
    ErrorMessages,
    ResolutionError,
    log_and_raise_validation_error
)
from .connection_engine import compute_connections, parse_identifier_input
from .run_state import RunResult, RunState, RunStatus


class ConnectionRunner:
    """
    Drives a run against a caller-owned RunState.

    The state moves IDLE -> RESOLVING when resolution starts and back to IDLE
    when it ends, whether it succeeded or failed.
    """

    def __init__(self, follower_client: Optional[FollowerClient] = None):
        """
        Initialize runner with optional custom follower client.

        Args:
            follower_client: Optional FollowerClient instance (typically for testing/mocking)
        """
        self.follower_client = follower_client or FollowerClient()

    def resolve_followers(self, identifiers, credential: Optional[str] = None) -> Dict[str, Set[str]]:
        """
        Resolve followers sequentially, waiting for each lookup before the next.

        Identifiers repeated in the list are resolved once.
        """
        follower_map: Dict[str, Set[str]] = {}
        for index, identifier in enumerate(identifiers, start=1):
            if identifier in follower_map:
                continue
            bt.logging.debug(f"Resolving followers {index}/{len(identifiers)}: @{identifier}")
            try:
                follower_map[identifier] = self.follower_client.resolve(identifier, credential)
            except ResolutionError:
                raise
            except Exception as e:
                raise ResolutionError(
                    f"Unexpected error resolving followers for @{identifier}: {e}",
                    identifier=identifier
                ) from e
        return follower_map

    def run(self, state: RunState, raw_identifiers: str, credential: Optional[str] = None) -> RunResult:
        """
        Compute connections for the identifiers in raw_identifiers.

        Args:
            state: RunState to update
            raw_identifiers: Multi-line text, one identifier per line
            credential: Token for the directory service

        Returns:
            RunResult for this run

        Raises:
            EmptyInput: No identifiers left after dropping blank lines
            ResolutionError: A follower lookup failed; no partial result is kept
        """
        identifiers = parse_identifier_input(raw_identifiers)
        if not identifiers:
            state.error = ErrorMessages.EMPTY_INPUT
            state.failed_identifier = None
            log_and_raise_validation_error(
                ErrorMessages.EMPTY_INPUT, data=raw_identifiers, error_class=EmptyInput
            )

        state.status = RunStatus.RESOLVING
        state.error = None
        state.failed_identifier = None
        start_time = time.time()
        bt.logging.info(f"Calculating connections for {len(identifiers)} usernames")

        try:
            follower_map = self.resolve_followers(identifiers, credential)
        except ResolutionError as e:
            state.error = str(e)
            state.failed_identifier = e.identifier
            bt.logging.error(
                f"Connection run aborted at @{e.identifier}: {e}"
                if e.identifier else f"Connection run aborted: {e}"
            )
            raise
        finally:
            state.status = RunStatus.IDLE

        previous = state.connections
        connections, new_count = compute_connections(identifiers, follower_map, previous)

        state.identifiers = identifiers
        state.previous_connections = previous
        state.connections = connections
        state.new_connection_count = new_count

        elapsed = time.time() - start_time
        bt.logging.info(
            f"Found {len(connections)} connections among {len(identifiers)} usernames "
            f"({new_count} new) in {elapsed:.1f}s"
        )

        return RunResult(
            identifiers=identifiers,
            connections=connections,
            new_connection_count=new_count
        )
