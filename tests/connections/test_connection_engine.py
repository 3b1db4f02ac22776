"""Tests for connection detection and new-connection counting."""

import copy
import itertools

import pytest

from connecticut.connections.connection_engine import (
    Connection,
    compute_connections,
    count_new_connections,
    detect_connections,
    format_connection_key,
    parse_identifier_input
)


def keys(connections):
    return {c.key for c in connections}


class TestParseIdentifierInput:
    """Test turning raw text into the input list."""

    def test_strips_whitespace_and_drops_blank_lines(self):
        raw = "  alice \n\n bob\n   \n\tcarol\t\n"
        assert parse_identifier_input(raw) == ["alice", "bob", "carol"]

    def test_handles_windows_line_endings(self):
        assert parse_identifier_input("alice\r\nbob\r\n") == ["alice", "bob"]

    def test_keeps_duplicates_and_order(self):
        assert parse_identifier_input("bob\nalice\nbob") == ["bob", "alice", "bob"]

    def test_empty_and_none(self):
        assert parse_identifier_input("") == []
        assert parse_identifier_input(None) == []
        assert parse_identifier_input("\n  \n\t\n") == []

    def test_case_is_preserved(self):
        assert parse_identifier_input("Alice\nalice") == ["Alice", "alice"]


class TestDetectConnections:
    """Test connection detection."""

    def test_alice_bob_carol_scenario(self, follower_map):
        result = detect_connections(["alice", "bob", "carol"], follower_map)
        assert keys(result) == {"alice-bob", "bob-alice", "bob-carol"}

    def test_empty_follower_sets(self):
        result = detect_connections(["alice", "bob"], {"alice": [], "bob": []})
        assert result == []

    def test_missing_follower_entry_means_no_followers(self):
        result = detect_connections(["alice", "bob"], {"alice": ["bob"]})
        assert result == [Connection("alice", "bob")]

    def test_followers_outside_list_are_ignored(self):
        result = detect_connections(["alice", "bob"], {"alice": ["mallory", "bob"], "bob": ["eve"]})
        assert keys(result) == {"alice-bob"}

    def test_sources_outside_list_are_ignored(self):
        result = detect_connections(["alice", "bob"], {"mallory": ["alice", "bob"]})
        assert result == []

    def test_direction_is_source_then_follower(self):
        result = detect_connections(["alice", "bob"], {"alice": ["bob"]})
        assert result == [Connection(source="alice", follower="bob")]
        assert Connection("bob", "alice") not in result

    def test_duplicates_collapse(self):
        result = detect_connections(
            ["alice", "bob", "alice"],
            {"alice": ["bob", "bob"], "bob": []}
        )
        assert result == [Connection("alice", "bob")]

    def test_order_is_input_then_discovery(self):
        result = detect_connections(
            ["carol", "alice", "bob"],
            {"alice": ["carol", "bob"], "carol": ["bob"], "bob": []}
        )
        assert [c.key for c in result] == ["carol-bob", "alice-carol", "alice-bob"]

    def test_idempotent(self, follower_map):
        identifiers = ["alice", "bob", "carol"]
        assert detect_connections(identifiers, follower_map) == detect_connections(identifiers, follower_map)

    def test_does_not_mutate_inputs(self, follower_map):
        identifiers = ["alice", "bob", "carol"]
        identifiers_before = list(identifiers)
        map_before = copy.deepcopy(follower_map)
        detect_connections(identifiers, follower_map)
        assert identifiers == identifiers_before
        assert follower_map == map_before

    def test_accepts_sets_as_follower_collections(self):
        result = detect_connections(["alice", "bob"], {"alice": {"bob"}, "bob": {"alice"}})
        assert keys(result) == {"alice-bob", "bob-alice"}

    def test_membership_property(self):
        """(a, b) is present iff b follows a and both are in the list."""
        identifiers = ["a", "b", "c", "d"]
        follower_map = {
            "a": ["b", "x"],
            "b": ["a", "c", "d"],
            "c": [],
            "d": ["d", "a"],
            "x": ["a"]
        }
        result = set(detect_connections(identifiers, follower_map))
        for source, follower in itertools.product(identifiers + ["x"], repeat=2):
            expected = (
                source in identifiers
                and follower in identifiers
                and follower in follower_map.get(source, [])
            )
            assert (Connection(source, follower) in result) == expected


class TestCountNewConnections:
    """Test the delta count against a previous run."""

    def test_absent_previous_is_zero(self):
        assert count_new_connections(None, [Connection("alice", "bob")]) == 0

    def test_absent_current_is_zero(self):
        assert count_new_connections([Connection("alice", "bob")], None) == 0

    def test_same_set_is_zero(self):
        current = [Connection("alice", "bob"), Connection("bob", "carol")]
        assert count_new_connections(current, list(current)) == 0

    def test_one_new_connection(self):
        previous = [Connection("alice", "bob")]
        current = [Connection("alice", "bob"), Connection("bob", "carol")]
        assert count_new_connections(previous, current) == 1

    def test_empty_previous_counts_everything(self):
        current = [Connection("alice", "bob"), Connection("bob", "carol")]
        assert count_new_connections([], current) == 2

    def test_removed_connections_do_not_count(self):
        previous = [Connection("alice", "bob"), Connection("bob", "alice")]
        current = [Connection("bob", "carol")]
        assert count_new_connections(previous, current) == 1

    @pytest.mark.parametrize("previous,current", [
        ([], []),
        ([("a", "b")], [("a", "b"), ("b", "a")]),
        ([("a", "b"), ("c", "d")], [("c", "d")]),
        ([("a", "b")], [("b", "c"), ("c", "d"), ("d", "e")]),
    ])
    def test_equals_set_difference_size(self, previous, current):
        previous = [Connection(*p) for p in previous]
        current = [Connection(*c) for c in current]
        assert count_new_connections(previous, current) == len(set(current) - set(previous))

    def test_does_not_mutate_inputs(self):
        previous = [Connection("alice", "bob")]
        current = [Connection("alice", "bob"), Connection("bob", "carol")]
        count_new_connections(previous, current)
        assert previous == [Connection("alice", "bob")]
        assert current == [Connection("alice", "bob"), Connection("bob", "carol")]


class TestComputeConnections:
    """Test the combined detect + delta step."""

    def test_without_previous(self, follower_map):
        connections, new_count = compute_connections(["alice", "bob", "carol"], follower_map)
        assert keys(connections) == {"alice-bob", "bob-alice", "bob-carol"}
        assert new_count == 0

    def test_with_previous(self, follower_map):
        previous = [Connection("alice", "bob")]
        connections, new_count = compute_connections(["alice", "bob", "carol"], follower_map, previous)
        assert len(connections) == 3
        assert new_count == 2


def test_format_connection_key():
    assert format_connection_key("alice", "bob") == "alice-bob"
    assert Connection("alice", "bob").key == "alice-bob"


def test_hyphenated_identifiers_keep_their_fields():
    connection = Connection("octo-cat", "hub-ot")
    assert connection.key == "octo-cat-hub-ot"
    assert connection.source == "octo-cat"
    assert connection.follower == "hub-ot"
