"""Tests for configuration and mutation tracing."""

import hashlib
import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodetree import (
    BinaryTree,
    ChildLookup,
    HashAlgorithm,
    NaryTree,
    NodeFullError,
    Payload,
    TreeConfig,
    get_default_config,
    set_default_config,
)
from nodetree.testing import binary_node


@pytest.fixture
def restore_default_config():
    previous = get_default_config()
    yield
    set_default_config(previous)


class TestTreeConfig:

    def test_defaults(self):
        config = TreeConfig()
        assert config.hash_algorithm is HashAlgorithm.MD5
        assert config.child_lookup is ChildLookup.BOTH_SLOTS
        assert config.trace is False
        assert config.validate() == []

    def test_legacy(self):
        config = TreeConfig.legacy()
        assert config.child_lookup is ChildLookup.LEFT_ONLY
        assert config.hash_algorithm is HashAlgorithm.MD5

    def test_traced(self):
        config = TreeConfig.traced(child_lookup=ChildLookup.LEFT_ONLY)
        assert config.trace is True
        assert config.child_lookup is ChildLookup.LEFT_ONLY

    def test_with_options_copies(self):
        base = TreeConfig()
        changed = base.with_options(hash_algorithm=HashAlgorithm.SHA256)
        assert changed.hash_algorithm is HashAlgorithm.SHA256
        assert base.hash_algorithm is HashAlgorithm.MD5

    def test_validate_reports_errors(self):
        config = TreeConfig(hash_algorithm="md5", child_lookup="both", trace="yes")
        errors = config.validate()
        assert len(errors) == 3

    @pytest.mark.parametrize("text,expected", [
        ("both", ChildLookup.BOTH_SLOTS),
        ("BOTH_SLOTS", ChildLookup.BOTH_SLOTS),
        ("left-only", ChildLookup.LEFT_ONLY),
        (ChildLookup.LEFT_ONLY, ChildLookup.LEFT_ONLY),
    ])
    def test_parse_lookup(self, text, expected):
        assert TreeConfig.parse_lookup(text) is expected

    def test_parse_lookup_unknown(self):
        with pytest.raises(ValueError):
            TreeConfig.parse_lookup("sideways")


class TestHashAlgorithm:

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_digest_matches_hashlib(self, algorithm):
        expected = hashlib.new(algorithm.value, b"payload").hexdigest()
        assert algorithm.digest("payload") == expected

    def test_none_hashes_as_empty_string(self):
        assert HashAlgorithm.MD5.digest(None) == hashlib.md5(b"").hexdigest()

    def test_node_uses_configured_algorithm(self):
        config = TreeConfig(hash_algorithm=HashAlgorithm.SHA256)
        node = NaryTree(Payload("x"), config=config)
        assert node.get_value().get_id() == hashlib.sha256(b"x").hexdigest()


class TestDefaultConfig:

    def test_set_default_returns_previous(self, restore_default_config):
        original = get_default_config()
        legacy = TreeConfig.legacy()

        assert set_default_config(legacy) is original
        assert get_default_config() is legacy

    def test_nodes_capture_default_at_construction(self, restore_default_config):
        before = BinaryTree()
        set_default_config(TreeConfig.legacy())
        after = BinaryTree()

        assert before.config.child_lookup is ChildLookup.BOTH_SLOTS
        assert after.config.child_lookup is ChildLookup.LEFT_ONLY

    def test_none_restores_builtin_defaults(self, restore_default_config):
        set_default_config(TreeConfig.legacy())
        set_default_config(None)
        assert get_default_config() == TreeConfig()

    def test_invalid_default_rejected(self, restore_default_config):
        original = get_default_config()
        with pytest.raises(ValueError):
            set_default_config(TreeConfig(trace="yes"))
        assert get_default_config() is original


class TestTracing:

    def test_mutations_logged_when_traced(self, caplog):
        caplog.set_level(logging.DEBUG, logger="nodetree")
        root = binary_node("root", config=TreeConfig.traced())

        root.insert_left(binary_node("a"))
        root.delete_left()

        messages = [record.getMessage() for record in caplog.records]
        assert any("slot 0 set" in message for message in messages)
        assert any("slot 0 cleared" in message for message in messages)

    def test_refusal_logged_before_raising(self, caplog):
        caplog.set_level(logging.DEBUG, logger="nodetree")
        root = binary_node("root", config=TreeConfig.traced())
        root.insert(binary_node("a")).insert(binary_node("b"))

        with pytest.raises(NodeFullError):
            root.insert(binary_node("c"))

        assert "insert refused, node is full" in caplog.text

    def test_silent_without_trace(self, caplog):
        caplog.set_level(logging.DEBUG, logger="nodetree")
        root = binary_node("root")
        root.insert(binary_node("a"))
        root.set_value("other")
        assert caplog.records == []
