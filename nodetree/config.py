"""Configuration system for NodeTree.

This module defines the knobs that change how nodes build their values and
resolve children: which digest derives identifiers from raw payloads, how a
binary node searches its slots, and whether mutations are traced to the log.
"""

import hashlib
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Union


class HashAlgorithm(Enum):
    """Digest used to derive an identifier from a raw payload."""
    MD5 = "md5"         # Historical default
    SHA1 = "sha1"
    SHA256 = "sha256"

    def digest(self, payload: object) -> str:
        """Return the hex digest of a payload's string form.

        ``None`` hashes as the empty string.
        """
        text = "" if payload is None else str(payload)
        return hashlib.new(self.value, text.encode("utf-8")).hexdigest()


class ChildLookup(Enum):
    """How a binary node resolves a child by value identifier.

    BOTH_SLOTS compares the left child, then the right child.
    LEFT_ONLY keeps the legacy behavior where the second comparison
    re-checks the left child, so a match held only on the right is
    never found.
    """
    BOTH_SLOTS = "both"
    LEFT_ONLY = "left_only"


@dataclass
class TreeConfig:
    """Complete configuration for a node.

    Nodes capture the configuration they were built with; changing the
    module default afterwards does not affect existing nodes.
    """

    # Identifier derivation for raw payloads
    hash_algorithm: HashAlgorithm = HashAlgorithm.MD5

    # Binary child resolution
    child_lookup: ChildLookup = ChildLookup.BOTH_SLOTS

    # Emit DEBUG records for every mutation
    trace: bool = False

    @classmethod
    def legacy(cls) -> 'TreeConfig':
        """Create a config reproducing the historical lookup behavior.

        Returns:
            TreeConfig with LEFT_ONLY lookup and MD5 identifiers
        """
        return cls(
            hash_algorithm=HashAlgorithm.MD5,
            child_lookup=ChildLookup.LEFT_ONLY,
        )

    @classmethod
    def traced(cls, **kwargs) -> 'TreeConfig':
        """Create a config that logs every mutation at DEBUG level."""
        return cls(trace=True, **kwargs)

    @staticmethod
    def parse_lookup(lookup: Union[ChildLookup, str]) -> ChildLookup:
        """Coerce a string such as ``"both"`` or ``"left_only"`` to ChildLookup.

        Raises:
            ValueError: If the string names no lookup mode
        """
        if isinstance(lookup, ChildLookup):
            return lookup
        key = lookup.strip().lower().replace("-", "_")
        for member in ChildLookup:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown child lookup: {lookup!r}")

    def with_options(self, **changes) -> 'TreeConfig':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.hash_algorithm, HashAlgorithm):
            errors.append("hash_algorithm must be a HashAlgorithm")

        if not isinstance(self.child_lookup, ChildLookup):
            errors.append("child_lookup must be a ChildLookup")

        if not isinstance(self.trace, bool):
            errors.append("trace must be a bool")

        return errors


_default_config = TreeConfig()


def get_default_config() -> TreeConfig:
    """Return the configuration used by nodes built without ``config=``."""
    return _default_config


def set_default_config(config: Optional[TreeConfig]) -> TreeConfig:
    """Replace the module default configuration.

    Args:
        config: New default, or None to restore the built-in defaults

    Returns:
        The previous default configuration

    Raises:
        ValueError: If the configuration does not validate
    """
    global _default_config

    if config is None:
        config = TreeConfig()

    errors = config.validate()
    if errors:
        raise ValueError("Invalid tree configuration: " + "; ".join(errors))

    old = _default_config
    _default_config = config
    return old
