"""Hashable identity for Python type descriptors."""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=False)
class TypeIdentity:
    """Registry key wrapping a type descriptor.

    Two identities are equal when their descriptors denote the same type:
    classes compare by identity, generic aliases structurally. The hash is
    the descriptor's own hash, never one derived from its name.
    """

    type: Any

    @property
    def hashable(self) -> bool:
        return isinstance(self.type, Hashable)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeIdentity):
            return NotImplemented
        if self.type is other.type:
            return True
        # Unhashable descriptors only ever match themselves
        if not (self.hashable and other.hashable):
            return False
        return bool(self.type == other.type)

    def __hash__(self) -> int:
        if not self.hashable:
            return id(self.type)
        return hash(self.type)

    def __repr__(self) -> str:
        return f"TypeIdentity({self.type!r})"
