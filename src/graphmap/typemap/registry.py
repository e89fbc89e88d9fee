"""
Type registry mapping Python types to GraphQL types.
"""

import threading
from typing import Any

from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLInt,
    GraphQLString,
    GraphQLType,
    is_type,
)

from graphmap.config import settings
from graphmap.logging import get_logger

from .errors import LinkError
from .identity import TypeIdentity
from .names import display_name
from .references import is_nullable_capable
from .wrappers import NONE_TYPE, strip_annotated

logger = get_logger(__name__)

PRIMITIVE_TYPES: dict[type, GraphQLType] = {
    int: GraphQLInt,
    float: GraphQLFloat,
    str: GraphQLString,
    bool: GraphQLBoolean,
}


def is_void(type_: Any) -> bool:
    """Check whether ``type_`` is the "no type" placeholder."""
    return type_ is None or type_ is NONE_TYPE


class TypeRegistry:
    """
    Mapping from Python types to the GraphQL types that represent them.

    A new registry is seeded with the primitive scalars. Entries are added or
    overwritten with ``link`` and never removed. Lookups and links may run
    from different threads.
    """

    def __init__(self, strict: bool | None = None):
        self._types: dict[TypeIdentity, GraphQLType] = {
            TypeIdentity(type_): graphql_type for type_, graphql_type in PRIMITIVE_TYPES.items()
        }
        self._lock = threading.Lock()
        self.strict = settings.strict_links if strict is None else strict

    def link(self, type_: Any, graphql_type: GraphQLType) -> None:
        """
        Register ``graphql_type`` as the representation of ``type_``.

        Linking an already registered type overwrites the previous entry.
        Linking the ``None`` placeholder is a no-op.

        Args:
            type_: Python type to register
            graphql_type: GraphQL type representing it

        Raises:
            TypeError: If ``graphql_type`` is not a GraphQL type
            LinkError: In strict mode, if ``graphql_type`` cannot be wrapped
                in ``GraphQLNonNull`` (i.e. it already is one)
        """
        if is_void(type_):
            return

        if not is_type(graphql_type):
            raise TypeError(
                f"Cannot link {display_name(type_)!r} to non-GraphQL type {graphql_type!r}"
            )

        if not is_nullable_capable(graphql_type):
            msg = (
                f"Cannot link {display_name(type_)!r} to {graphql_type}: "
                "linked GraphQL types must be nullable; nullability is derived from the annotation"
            )
            if self.strict:
                raise LinkError(msg)
            logger.warning(msg, type_name=display_name(type_), graphql_type=str(graphql_type))

        type_ = strip_annotated(type_)
        with self._lock:
            replaced = self._types.get(TypeIdentity(type_))
            self._types[TypeIdentity(type_)] = graphql_type

        logger.debug(
            "Linked type",
            type_name=display_name(type_),
            graphql_type=str(graphql_type),
            replaced=str(replaced) if replaced is not None else None,
        )

    def lookup(self, type_: Any) -> GraphQLType | None:
        """
        Get the GraphQL type linked to ``type_``.

        Returns:
            The linked GraphQL type or None if ``type_`` is not registered
        """
        with self._lock:
            return self._types.get(TypeIdentity(type_))

    def types(self) -> list[Any]:
        """List all registered Python types."""
        with self._lock:
            return [identity.type for identity in self._types]

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)

    def __contains__(self, type_: Any) -> bool:
        with self._lock:
            return TypeIdentity(type_) in self._types


# Process-wide registry shared by the module level accessors
type_registry = TypeRegistry()


def link(type_: Any, graphql_type: GraphQLType) -> None:
    """Link ``type_`` to ``graphql_type`` in the process-wide registry."""
    type_registry.link(type_, graphql_type)
