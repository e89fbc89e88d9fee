"""
Deferred named references to GraphQL types.

A ``TypeReference`` stands in for a named type that is declared elsewhere in
the schema (typically a recursive or not-yet-built object type). The schema
builder swaps references for the real types once every named type exists.
"""

from collections.abc import Mapping
from typing import Any

from graphql import (
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLType,
    get_named_type,
    is_input_type,
    is_list_type,
    is_non_null_type,
    is_nullable_type,
    is_output_type,
)

from .errors import UnresolvedReferenceError


class TypeReference(GraphQLNamedType):
    """Named type resolved lazily by name at schema assembly time.

    The name is not validated here: it is checked when the reference is
    replaced by the type it names.
    """

    def __new__(cls, name: str, *_args: Any, **_kwargs: Any) -> "TypeReference":
        # References may point at reserved names such as "String"
        return GraphQLType.__new__(cls)

    def __init__(self, name: str) -> None:
        self.name = name
        self.description = None
        self.extensions = {}
        self.ast_node = None
        self.extension_ast_nodes = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeReference):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((TypeReference, self.name))

    def __reduce__(self):
        return TypeReference, (self.name,)


def is_type_reference(type_: Any) -> bool:
    return isinstance(type_, TypeReference)


def is_nullable_capable(type_: Any) -> bool:
    """Check whether a GraphQL type may be wrapped in ``GraphQLNonNull``."""
    return is_nullable_type(type_) or is_type_reference(type_)


def is_output_or_reference(type_: Any) -> bool:
    """Output check that treats deferred references as valid output types."""
    return is_output_type(type_) or is_type_reference(get_named_type(type_))


def is_input_or_reference(type_: Any) -> bool:
    """Input check that treats deferred references as valid input types."""
    return is_input_type(type_) or is_type_reference(get_named_type(type_))


def replace_type_references(
    type_: GraphQLType, types: Mapping[str, GraphQLNamedType]
) -> GraphQLType:
    """Rebuild ``type_`` with every ``TypeReference`` replaced by ``types[name]``.

    List and non-null wrappers are preserved; types without references are
    returned as they are.

    Raises:
        UnresolvedReferenceError: If a reference names a type not in ``types``
    """
    if is_non_null_type(type_):
        inner = replace_type_references(type_.of_type, types)  # type: ignore[attr-defined]
        return type_ if inner is type_.of_type else GraphQLNonNull(inner)  # type: ignore
    if is_list_type(type_):
        inner = replace_type_references(type_.of_type, types)  # type: ignore[attr-defined]
        return type_ if inner is type_.of_type else GraphQLList(inner)  # type: ignore
    if is_type_reference(type_):
        name = type_.name  # type: ignore[attr-defined]
        try:
            return types[name]
        except KeyError:
            raise UnresolvedReferenceError(name) from None
    return type_
