"""
Recursive resolution of type annotations into GraphQL types.

Nullability is inverted between the two systems: a Python annotation is
required unless it says ``Optional``, while a GraphQL type is nullable unless
wrapped in ``GraphQLNonNull``. The resolver therefore wraps every leaf and
reference in ``GraphQLNonNull`` and lets ``Optional`` strip that wrapping
from whatever it encloses.
"""

from typing import Any

from graphql import GraphQLList, GraphQLNonNull, GraphQLType

from .errors import ListElementTypeError
from .names import display_name, normalize_name
from .references import TypeReference, is_nullable_capable
from .registry import TypeRegistry, type_registry
from .wrappers import Modifier, classify, strip_annotated


def reference_name(type_: Any) -> str:
    """
    GraphQL type name targeted by a reference to ``type_``.

    Wrappers around the target are dropped, so ``Reference[Optional[Node]]``
    names ``Node``. Strings and forward references are taken as the name.
    """
    wrapper = classify(type_)
    while wrapper is not None and wrapper.wrapped_type is not type_:
        type_ = wrapper.wrapped_type
        wrapper = classify(type_)
    return normalize_name(display_name(type_))


class TypeResolver:
    """Resolves annotations against the types linked in a registry."""

    def __init__(self, registry: TypeRegistry | None = None):
        self.registry = registry if registry is not None else type_registry

    def resolve(self, type_: Any) -> GraphQLType | None:
        """
        Resolve an annotation into a GraphQL type.

        Args:
            type_: Python annotation (class, generic alias, union, forward
                reference or ``Reference[...]`` marker)

        Returns:
            The GraphQL type, or None if the annotation (or the leaf type it
            wraps) is not linked to a GraphQL type

        Raises:
            ListElementTypeError: If a list element type is linked to a
                GraphQL type that cannot be made non-null
        """
        type_ = strip_annotated(type_)
        wrapper = classify(type_)

        if wrapper is None:
            graphql_type = self.registry.lookup(type_)
            if graphql_type is None or not is_nullable_capable(graphql_type):
                return None
            return GraphQLNonNull(graphql_type)

        wrapped = wrapper.wrapped_type

        if wrapper.modifier is Modifier.OPTIONAL:
            inner = classify(wrapped)
            if inner is None:
                return self.registry.lookup(wrapped)
            if inner.modifier is Modifier.REFERENCE:
                return TypeReference(reference_name(inner.wrapped_type))
            return self.resolve(wrapped)

        if wrapper.modifier is Modifier.LIST:
            if classify(wrapped) is not None:
                element = self.resolve(wrapped)
                return GraphQLList(element) if element is not None else None

            element = self.registry.lookup(wrapped)
            if element is None:
                return None
            if not is_nullable_capable(element):
                name = display_name(type_)
                raise ListElementTypeError(
                    f'Cannot use type "{name}" as list. '
                    "Mapped GraphQL type cannot be a non-null list element.",
                    name,
                )
            return GraphQLList(GraphQLNonNull(element))

        return GraphQLNonNull(TypeReference(reference_name(wrapped)))
