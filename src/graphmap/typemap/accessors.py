"""
Narrowing accessors for resolved GraphQL types.

Each accessor resolves an annotation and then demands a GraphQL type
category, raising a ``TypeMappingError`` subclass whose message names the
annotation (and the field, where there is one) when it cannot deliver it.
"""

from typing import Any, NoReturn

from graphql import (
    GraphQLInputType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLType,
    get_named_type as unwrap_named_type,
    is_interface_type,
    is_named_type,
    is_non_null_type,
    is_object_type,
)

from graphmap.logging import get_logger, resolution_context

from .capabilities import is_map_representable, is_protocol
from .errors import (
    NotAProtocolError,
    NotInputTypeError,
    NotInterfaceTypeError,
    NotNamedTypeError,
    NotObjectTypeError,
    NotOutputTypeError,
    NotRepresentableError,
    NullableTypeError,
    TypeMappingError,
    UnmappedTypeError,
)
from .names import display_name
from .references import is_input_or_reference, is_output_or_reference
from .registry import TypeRegistry, type_registry
from .resolver import TypeResolver

logger = get_logger(__name__)

UNMAPPED = "Type does not map to a GraphQL type."


class TypeMapper:
    """
    Maps Python annotations to GraphQL types of a required category.

    Wraps a ``TypeRegistry`` (the process-wide one by default) and the
    resolver over it; schema builders own one mapper and call the accessor
    matching the role of each annotation.
    """

    def __init__(self, registry: TypeRegistry | None = None):
        self.registry = registry if registry is not None else type_registry
        self.resolver = TypeResolver(self.registry)

    def link(self, type_: Any, graphql_type: GraphQLType) -> None:
        self.registry.link(type_, graphql_type)

    def resolve(self, type_: Any) -> GraphQLType | None:
        return self.resolver.resolve(type_)

    def get_output_type(self, type_: Any, field: str) -> GraphQLOutputType:
        """
        Resolve the type of an output (result) field.

        Raises:
            NotRepresentableError: If the type cannot be represented as a
                GraphQL value and is not a protocol
            UnmappedTypeError: If no GraphQL type is linked for it
            NotOutputTypeError: If the linked type is an input-only type
        """
        name = display_name(type_)
        prefix = f'Cannot use type "{name}" for field "{field}". '

        with resolution_context(name, field):
            if not is_map_representable(type_, self.registry):
                self._fail(
                    NotRepresentableError,
                    prefix + "Type is not representable as a GraphQL value.",
                    name,
                    field,
                )

            graphql_type = self._resolve_or_fail(type_, prefix, name, field)

            if not is_output_or_reference(graphql_type):
                self._fail(
                    NotOutputTypeError,
                    prefix + "Mapped GraphQL type is not an output type.",
                    name,
                    field,
                )

        return graphql_type  # type: ignore[return-value]

    def get_input_type(self, type_: Any, field: str) -> GraphQLInputType:
        """
        Resolve the type of an input field or argument.

        Raises:
            UnmappedTypeError: If no GraphQL type is linked for it
            NotInputTypeError: If the linked type is an output-only type
        """
        name = display_name(type_)
        prefix = f'Cannot use type "{name}" for field "{field}". '

        with resolution_context(name, field):
            graphql_type = self._resolve_or_fail(type_, prefix, name, field)

            if not is_input_or_reference(graphql_type):
                self._fail(
                    NotInputTypeError,
                    prefix + "Mapped GraphQL type is not an input type.",
                    name,
                    field,
                )

        return graphql_type  # type: ignore[return-value]

    def get_named_type(self, type_: Any) -> GraphQLNamedType:
        """
        Resolve an annotation down to its named type, dropping list and
        non-null wrappers.
        """
        name = display_name(type_)
        prefix = f'Cannot use type "{name}" as named type. '

        with resolution_context(name):
            graphql_type = self._resolve_or_fail(type_, prefix, name)
            named_type = unwrap_named_type(graphql_type)

            if not is_named_type(named_type):
                self._fail(
                    NotNamedTypeError, prefix + "Mapped GraphQL type is not a named type.", name
                )

        return named_type

    def get_interface_type(self, type_: Any) -> GraphQLInterfaceType:
        """
        Resolve a protocol to the GraphQL interface linked to it.

        Raises:
            NotAProtocolError: If ``type_`` is a concrete type
            UnmappedTypeError: If no GraphQL type is linked for it
            NullableTypeError: If it resolves to a nullable type
            NotInterfaceTypeError: If the linked type is not an interface
        """
        name = display_name(type_)
        prefix = f'Cannot use type "{name}" as interface. '

        with resolution_context(name):
            if not is_protocol(type_):
                self._fail(NotAProtocolError, prefix + "Type is not a protocol.", name)

            graphql_type = self._resolve_or_fail(type_, prefix, name)

            if not is_non_null_type(graphql_type):
                self._fail(NullableTypeError, prefix + "Mapped GraphQL type is nullable.", name)

            interface_type = graphql_type.of_type  # type: ignore[union-attr]
            if not is_interface_type(interface_type):
                self._fail(
                    NotInterfaceTypeError,
                    prefix + "Mapped GraphQL type is not an interface type.",
                    name,
                )

        return interface_type

    def get_object_type(self, type_: Any) -> GraphQLObjectType:
        """
        Resolve a type to the GraphQL object type linked to it.

        Raises:
            UnmappedTypeError: If no GraphQL type is linked for it
            NullableTypeError: If it resolves to a nullable type
            NotObjectTypeError: If the linked type is not an object type
        """
        name = display_name(type_)
        prefix = f'Cannot use type "{name}" as object. '

        with resolution_context(name):
            graphql_type = self._resolve_or_fail(type_, prefix, name)

            if not is_non_null_type(graphql_type):
                self._fail(NullableTypeError, prefix + "Mapped GraphQL type is nullable.", name)

            object_type = graphql_type.of_type  # type: ignore[union-attr]
            if not is_object_type(object_type):
                self._fail(
                    NotObjectTypeError, prefix + "Mapped GraphQL type is not an object type.", name
                )

        return object_type

    def _resolve_or_fail(
        self, type_: Any, prefix: str, name: str, field: str | None = None
    ) -> GraphQLType:
        graphql_type = self.resolver.resolve(type_)
        if graphql_type is None:
            self._fail(UnmappedTypeError, prefix + UNMAPPED, name, field)
        return graphql_type  # type: ignore[return-value]

    @staticmethod
    def _fail(
        error_class: type[TypeMappingError], message: str, name: str, field: str | None = None
    ) -> NoReturn:
        logger.debug("Type mapping failed", error=error_class.__name__, message=message)
        raise error_class(message, name, field)


# Mapper over the process-wide registry
type_mapper = TypeMapper()


def get_output_type(type_: Any, field: str) -> GraphQLOutputType:
    return type_mapper.get_output_type(type_, field)


def get_input_type(type_: Any, field: str) -> GraphQLInputType:
    return type_mapper.get_input_type(type_, field)


def get_named_type(type_: Any) -> GraphQLNamedType:
    return type_mapper.get_named_type(type_)


def get_interface_type(type_: Any) -> GraphQLInterfaceType:
    return type_mapper.get_interface_type(type_)


def get_object_type(type_: Any) -> GraphQLObjectType:
    return type_mapper.get_object_type(type_)
