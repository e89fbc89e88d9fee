"""Errors raised while mapping Python types to GraphQL types."""

from graphql import GraphQLError


class TypeMappingError(GraphQLError):
    """Base exception for type mapping failures.

    Carries the display name of the offending type and, for field accessors,
    the name of the field it was declared on.
    """

    def __init__(self, message: str, type_name: str, field_name: str | None = None):
        super().__init__(message)
        self.type_name = type_name
        self.field_name = field_name


class NotRepresentableError(TypeMappingError):
    """Type cannot be represented as a GraphQL value and is not a protocol."""

    pass


class UnmappedTypeError(TypeMappingError):
    """No GraphQL type is registered for the type."""

    pass


class NotOutputTypeError(TypeMappingError):
    pass


class NotInputTypeError(TypeMappingError):
    pass


class NotNamedTypeError(TypeMappingError):
    pass


class NotAProtocolError(TypeMappingError):
    """Interface lookup on a concrete type."""

    pass


class NullableTypeError(TypeMappingError):
    """Interface or object lookup resolved to a nullable GraphQL type."""

    pass


class NotInterfaceTypeError(TypeMappingError):
    pass


class NotObjectTypeError(TypeMappingError):
    pass


class ListElementTypeError(TypeMappingError):
    """A list element maps to a GraphQL type that cannot be wrapped as non-null."""

    pass


class LinkError(ValueError):
    """Raised when a link would register an unusable GraphQL type."""

    pass


class UnresolvedReferenceError(LookupError):
    """Raised when a deferred type reference names an unknown type."""

    def __init__(self, name: str):
        super().__init__(f'Unknown type "{name}" referenced in schema.')
        self.name = name
