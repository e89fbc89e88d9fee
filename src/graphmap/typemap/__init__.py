"""
Translation of Python type annotations into graphql-core types.

Key components:
- TypeRegistry: Python type to GraphQL type links, seeded with the primitives
- Wrapper classification: Optional, list and forward reference annotations
- TypeResolver: Recursive resolution with Python/GraphQL nullability inversion
- TypeMapper: Accessors demanding an output, input, named, interface or object type
- Loader: Registers links declared in a YAML file or through entry points

Example usage:
    from graphql import GraphQLField, GraphQLObjectType, GraphQLString
    from graphmap.typemap import link, get_output_type

    link(User, GraphQLObjectType("User", {"name": GraphQLField(GraphQLString)}))

    get_output_type(User, "viewer")            # User!
    get_output_type(User | None, "owner")      # User
    get_output_type(list[User], "friends")     # [User!]
"""

from .accessors import (
    TypeMapper,
    get_input_type,
    get_interface_type,
    get_named_type,
    get_object_type,
    get_output_type,
    type_mapper,
)
from .capabilities import is_map_representable, is_protocol
from .errors import (
    LinkError,
    ListElementTypeError,
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
    UnresolvedReferenceError,
)
from .identity import TypeIdentity
from .loader import load_type_links
from .names import display_name, normalize_name
from .references import TypeReference, replace_type_references
from .registry import TypeRegistry, link, type_registry
from .resolver import TypeResolver
from .wrappers import Modifier, Reference, Wrapper, classify

__all__ = [
    # Registry
    "TypeIdentity",
    "TypeRegistry",
    "link",
    "type_registry",
    # Resolution
    "Modifier",
    "Reference",
    "Wrapper",
    "classify",
    "TypeReference",
    "TypeResolver",
    "display_name",
    "normalize_name",
    "is_map_representable",
    "is_protocol",
    "replace_type_references",
    # Accessors
    "TypeMapper",
    "type_mapper",
    "get_input_type",
    "get_interface_type",
    "get_named_type",
    "get_object_type",
    "get_output_type",
    # Loader
    "load_type_links",
    # Errors
    "LinkError",
    "ListElementTypeError",
    "NotAProtocolError",
    "NotInputTypeError",
    "NotInterfaceTypeError",
    "NotNamedTypeError",
    "NotObjectTypeError",
    "NotOutputTypeError",
    "NotRepresentableError",
    "NullableTypeError",
    "TypeMappingError",
    "UnmappedTypeError",
    "UnresolvedReferenceError",
]
