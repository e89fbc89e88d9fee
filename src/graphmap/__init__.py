"""
graphmap
Expose Python data types as GraphQL schema types
"""

__version__ = "0.1.0"

from .config import settings
from .logging import configure_logging, get_logger
from .typemap import (
    Reference,
    TypeMapper,
    TypeReference,
    TypeRegistry,
    TypeResolver,
    get_input_type,
    get_interface_type,
    get_named_type,
    get_object_type,
    get_output_type,
    link,
    load_type_links,
)
from .typemap.errors import (
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

__all__ = [
    "settings",
    "__version__",
    "configure_logging",
    "get_logger",
    "Reference",
    "TypeMapper",
    "TypeReference",
    "TypeRegistry",
    "TypeResolver",
    "get_input_type",
    "get_interface_type",
    "get_named_type",
    "get_object_type",
    "get_output_type",
    "link",
    "load_type_links",
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
