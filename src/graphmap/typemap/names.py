"""Display names for type descriptors."""

import types
from typing import Annotated, Any, ForwardRef, Union, get_args, get_origin

NONE_TYPE = type(None)


def display_name(type_: Any) -> str:
    """Return a human-readable name for a type descriptor.

    Classes use their ``__name__``, forward references the name they point
    to and strings are returned verbatim. Generic aliases and unions are
    spelled out from the names of their parts (``list[User]``,
    ``User | None``) without module prefixes.
    """
    if type_ is None or type_ is NONE_TYPE:
        return "None"
    if isinstance(type_, str):
        return type_
    if isinstance(type_, ForwardRef):
        return type_.__forward_arg__
    if type_ is Ellipsis:
        return "..."
    if isinstance(type_, (list, tuple)):
        return f"[{', '.join(display_name(arg) for arg in type_)}]"

    origin = get_origin(type_)
    if origin is None:
        name = getattr(type_, "__name__", None)
        return name if isinstance(name, str) else repr(type_).replace("typing.", "")

    args = get_args(type_)
    if origin is Annotated:
        return display_name(args[0])
    if origin is Union or origin is types.UnionType:
        return " | ".join(display_name(arg) for arg in args)

    origin_name = getattr(origin, "__name__", None) or display_name(origin)
    if not args:
        return origin_name
    return f"{origin_name}[{', '.join(display_name(arg) for arg in args)}]"


def normalize_name(name: str) -> str:
    """Turn the display name of a referenced type into a GraphQL type name.

    Synthetic names that start with an opening parenthesis keep only the text
    after it up to the first space; any other name is returned unchanged.

    >>> normalize_name("(Foo) -> Bar extra text")
    'Foo)'
    >>> normalize_name("Foo")
    'Foo'
    """
    if name.startswith("("):
        return name[1:].split(" ", 1)[0]
    return name
