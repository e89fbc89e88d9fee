"""
Classification of wrapper annotations.

A wrapper is an annotation that modifies how its inner type appears in the
schema: ``Optional[T]`` makes it nullable, ``list[T]`` (and the other
homogeneous collections) makes it a list, and a forward reference defers it
to a named type declared elsewhere. Every other annotation is a leaf.
"""

import collections.abc
import types
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, ForwardRef, Generic, TypeVar, Union, get_args, get_origin

T = TypeVar("T")

NONE_TYPE = type(None)

LIST_ORIGINS = frozenset(
    {
        list,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
        collections.abc.Collection,
        collections.abc.Iterable,
    }
)

UNION_ORIGINS = frozenset({Union, types.UnionType})


class Modifier(str, Enum):
    OPTIONAL = "optional"
    LIST = "list"
    REFERENCE = "reference"


@dataclass(frozen=True)
class Wrapper:
    """A wrapper annotation split into its modifier and the type it wraps."""

    modifier: Modifier
    wrapped_type: Any


class Reference(Generic[T]):
    """Annotation marker for a field whose type is declared elsewhere by name.

    ``Reference[Node]`` and ``Reference["Node"]`` both resolve to a deferred
    reference to the GraphQL type named ``Node``, which allows self-referential
    and mutually recursive object types.
    """

    __slots__ = ()


def strip_annotated(type_: Any) -> Any:
    """Return the underlying type of ``Annotated[T, ...]``, or ``type_`` itself."""
    while get_origin(type_) is Annotated:
        type_ = get_args(type_)[0]
    return type_


def classify(type_: Any) -> Wrapper | None:
    """Classify an annotation as a wrapper, or return None for a leaf type."""
    type_ = strip_annotated(type_)

    if isinstance(type_, (str, ForwardRef)):
        return Wrapper(Modifier.REFERENCE, type_)

    origin = get_origin(type_)
    if origin is None:
        return None

    args = get_args(type_)

    if origin is Reference:
        return Wrapper(Modifier.REFERENCE, strip_annotated(args[0]))

    if origin in UNION_ORIGINS:
        members = [arg for arg in args if arg is not NONE_TYPE]
        if len(members) == 1 and len(members) < len(args):
            return Wrapper(Modifier.OPTIONAL, strip_annotated(members[0]))
        return None

    if origin in LIST_ORIGINS and len(args) == 1:
        return Wrapper(Modifier.LIST, strip_annotated(args[0]))

    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return Wrapper(Modifier.LIST, strip_annotated(args[0]))

    return None


def is_wrapper(type_: Any) -> bool:
    return classify(type_) is not None
