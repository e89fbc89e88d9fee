"""
Capability checks on type descriptors.

``is_protocol`` reports whether an annotation names an abstract contract
(a ``typing.Protocol`` or an abstract base class) rather than a concrete type.
Such types back GraphQL interfaces and are exempt from the representability
check applied to output fields.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import enum
import inspect
from typing import TYPE_CHECKING, Any, ForwardRef, get_origin, is_typeddict

from pydantic import BaseModel

from .wrappers import NONE_TYPE, Modifier, classify, strip_annotated

if TYPE_CHECKING:
    from .registry import TypeRegistry

# Leaf types whose values graphql-core can serialize without a custom scalar
REPRESENTABLE_BASES: tuple[type, ...] = (
    str,
    int,
    float,
    bool,
    NONE_TYPE,
    list,
    collections.abc.Mapping,
    enum.Enum,
    BaseModel,
)


def is_protocol(type_: Any) -> bool:
    """Check whether ``type_`` is an abstract capability contract.

    Protocol classes qualify, classes that merely implement a protocol do not.
    Abstract base classes with unimplemented abstract methods also qualify.
    """
    type_ = strip_annotated(type_)
    if not inspect.isclass(type_):
        return False
    if type_.__dict__.get("_is_protocol", False):
        return True
    return inspect.isabstract(type_)


def _is_named_tuple(type_: type) -> bool:
    return issubclass(type_, tuple) and hasattr(type_, "_fields")


def is_map_representable(type_: Any, registry: TypeRegistry | None = None) -> bool:
    """Check whether values of ``type_`` can be represented as GraphQL values.

    Wrappers are checked through to the type they wrap. Protocols always pass
    since they are resolved through their concrete implementations. Names of
    forward references pass because the named type is checked where it is
    declared.

    Args:
        type_: Annotation to check
        registry: When given, leaf types linked to any GraphQL type pass as
            well (scalars serialize their own values, composite types read
            fields from the object)
    """
    if is_protocol(type_):
        return True

    wrapper = classify(type_)
    if wrapper is not None:
        if wrapper.modifier is Modifier.REFERENCE and isinstance(
            wrapper.wrapped_type, (str, ForwardRef)
        ):
            return True
        return is_map_representable(wrapper.wrapped_type, registry)

    type_ = strip_annotated(type_)

    if registry is not None and registry.lookup(type_) is not None:
        return True

    leaf = get_origin(type_) or type_
    if not inspect.isclass(leaf):
        return False

    return (
        issubclass(leaf, REPRESENTABLE_BASES)
        or dataclasses.is_dataclass(leaf)
        or is_typeddict(leaf)
        or _is_named_tuple(leaf)
    )
