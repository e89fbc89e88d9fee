"""
Shared pytest fixtures and configuration for all tests.
"""

from abc import ABC, abstractmethod
from collections.abc import Generator
from dataclasses import dataclass
from typing import Protocol

import pytest
from graphql import (
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLString,
)

from graphmap.typemap import TypeMapper, TypeRegistry, TypeResolver


class Named(Protocol):
    name: str


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


@dataclass
class CustomStruct:
    name: str


@dataclass
class UnregisteredStruct:
    name: str


@dataclass
class CustomInput:
    name: str


class Opaque:
    """Plain class that is neither a dataclass, a model nor a protocol."""


@pytest.fixture
def named_interface() -> GraphQLInterfaceType:
    return GraphQLInterfaceType("Named", {"name": GraphQLField(GraphQLString)})


@pytest.fixture
def custom_object(named_interface: GraphQLInterfaceType) -> GraphQLObjectType:
    return GraphQLObjectType(
        "Custom",
        {"name": GraphQLField(GraphQLString)},
        interfaces=[named_interface],
    )


@pytest.fixture
def custom_input() -> GraphQLInputObjectType:
    return GraphQLInputObjectType("CustomInput", {"name": GraphQLInputField(GraphQLString)})


@pytest.fixture
def registry() -> Generator[TypeRegistry, None, None]:
    """Fresh strict registry per test."""
    yield TypeRegistry(strict=True)


@pytest.fixture
def resolver(registry: TypeRegistry) -> TypeResolver:
    return TypeResolver(registry)


@pytest.fixture
def mapper(
    registry: TypeRegistry,
    custom_object: GraphQLObjectType,
    custom_input: GraphQLInputObjectType,
    named_interface: GraphQLInterfaceType,
) -> TypeMapper:
    """Mapper over a registry with the test object, input and interface types linked."""
    registry.link(CustomStruct, custom_object)
    registry.link(CustomInput, custom_input)
    registry.link(Named, named_interface)
    return TypeMapper(registry)
