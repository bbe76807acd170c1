import enum

import graphql

from ..types import Field


class TypeKind(enum.Enum):
    """Closed set of named type kinds the generator distinguishes.

    SCALAR & ENUM are leaves, they end a selection path.
    OBJECT & INTERFACE have fields to select.
    UNION has no fields of its own, only member types.
    INPUT_OBJECT appears only in argument positions.
    """

    SCALAR = enum.auto()
    ENUM = enum.auto()
    OBJECT = enum.auto()
    INTERFACE = enum.auto()
    UNION = enum.auto()
    INPUT_OBJECT = enum.auto()

    @property
    def is_leaf(self) -> bool:
        return self in (TypeKind.SCALAR, TypeKind.ENUM)

    @property
    def is_composite(self) -> bool:
        return self in (TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.UNION)


def unwrap(type_: graphql.GraphQLType) -> graphql.GraphQLNamedType:
    """Get the underlying named type which is not wrapped."""
    while isinstance(type_, graphql.GraphQLWrappingType):
        type_ = type_.of_type
    return type_


def unwrap_field_type(field: Field) -> graphql.GraphQLNamedType:
    return unwrap(field.type)


def kind_of(type_: graphql.GraphQLType) -> TypeKind:
    type_ = unwrap(type_)
    if isinstance(type_, graphql.GraphQLScalarType):
        return TypeKind.SCALAR
    if isinstance(type_, graphql.GraphQLEnumType):
        return TypeKind.ENUM
    if isinstance(type_, graphql.GraphQLObjectType):
        return TypeKind.OBJECT
    if isinstance(type_, graphql.GraphQLInterfaceType):
        return TypeKind.INTERFACE
    if isinstance(type_, graphql.GraphQLUnionType):
        return TypeKind.UNION
    if isinstance(type_, graphql.GraphQLInputObjectType):
        return TypeKind.INPUT_OBJECT
    raise TypeError(f"Type {type_.__class__.__name__} is not supported.")


def is_leaf(type_: graphql.GraphQLType) -> bool:
    return kind_of(type_).is_leaf


def is_composite(type_: graphql.GraphQLType) -> bool:
    return kind_of(type_).is_composite


def is_enum(type_: graphql.GraphQLType) -> bool:
    return kind_of(type_) is TypeKind.ENUM


def is_scalar(type_: graphql.GraphQLType) -> bool:
    return kind_of(type_) is TypeKind.SCALAR


def make_type_name(type_: graphql.GraphQLType) -> str:
    """Create a name for a type, e.g. `NonNullListString`."""
    name = ""
    while isinstance(type_, graphql.GraphQLWrappingType):
        name += type_.__class__.__name__.replace("GraphQL", "")
        type_ = type_.of_type
    return f"{name}{type_.name}"
